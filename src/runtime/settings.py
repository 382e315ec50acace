# SPDX-License-Identifier: MIT
"""Centralised application configuration management.

This module exposes :class:`Settings`, a ``pydantic-settings`` model that
combines values sourced from the YAML configuration file and environment
variables. Environment variables take precedence over file-based values and
the merged configuration is validated before use.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from constants import DEFAULT_PREFERENCES_FILE, DEFAULT_TYPE_NAME
from io_utils.loader import load_app_config
from models import ensure_identifier


class Settings(BaseSettings):
    """Application settings combining file-based and environment configuration."""

    log_level: str = Field("INFO", description="Logging verbosity level.")
    default_type_name: str = Field(
        DEFAULT_TYPE_NAME,
        min_length=1,
        description="Type name used when the model source declares none.",
    )
    format_output: bool = Field(
        True, description="Collapse redundant whitespace in generated code."
    )
    preferences_file: Path = Field(
        DEFAULT_PREFERENCES_FILE,
        description="JSON file storing UI preferences such as the theme.",
    )
    host: str = Field("127.0.0.1", description="Interface the web form binds to.")
    port: int = Field(5000, ge=1, le=65535, description="Web form port.")
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )

    model_config = SettingsConfigDict(
        env_prefix="MTG_", env_file=".env", extra="ignore"
    )

    @field_validator("default_type_name")
    @classmethod
    def _validate_identifier(cls, value: str) -> str:
        """Reject environment overrides that cannot name a Dart type."""

        return ensure_identifier(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # File values arrive as init kwargs; the environment overrides them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate application settings.

    Configuration values are read from the application configuration file and
    then merged with environment variables using ``pydantic-settings``. When a
    value is provided in both sources the environment variable wins. A ``.env``
    file in the working directory is loaded automatically when present. The
    optional ``config_path`` parameter allows overriding the default
    ``config/app.yaml`` location.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Settings: Fully validated application configuration.

    Raises:
        RuntimeError: If configuration values are invalid.
    """
    if config_path:
        cfg_path = Path(config_path)
        config = load_app_config(cfg_path.parent, cfg_path.name)
    else:
        config = load_app_config()
    try:
        return Settings(**config.model_dump())
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc
