# SPDX-License-Identifier: MIT
"""Pydantic models describing generation requests, results and configuration.

These definitions act as the contract between the command-line interface, the
web form and the generation core.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants import DEFAULT_PREFERENCES_FILE, DEFAULT_TYPE_NAME

Theme = Literal["light", "dark"]


def ensure_identifier(value: str) -> str:
    """Return ``value`` if it can name a Dart type, else raise ``ValueError``."""

    if not value.isidentifier():
        raise ValueError("default_type_name must be a valid identifier")
    return value


class StrictModel(BaseModel):
    """Base model with strict settings to prevent shape drift."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)


class GenerationRequest(StrictModel):
    """Raw user input for a single generation."""

    json_text: str = Field(..., description="JSON sample as entered by the user.")
    model_source: str = Field(
        "", description="Model class source the type name is taken from."
    )
    format_output: bool = Field(
        True, description="Collapse redundant whitespace in the generated code."
    )


class GeneratedTests(StrictModel):
    """Generated ``flutter_test`` document and a summary of its inputs."""

    type_name: Annotated[
        str, Field(min_length=1, description="Type constructed by the tests.")
    ]
    field_count: int = Field(
        0, ge=0, description="Number of top-level fields asserted per group."
    )
    code: str = Field(..., description="Generated test source.")


class AppConfig(StrictModel):
    """Top-level application configuration controlling generation behaviour."""

    log_level: Annotated[
        str, Field(min_length=1, description="Logging verbosity level.")
    ] = "INFO"
    default_type_name: Annotated[
        str,
        Field(
            min_length=1,
            description="Type name used when the model source declares none.",
        ),
    ] = DEFAULT_TYPE_NAME
    format_output: bool = Field(
        True, description="Collapse redundant whitespace in generated code."
    )
    preferences_file: Path = Field(
        DEFAULT_PREFERENCES_FILE,
        description="JSON file storing UI preferences such as the theme.",
    )
    host: Annotated[
        str, Field(min_length=1, description="Interface the web form binds to.")
    ] = "127.0.0.1"
    port: Annotated[
        int, Field(ge=1, le=65535, description="Port the web form listens on.")
    ] = 5000

    @field_validator("default_type_name")
    @classmethod
    def _validate_identifier(cls, value: str) -> str:
        """Ensure the fallback type name is usable as an identifier."""

        return ensure_identifier(value)


__all__ = [
    "AppConfig",
    "GeneratedTests",
    "GenerationRequest",
    "StrictModel",
    "Theme",
    "ensure_identifier",
]
