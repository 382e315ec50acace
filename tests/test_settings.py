# SPDX-License-Identifier: MIT
"""Tests for configuration loading."""

from pathlib import Path

import pytest

from runtime.settings import load_settings


def test_load_settings_defaults(tmp_path) -> None:
    """The bundled configuration should populate the settings model."""
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.default_type_name == "Model"
    assert settings.format_output is True
    assert settings.host == "127.0.0.1"
    assert settings.port == 5000
    assert settings.preferences_file == tmp_path / "preferences.json"


def test_load_settings_reads_config_path(tmp_path) -> None:
    config = tmp_path / "custom.yaml"
    config.write_text(
        "default_type_name: Person\nformat_output: false\nport: 8080\n",
        encoding="utf-8",
    )
    settings = load_settings(config)
    assert settings.default_type_name == "Person"
    assert settings.format_output is False
    assert settings.port == 8080


def test_environment_overrides_config_file(monkeypatch, tmp_path) -> None:
    config = tmp_path / "custom.yaml"
    config.write_text("default_type_name: Person\n", encoding="utf-8")
    monkeypatch.setenv("MTG_DEFAULT_TYPE_NAME", "Widget")
    monkeypatch.setenv("MTG_FORMAT_OUTPUT", "0")
    settings = load_settings(config)
    assert settings.default_type_name == "Widget"
    assert settings.format_output is False


def test_missing_config_file_uses_defaults(tmp_path) -> None:
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings.default_type_name == "Model"


def test_invalid_environment_value_raises(monkeypatch) -> None:
    monkeypatch.setenv("MTG_PORT", "not-a-port")
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        load_settings()


def test_invalid_config_file_raises(tmp_path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("default_type_name: 'not an identifier'\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        load_settings(config)


def test_logfire_token_hidden_from_repr(monkeypatch) -> None:
    monkeypatch.setenv("MTG_LOGFIRE_TOKEN", "secret-token")
    settings = load_settings()
    assert settings.logfire_token == "secret-token"
    assert "secret-token" not in repr(settings)
    assert isinstance(settings.preferences_file, Path)


def test_environment_type_name_must_be_identifier(monkeypatch) -> None:
    monkeypatch.setenv("MTG_DEFAULT_TYPE_NAME", "my type")
    with pytest.raises(RuntimeError, match="default_type_name"):
        load_settings()
