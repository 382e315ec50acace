# SPDX-License-Identifier: MIT
"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from models import AppConfig, GeneratedTests, GenerationRequest


def test_app_config_defaults() -> None:
    config = AppConfig()
    assert config.default_type_name == "Model"
    assert config.format_output is True
    assert config.port == 5000


def test_app_config_rejects_invalid_type_name() -> None:
    with pytest.raises(ValidationError):
        AppConfig(default_type_name="1Model")


def test_app_config_rejects_out_of_range_port() -> None:
    with pytest.raises(ValidationError):
        AppConfig(port=0)


def test_app_config_forbids_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"theme": "dark"})


def test_generation_request_defaults() -> None:
    request = GenerationRequest(json_text="{}")
    assert request.model_source == ""
    assert request.format_output is True


def test_generated_tests_requires_type_name() -> None:
    with pytest.raises(ValidationError):
        GeneratedTests(type_name="", code="")
