"""User-facing messages, generation defaults and the preferences location."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_TYPE_NAME = "Model"

INVALID_JSON_MESSAGE = "Invalid JSON input"
COPY_SUCCESS_MESSAGE = "Unit tests copied to clipboard!"
COPY_FAILURE_MESSAGE = "Failed to copy!"

THEME_KEY = "theme"

DEFAULT_PREFERENCES_FILE = (
    Path(
        os.path.expandvars(
            os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
        )
    )
    / "model-test-generator"
    / "preferences.json"
)

__all__ = [
    "COPY_FAILURE_MESSAGE",
    "COPY_SUCCESS_MESSAGE",
    "DEFAULT_PREFERENCES_FILE",
    "DEFAULT_TYPE_NAME",
    "INVALID_JSON_MESSAGE",
    "THEME_KEY",
]
