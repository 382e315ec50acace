# SPDX-License-Identifier: MIT
"""Test configuration for model-test-generator.

Keeps Logfire local and silent, points preferences at a temporary file and
resets process-wide state between tests.
"""

from __future__ import annotations

import logfire
import pytest

from io_utils import clear_config_cache
from observability import telemetry
from runtime.environment import RuntimeEnv
from runtime.settings import load_settings
from utils import MemoryClipboardWriter

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _isolate_state(monkeypatch, tmp_path):
    """Provide a private preferences file and fresh global state."""

    for name in ("MTG_DEFAULT_TYPE_NAME", "MTG_FORMAT_OUTPUT", "MTG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MTG_PREFERENCES_FILE", str(tmp_path / "preferences.json"))
    clear_config_cache()
    telemetry.reset()
    RuntimeEnv.reset()
    yield
    RuntimeEnv.reset()
    clear_config_cache()


@pytest.fixture()
def runtime_env() -> RuntimeEnv:
    """Initialise the runtime with an in-memory clipboard."""

    env = RuntimeEnv.initialize(load_settings())
    env.clipboard = MemoryClipboardWriter()
    return env
