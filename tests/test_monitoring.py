"""Tests for monitoring helpers."""

import sys
from types import SimpleNamespace

from observability import monitoring


class ConsoleOptions:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def _dummy_logfire(called: dict[str, object], instruments: list[str], debug=None):
    return SimpleNamespace(
        ConsoleOptions=ConsoleOptions,
        configure=lambda **kwargs: called.update(kwargs),
        instrument_pydantic=lambda: instruments.append("pydantic"),
        debug=debug or (lambda *a, **k: None),
    )


def test_init_logfire_configures_and_instruments(monkeypatch):
    called: dict[str, object] = {}
    instruments: list[str] = []
    monkeypatch.setattr(monitoring, "logfire", _dummy_logfire(called, instruments))

    monitoring.init_logfire("token", "info")

    assert called["token"] == "token"
    assert called["send_to_logfire"] == "if-token-present"
    assert called["service_name"] == "model-test-generator"
    assert called["console"].min_log_level == "info"
    assert called["console"].output is sys.stderr
    assert instruments == ["pydantic"]


def test_init_logfire_without_token(monkeypatch):
    called: dict[str, object] = {}
    monkeypatch.setattr(monitoring, "logfire", _dummy_logfire(called, []))
    monkeypatch.delenv("MTG_LOGFIRE_TOKEN", raising=False)

    monitoring.init_logfire()

    assert "token" in called and called["token"] is None
    assert called["console"].min_log_level == "warn"


def test_init_logfire_reads_environment_token(monkeypatch):
    called: dict[str, object] = {}
    monkeypatch.setattr(monitoring, "logfire", _dummy_logfire(called, []))
    monkeypatch.setenv("MTG_LOGFIRE_TOKEN", "env-token")

    monitoring.init_logfire()

    assert called["token"] == "env-token"


def test_init_logfire_masks_token(monkeypatch):
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(
        monitoring,
        "logfire",
        _dummy_logfire({}, [], debug=lambda *a, **k: calls.append(k)),
    )

    monitoring.init_logfire("secret-token", "info")

    assert calls[0]["token"] == "secr..."
    assert "secret-token" not in calls[0]["token"]


def test_init_logfire_skips_missing_pydantic_instrumentation(monkeypatch):
    called: dict[str, object] = {}
    dummy = SimpleNamespace(
        ConsoleOptions=ConsoleOptions,
        configure=lambda **kwargs: called.update(kwargs),
        debug=lambda *a, **k: None,
    )
    monkeypatch.setattr(monitoring, "logfire", dummy)

    monitoring.init_logfire()

    assert called["service_name"] == "model-test-generator"
