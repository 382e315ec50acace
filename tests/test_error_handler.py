"""Tests for error reporting hooks."""

import io

from utils import error_handler
from utils.error_handler import LoggingErrorHandler, StreamErrorHandler


def test_logging_handler_includes_exception(monkeypatch) -> None:
    calls: list[tuple[str, dict]] = []
    monkeypatch.setattr(
        error_handler.logfire, "error", lambda msg, **kw: calls.append((msg, kw))
    )

    LoggingErrorHandler().handle("Error reading file x", ValueError("boom"))

    assert calls == [
        (
            "{message}: {error}",
            {"message": "Error reading file x", "error": "boom", "error_type": "ValueError"},
        )
    ]


def test_stream_handler_echoes_message(monkeypatch) -> None:
    monkeypatch.setattr(error_handler.logfire, "error", lambda *a, **k: None)
    stream = io.StringIO()

    StreamErrorHandler(stream).handle("File not found: x.json")

    assert stream.getvalue() == "File not found: x.json\n"
