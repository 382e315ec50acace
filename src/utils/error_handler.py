"""Reporting hooks for recoverable input and configuration problems."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

import logfire


class ErrorHandler(ABC):
    """Receives a short description of a failure before it propagates."""

    @abstractmethod
    def handle(self, message: str, exc: Exception | None = None) -> None:
        """Report ``message``, optionally caused by ``exc``."""


class LoggingErrorHandler(ErrorHandler):
    """Send failures to Logfire at error level."""

    def handle(self, message: str, exc: Exception | None = None) -> None:
        if exc is None:
            logfire.error("{message}", message=message)
            return
        logfire.error(
            "{message}: {error}",
            message=message,
            error=str(exc),
            error_type=type(exc).__name__,
        )


class StreamErrorHandler(LoggingErrorHandler):
    """Log failures and echo the message to a text stream.

    Used by the command line so users see why an input file was rejected
    without raising the console log level.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def handle(self, message: str, exc: Exception | None = None) -> None:
        super().handle(message, exc)
        print(message, file=self._stream or sys.stderr)
