"""Utility interfaces and implementations."""

from .clipboard import ClipboardWriter, CommandClipboardWriter, MemoryClipboardWriter
from .error_handler import ErrorHandler, LoggingErrorHandler, StreamErrorHandler
from .preference_store import (
    JSONPreferenceStore,
    MemoryPreferenceStore,
    PreferenceStore,
)

__all__ = [
    "ClipboardWriter",
    "CommandClipboardWriter",
    "MemoryClipboardWriter",
    "PreferenceStore",
    "JSONPreferenceStore",
    "MemoryPreferenceStore",
    "ErrorHandler",
    "LoggingErrorHandler",
    "StreamErrorHandler",
]
