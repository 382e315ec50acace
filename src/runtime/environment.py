# SPDX-License-Identifier: MIT
"""Runtime environment singleton for shared settings and capabilities."""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING

import logfire

from core.session import GeneratorSession
from utils import (
    ClipboardWriter,
    CommandClipboardWriter,
    JSONPreferenceStore,
    PreferenceStore,
)

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from runtime.settings import Settings


class RuntimeEnv:
    """Thread-safe singleton storing application settings and host capabilities."""

    _instance: "RuntimeEnv" | None = None
    _lock = Lock()

    def __init__(self, settings: "Settings") -> None:
        """Initialise the runtime environment."""
        self.settings = settings
        self._state_lock = Lock()
        self._preferences: PreferenceStore = JSONPreferenceStore(
            settings.preferences_file
        )
        self._clipboard: ClipboardWriter = CommandClipboardWriter()
        logfire.debug("RuntimeEnv created", settings=repr(settings))

    @property
    def preferences(self) -> PreferenceStore:
        """Return the active preference store."""
        return self._preferences

    @preferences.setter
    def preferences(self, store: PreferenceStore) -> None:
        with self._state_lock:
            self._preferences = store

    @property
    def clipboard(self) -> ClipboardWriter:
        """Return the active clipboard writer."""
        return self._clipboard

    @clipboard.setter
    def clipboard(self, writer: ClipboardWriter) -> None:
        with self._state_lock:
            self._clipboard = writer

    def new_session(self) -> GeneratorSession:
        """Return a fresh form session wired to the shared capabilities."""
        return GeneratorSession(
            preferences=self.preferences,
            clipboard=self.clipboard,
            default_type_name=self.settings.default_type_name,
            format_output=self.settings.format_output,
        )

    @classmethod
    def initialize(cls, settings: "Settings") -> "RuntimeEnv":
        """Replace the process-wide environment with one built from ``settings``."""
        with logfire.span("runtime_env.initialize"):
            with cls._lock:
                logfire.info("Initialising runtime environment")
                cls._instance = cls(settings)
                return cls._instance

    @classmethod
    def instance(cls) -> "RuntimeEnv":
        """Return the environment set up by :meth:`initialize`.

        Raises:
            RuntimeError: When no environment has been initialised yet.
        """
        current = cls._instance
        if current is None:
            logfire.error("Runtime environment requested before initialize()")
            raise RuntimeError("RuntimeEnv has not been initialised")
        return current

    @classmethod
    def reset(cls) -> None:
        """Clear the active runtime environment."""
        with cls._lock:
            cls._instance = None


__all__ = ["RuntimeEnv"]
