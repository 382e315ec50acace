"""Preference storage abstractions."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path

import logfire
from pydantic_core import from_json, to_json


class PreferenceStore(ABC):
    """Interface for reading and writing small string preferences.

    Stores hold a handful of keys such as the UI theme. Reads of unknown keys
    return ``None`` rather than raising.
    """

    @abstractmethod
    def read(self, key: str) -> str | None:
        """Return the stored value for ``key`` or ``None`` when unset."""

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Persist ``value`` under ``key``."""


class MemoryPreferenceStore(PreferenceStore):
    """Keep preferences in a dictionary for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._values.get(key)

    def write(self, key: str, value: str) -> None:
        self._values[key] = value


class JSONPreferenceStore(PreferenceStore):
    """Persist preferences as a JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Return the backing file location."""
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return {}
        try:
            data = from_json(raw)
        except ValueError as exc:
            logfire.warning(
                "Ignoring unreadable preferences file",
                path=str(self._path),
                error=str(exc),
            )
            return {}
        if not isinstance(data, dict):
            logfire.warning("Preferences file is not an object", path=str(self._path))
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def read(self, key: str) -> str | None:
        """Return the value stored for ``key``.

        Missing or unreadable files behave like an empty store.
        """
        with logfire.span("preferences.read", attributes={"key": key}):
            return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` and replace the file atomically.

        Args:
            key: Preference name.
            value: Preference value.
        """
        with logfire.span(
            "preferences.write", attributes={"key": key, "path": str(self._path)}
        ):
            data = self._load()
            data[key] = value
            tmp_path = self._path.with_suffix(".tmp")
            self._path.parent.mkdir(parents=True, exist_ok=True)
            try:
                with open(tmp_path, "wb") as fh:
                    fh.write(to_json(data, indent=2))
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_path, self._path)
            finally:
                if tmp_path.exists():
                    tmp_path.unlink()
            logfire.debug("Wrote preferences", path=str(self._path), keys=len(data))


__all__ = ["JSONPreferenceStore", "MemoryPreferenceStore", "PreferenceStore"]
