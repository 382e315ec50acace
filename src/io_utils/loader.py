# SPDX-License-Identifier: MIT
"""Utilities for loading configuration and user input files.

The helpers in this module centralise file-system access so callers receive
concise exceptions and every read is traced.
"""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path
from typing import TextIO, TypeVar

import logfire
import yaml
from pydantic import TypeAdapter, ValidationError

from models import AppConfig
from utils import ErrorHandler, LoggingErrorHandler

STDIN_MARKER = "-"

T = TypeVar("T")


def _read_text(path: Path, handler: ErrorHandler) -> str:
    """Return the UTF-8 text stored at ``path``.

    A missing file is reported and re-raised as-is; any other read or decode
    failure becomes a :class:`RuntimeError`.
    """
    with logfire.span("input.read_file", attributes={"path": str(path)}):
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            handler.handle(f"File not found: {path}", exc)
            raise
        except (OSError, UnicodeDecodeError) as exc:
            handler.handle(f"Cannot read {path}", exc)
            raise RuntimeError(f"Cannot read {path}: {exc}") from exc
        logfire.debug("Loaded input file", path=str(path), chars=len(text))
        return text


def _load_yaml(path: Path, schema: type[T], handler: ErrorHandler) -> T:
    """Parse ``path`` as YAML and validate the mapping against ``schema``.

    An empty document validates as ``{}`` so every field takes its default.
    """
    with logfire.span("config.load_yaml", attributes={"path": str(path)}):
        text = _read_text(path, handler)
        try:
            document = yaml.safe_load(text) or {}
            return TypeAdapter(schema).validate_python(document)
        except (yaml.YAMLError, ValidationError) as exc:
            handler.handle(f"Invalid configuration file {path}", exc)
            raise RuntimeError(f"Invalid configuration file {path}: {exc}") from exc


@lru_cache(maxsize=None)
def load_app_config(
    base_dir: Path | str = Path("config"),
    filename: Path | str = Path("app.yaml"),
) -> AppConfig:
    """Return the :class:`AppConfig` stored in ``base_dir/filename``.

    A missing file yields the built-in defaults. Results are cached for the
    lifetime of the process; see :func:`clear_config_cache`.
    """
    path = Path(base_dir) / filename
    if not path.is_file():
        logfire.debug("No configuration file; using defaults", path=str(path))
        return AppConfig()
    return _load_yaml(path, AppConfig, LoggingErrorHandler())


def read_input_text(
    location: Path | str,
    stdin: TextIO | None = None,
    error_handler: ErrorHandler | None = None,
) -> str:
    """Return text from ``location`` or from ``stdin`` when it is ``-``."""
    if str(location) == STDIN_MARKER:
        stream = stdin or sys.stdin
        with logfire.span("input.read_stdin"):
            return stream.read()
    return _read_text(Path(location), error_handler or LoggingErrorHandler())


def clear_config_cache() -> None:
    """Forget any configuration loaded so far."""
    load_app_config.cache_clear()


__all__ = [
    "STDIN_MARKER",
    "clear_config_cache",
    "load_app_config",
    "read_input_text",
]
