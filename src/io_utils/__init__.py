"""Input and output helpers for configuration and files.

Exports:
    load_app_config: Read ``config/app.yaml`` into an ``AppConfig``.
    read_input_text: Read a file, or stdin for ``-``.
    atomic_write: Write files atomically.
"""

from __future__ import annotations

from .loader import STDIN_MARKER, clear_config_cache, load_app_config, read_input_text
from .persistence import atomic_write

__all__ = [
    "STDIN_MARKER",
    "clear_config_cache",
    "load_app_config",
    "read_input_text",
    "atomic_write",
]
