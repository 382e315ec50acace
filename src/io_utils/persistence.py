# SPDX-License-Identifier: MIT
"""Utilities for safe file writes."""

from __future__ import annotations

import os
from pathlib import Path

import logfire


def atomic_write(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` atomically.

    Args:
        path: Destination file to replace.
        text: Full file contents.

    The function writes to ``path`` with a ``.tmp`` suffix, flushes and
    syncs the temporary file to disk, then performs :func:`os.replace` to
    ensure the final file is updated atomically.
    """
    with logfire.span("fs.atomic_write", attributes={"path": str(path)}):
        tmp_path = Path(f"{path}.tmp")
        tmp_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(tmp_path, "w", encoding="utf-8") as handle:
                handle.write(text)
                if not text.endswith("\n"):
                    handle.write("\n")
                # Ensure data is written to disk before the atomic replace
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
        try:
            size = path.stat().st_size
        except OSError:
            size = 0
        logfire.debug("Atomic write complete", path=str(path), bytes=size)


__all__ = ["atomic_write"]
