"""Whitespace clean-up for generated test code."""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s{2,}")
_BLANK_LINES = re.compile(r"\n\s*\n")


def format_dart_code(code: str) -> str:
    """Collapse whitespace runs and blank lines, then trim ``code``.

    Applying the formatter to its own output returns the same text.
    """

    collapsed = _WHITESPACE_RUN.sub(" ", code)
    collapsed = _BLANK_LINES.sub("\n\n", collapsed)
    return collapsed.strip()


__all__ = ["format_dart_code"]
