# SPDX-License-Identifier: MIT
"""Decode JSON samples and extract the model type name from source text.

The type name lookup is a lexical heuristic: the first ``class <identifier>``
occurrence wins. Nothing here attempts to parse the model source.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

import logfire

from constants import DEFAULT_TYPE_NAME, INVALID_JSON_MESSAGE

CLASS_NAME_PATTERN = re.compile(r"class (\w+)")
LONE_SURROGATE_PATTERN = re.compile(r"[\ud800-\udfff]")
# Deeper samples overflow the indented encoder used for the embedded literal.
MAX_JSON_DEPTH = 500


class InvalidJSONInputError(ValueError):
    """Raised when the JSON sample cannot be decoded."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(INVALID_JSON_MESSAGE)
        self.detail = detail


def _reject_constant(name: str) -> Any:
    """Refuse ``NaN`` and ``Infinity`` literals, which are not valid JSON."""

    raise ValueError(f"Unsupported JSON constant: {name}")


def _unencodable_reason(value: Any) -> str | None:
    """Return why ``value`` cannot be rendered as UTF-8 source, if it cannot."""

    pending: list[tuple[Any, int]] = [(value, 0)]
    while pending:
        item, depth = pending.pop()
        if isinstance(item, str):
            if LONE_SURROGATE_PATTERN.search(item):
                return "unpaired surrogate escape"
        elif isinstance(item, (dict, list)):
            if depth >= MAX_JSON_DEPTH:
                return f"nesting deeper than {MAX_JSON_DEPTH} levels"
            children = item if isinstance(item, list) else [*item, *item.values()]
            pending.extend((child, depth + 1) for child in children)
    return None


def extract_type_name(source: str, default: str = DEFAULT_TYPE_NAME) -> str:
    """Return the first class name declared in ``source`` or ``default``."""

    match = CLASS_NAME_PATTERN.search(source or "")
    if match is None:
        logfire.debug("No class declaration found; using default", default=default)
        return default
    return match.group(1)


def decode_json(text: str) -> Any:
    """Decode ``text`` as JSON.

    Args:
        text: Raw JSON text as entered by the user.

    Returns:
        The decoded value. Object key order is preserved.

    Raises:
        InvalidJSONInputError: If ``text`` is not valid JSON, nests deeper
            than ``MAX_JSON_DEPTH`` or escapes an unpaired UTF-16 surrogate.
    """

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError) as exc:
        logfire.debug("Rejected JSON input", error=str(exc))
        raise InvalidJSONInputError(str(exc)) from exc
    reason = _unencodable_reason(data)
    if reason is not None:
        logfire.debug("Rejected JSON input", error=reason)
        raise InvalidJSONInputError(reason)
    return data


def shape_entries(value: Any) -> list[tuple[str, Any]]:
    """Return the ``(field, value)`` pairs of a decoded JSON object.

    Values that are not objects yield no entries so generation still produces
    a document with empty assertion bodies.
    """

    if isinstance(value, Mapping):
        return [(str(key), item) for key, item in value.items()]
    logfire.warning(
        "JSON input is not an object; generating empty assertions",
        kind=type(value).__name__,
    )
    return []


__all__ = [
    "CLASS_NAME_PATTERN",
    "InvalidJSONInputError",
    "decode_json",
    "extract_type_name",
    "shape_entries",
]
