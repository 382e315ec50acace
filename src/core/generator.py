# SPDX-License-Identifier: MIT
"""Generate ``flutter_test`` boilerplate from a JSON sample.

The generated suite contains three tests for the model type:

* ``Validate Model`` builds the model with ``fromJson`` and checks each field.
* ``Validate Json`` converts the model back with ``toJson`` and checks each key.
* ``Validate Props`` compares ``model.props`` with the sample values in order.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

import logfire

from constants import DEFAULT_TYPE_NAME
from models import GeneratedTests, GenerationRequest

from .formatter import format_dart_code
from .shape import decode_json, extract_type_name, shape_entries

TEST_TEMPLATE = """
import 'package:flutter_test/flutter_test.dart';

void main() {{
  final res = {res};

  group("{name} Unit Test", () {{
    test("{name} Validate Model", () {{
      final json2model = {name}.fromJson(res);

      {model_expectations}
    }});

    test("{name} Validate Json", () {{
      final model2Json = {name}.fromJson(res);
      final jsonMap = model2Json.toJson();

      {json_expectations}
    }});

    test("{name} Validate Props", () {{
      final model = {name}.fromJson(res);

      expect(model.props, [
        {props}
      ]);
    }});
  }});
}}
    """


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def render_value(value: Any) -> str:
    """Return the Dart literal used for ``value`` in an ``expect`` call.

    Lists and nested objects become compact JSON literals, which Dart reads as
    list and map literals. Strings are quoted as-is.
    """

    if isinstance(value, (list, dict)):
        return _compact_json(value)
    if isinstance(value, str):
        return f'"{value}"'
    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return str(value)


def _model_expectations(entries: Sequence[tuple[str, Any]]) -> str:
    return "\n".join(
        f"expect(json2model.{key}, {render_value(value)});" for key, value in entries
    )


def _json_expectations(entries: Sequence[tuple[str, Any]]) -> str:
    return "\n".join(
        f'expect(jsonMap["{key}"], {render_value(value)});' for key, value in entries
    )


def _props(entries: Sequence[tuple[str, Any]]) -> str:
    return ",\n".join(render_value(value) for _, value in entries)


def generate_tests(data: Any, type_name: str, *, format_output: bool = True) -> str:
    """Return a ``flutter_test`` suite for ``data`` constructed as ``type_name``.

    Args:
        data: Decoded JSON sample, expected to be a flat object.
        type_name: Dart type whose ``fromJson``/``toJson`` are exercised.
        format_output: Collapse redundant whitespace when ``True``; otherwise
            the template layout is returned untouched.

    Returns:
        The generated test source. Identical inputs always give identical
        output.
    """

    entries = shape_entries(data)
    code = TEST_TEMPLATE.format(
        res=json.dumps(data, indent=2, ensure_ascii=False),
        name=type_name,
        model_expectations=_model_expectations(entries),
        json_expectations=_json_expectations(entries),
        props=_props(entries),
    )
    return format_dart_code(code) if format_output else code


def generate_from_text(
    json_text: str,
    model_source: str,
    *,
    default_type_name: str = DEFAULT_TYPE_NAME,
    format_output: bool = True,
) -> GeneratedTests:
    """Decode ``json_text`` and generate tests for the class in ``model_source``.

    Raises:
        InvalidJSONInputError: If ``json_text`` is not valid JSON. No output
            is produced in that case.
    """

    with logfire.span("generator.generate_from_text"):
        data = decode_json(json_text)
        type_name = extract_type_name(model_source, default_type_name)
        code = generate_tests(data, type_name, format_output=format_output)
        field_count = len(data) if isinstance(data, dict) else 0
        logfire.info(
            "Generated unit tests",
            type_name=type_name,
            fields=field_count,
            formatted=format_output,
        )
        return GeneratedTests(type_name=type_name, field_count=field_count, code=code)


def generate_from_request(
    request: GenerationRequest, *, default_type_name: str = DEFAULT_TYPE_NAME
) -> GeneratedTests:
    """Generate tests for a validated :class:`GenerationRequest`."""

    return generate_from_text(
        request.json_text,
        request.model_source,
        default_type_name=default_type_name,
        format_output=request.format_output,
    )


__all__ = [
    "TEST_TEMPLATE",
    "generate_from_request",
    "generate_from_text",
    "generate_tests",
    "render_value",
]
