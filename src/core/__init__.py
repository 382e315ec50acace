"""Core generation logic.

Exports:
    extract_type_name: Return the class name declared in model source.
    decode_json: Decode a JSON sample, raising on malformed input.
    generate_tests: Build the ``flutter_test`` suite for a decoded sample.
    generate_from_text: Decode, extract and generate in one call.
    format_dart_code: Collapse redundant whitespace in generated code.
    GeneratorSession: Form state shared by the CLI and the web form.
"""

from .formatter import format_dart_code
from .generator import (
    generate_from_request,
    generate_from_text,
    generate_tests,
    render_value,
)
from .session import GeneratorSession
from .shape import InvalidJSONInputError, decode_json, extract_type_name

__all__ = [
    "InvalidJSONInputError",
    "decode_json",
    "extract_type_name",
    "format_dart_code",
    "generate_from_request",
    "generate_from_text",
    "generate_tests",
    "render_value",
    "GeneratorSession",
]
