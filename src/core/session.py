# SPDX-License-Identifier: MIT
"""Ephemeral state behind the generator form.

A :class:`GeneratorSession` holds what the form shows: the two inputs, the
generated tests, the copy status line and the theme flag. Each generation
overwrites the previous output; nothing except the theme is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import logfire

from constants import (
    COPY_FAILURE_MESSAGE,
    COPY_SUCCESS_MESSAGE,
    DEFAULT_TYPE_NAME,
    THEME_KEY,
)
from models import GeneratedTests, GenerationRequest, Theme
from observability import telemetry
from utils import ClipboardWriter, PreferenceStore

from .generator import generate_from_request
from .shape import InvalidJSONInputError


@dataclass
class GeneratorSession:
    """Form state for one user."""

    preferences: PreferenceStore
    clipboard: ClipboardWriter | None = None
    default_type_name: str = DEFAULT_TYPE_NAME
    format_output: bool = True
    json_input: str = ""
    model_source: str = ""
    unit_tests: str = ""
    copy_status: str = ""
    alert: str | None = None
    dark_mode: bool = False
    last_result: GeneratedTests | None = field(default=None, repr=False)

    def generate(self) -> GeneratedTests | None:
        """Generate tests from the current inputs.

        Malformed JSON sets :attr:`alert` and leaves the previous output in
        place. Returns the result, or ``None`` when generation was aborted.
        """
        self.alert = None
        request = GenerationRequest(
            json_text=self.json_input,
            model_source=self.model_source,
            format_output=self.format_output,
        )
        try:
            result = generate_from_request(
                request, default_type_name=self.default_type_name
            )
        except InvalidJSONInputError as exc:
            self.alert = str(exc)
            telemetry.record_invalid_input()
            logfire.warning("Generation aborted", reason=exc.detail)
            return None
        self.unit_tests = result.code
        self.copy_status = ""
        self.last_result = result
        telemetry.record_generation(fields=result.field_count)
        return result

    def copy_to_clipboard(self) -> bool:
        """Copy the generated tests and update :attr:`copy_status`."""
        success = False
        if self.clipboard is not None:
            success = self.clipboard.write_text(self.unit_tests)
        self.copy_status = COPY_SUCCESS_MESSAGE if success else COPY_FAILURE_MESSAGE
        telemetry.record_copy(success)
        return success

    @property
    def theme(self) -> Theme:
        return "dark" if self.dark_mode else "light"

    def load_theme(self, system_prefers_dark: bool = False) -> Theme:
        """Initialise the theme flag from the store or the system preference."""
        stored = self.preferences.read(THEME_KEY)
        if stored in ("light", "dark"):
            self.dark_mode = stored == "dark"
        else:
            self.dark_mode = system_prefers_dark
        return self.theme

    def toggle_theme(self) -> Theme:
        """Flip the theme flag and persist the new value."""
        self.dark_mode = not self.dark_mode
        self.preferences.write(THEME_KEY, self.theme)
        logfire.debug("Theme toggled", theme=self.theme)
        return self.theme

    def set_theme(self, theme: Theme) -> Theme:
        """Persist ``theme`` explicitly."""
        self.dark_mode = theme == "dark"
        self.preferences.write(THEME_KEY, theme)
        return self.theme


__all__ = ["GeneratorSession"]
