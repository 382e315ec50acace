"""Clipboard abstractions.

Copying is best effort: writers report success as a boolean and never raise
for ordinary failures such as a missing clipboard tool.
"""

from __future__ import annotations

import shutil
import subprocess
from abc import ABC, abstractmethod
from typing import Sequence

import logfire

# Candidate commands in order of preference. Each reads the text on stdin.
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("pbcopy",),
    ("clip",),
)


class ClipboardWriter(ABC):
    """Interface for placing text on the host clipboard."""

    @abstractmethod
    def write_text(self, text: str) -> bool:
        """Copy ``text`` and return ``True`` on success."""


class MemoryClipboardWriter(ClipboardWriter):
    """Record copied text in memory."""

    def __init__(self) -> None:
        self.contents: str | None = None

    def write_text(self, text: str) -> bool:
        self.contents = text
        return True


class CommandClipboardWriter(ClipboardWriter):
    """Copy text by piping it to the first available clipboard command."""

    def __init__(
        self,
        commands: Sequence[Sequence[str]] = CLIPBOARD_COMMANDS,
        timeout: float = 5.0,
    ) -> None:
        self._commands = [tuple(cmd) for cmd in commands]
        self._timeout = timeout

    def _resolve(self) -> tuple[str, ...] | None:
        for cmd in self._commands:
            if shutil.which(cmd[0]):
                return cmd
        return None

    def write_text(self, text: str) -> bool:
        """Pipe ``text`` to the clipboard command.

        Returns:
            ``True`` when the command exits successfully, ``False`` when no
            command is available or the command fails.
        """
        with logfire.span("clipboard.write_text", attributes={"chars": len(text)}):
            cmd = self._resolve()
            if cmd is None:
                logfire.warning("No clipboard command available")
                return False
            try:
                subprocess.run(
                    list(cmd),
                    input=text.encode("utf-8"),
                    check=True,
                    timeout=self._timeout,
                    capture_output=True,
                )
            except (OSError, subprocess.SubprocessError) as exc:
                logfire.warning("Clipboard command failed", command=cmd[0], error=str(exc))
                return False
            logfire.debug("Copied text to clipboard", command=cmd[0])
            return True


__all__ = [
    "CLIPBOARD_COMMANDS",
    "ClipboardWriter",
    "CommandClipboardWriter",
    "MemoryClipboardWriter",
]
