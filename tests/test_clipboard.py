# SPDX-License-Identifier: MIT
"""Tests for clipboard writers."""

from __future__ import annotations

import subprocess

from utils import clipboard
from utils.clipboard import CommandClipboardWriter, MemoryClipboardWriter


def test_memory_clipboard_records_text() -> None:
    writer = MemoryClipboardWriter()
    assert writer.write_text("hello") is True
    assert writer.contents == "hello"


def test_command_clipboard_without_tools(monkeypatch) -> None:
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: None)
    assert CommandClipboardWriter().write_text("hello") is False


def test_command_clipboard_pipes_to_first_available(monkeypatch) -> None:
    calls: list[tuple[list[str], bytes]] = []

    def fake_run(cmd, input=None, **kwargs):
        calls.append((cmd, input))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(
        clipboard.shutil, "which", lambda name: f"/usr/bin/{name}" if name == "xclip" else None
    )
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)

    assert CommandClipboardWriter().write_text("tests") is True
    assert calls == [(["xclip", "-selection", "clipboard"], b"tests")]


def test_command_clipboard_reports_command_failure(monkeypatch) -> None:
    def failing_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/pbcopy")
    monkeypatch.setattr(clipboard.subprocess, "run", failing_run)

    writer = CommandClipboardWriter(commands=[("pbcopy",)])
    assert writer.write_text("tests") is False


def test_command_clipboard_reports_timeout(monkeypatch) -> None:
    def slow_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, 1)

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/wl-copy")
    monkeypatch.setattr(clipboard.subprocess, "run", slow_run)

    assert CommandClipboardWriter(timeout=1).write_text("tests") is False
