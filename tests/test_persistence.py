"""Tests for persistence utilities."""

from pathlib import Path
from unittest.mock import patch

import pytest

from io_utils.persistence import atomic_write


def test_atomic_write_creates_parent_dir(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "person_test.dart"
    atomic_write(path, "void main() {}")
    assert path.read_text(encoding="utf-8") == "void main() {}\n"


def test_atomic_write_keeps_existing_newline(tmp_path: Path) -> None:
    path = tmp_path / "out.dart"
    atomic_write(path, "line\n")
    assert path.read_text(encoding="utf-8") == "line\n"
    assert not Path(f"{path}.tmp").exists()


def test_atomic_write_flushes(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    flush_called = False

    real_open = open

    def open_wrapper(*args, **kwargs):
        handle = real_open(*args, **kwargs)
        original_flush = handle.flush

        def tracked_flush() -> None:
            nonlocal flush_called
            flush_called = True
            original_flush()

        handle.flush = tracked_flush
        return handle

    with (
        patch("io_utils.persistence.open", open_wrapper, create=True),
        patch("io_utils.persistence.os.fsync") as fsync,
    ):
        atomic_write(path, "data")

    assert flush_called
    fsync.assert_called()


def test_atomic_write_removes_temp_file_on_failure(tmp_path: Path) -> None:
    path = tmp_path / "out.dart"
    with pytest.raises(UnicodeEncodeError):
        atomic_write(path, "bad \ud800 text")
    assert not path.exists()
    assert not Path(f"{path}.tmp").exists()


def test_atomic_write_failure_keeps_previous_file(tmp_path: Path) -> None:
    path = tmp_path / "out.dart"
    atomic_write(path, "old")
    with pytest.raises(UnicodeEncodeError):
        atomic_write(path, "\udc00")
    assert path.read_text(encoding="utf-8") == "old\n"
