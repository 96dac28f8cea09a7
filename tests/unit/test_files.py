"""Unit tests for file lifecycle helpers (ensure_created, append_line, delete)."""

from __future__ import annotations

from pathlib import Path

import pytest

from textroundtrip import files
from textroundtrip.textio import read_lines

INITIAL = ["File number 2", "A short story..."]


def test_exists_only_for_regular_files(tmp_path: Path) -> None:
    f = tmp_path / "f.txt"
    assert not files.exists(f)
    f.write_text("x", encoding="utf-8")
    assert files.exists(f)
    assert not files.exists(tmp_path)


def test_ensure_created_writes_initial_lines(tmp_path: Path) -> None:
    f = tmp_path / "b.txt"
    assert files.ensure_created(f, INITIAL) is True
    assert read_lines(f) == INITIAL


def test_ensure_created_is_idempotent(tmp_path: Path) -> None:
    f = tmp_path / "b.txt"
    files.ensure_created(f, INITIAL)
    before = f.read_bytes()
    assert files.ensure_created(f, INITIAL) is False
    assert f.read_bytes() == before
    assert read_lines(f) == INITIAL


def test_ensure_created_leaves_foreign_content_alone(tmp_path: Path) -> None:
    f = tmp_path / "b.txt"
    f.write_bytes(b"something else\n")
    assert files.ensure_created(f, INITIAL) is False
    assert f.read_bytes() == b"something else\n"


def test_append_after_create(tmp_path: Path) -> None:
    f = tmp_path / "b.txt"
    files.ensure_created(f, INITIAL)
    assert files.append_line(f, "X") is True
    assert read_lines(f) == INITIAL + ["X"]


def test_append_to_missing_file_is_noop(tmp_path: Path) -> None:
    f = tmp_path / "missing.txt"
    assert files.append_line(f, "X") is False
    assert not f.exists()


def test_append_uses_configured_terminator(tmp_path: Path) -> None:
    f = tmp_path / "b.txt"
    files.ensure_created(f, ["one"], newline="\r\n")
    files.append_line(f, "two", newline="\r\n")
    assert f.read_bytes() == b"one\r\ntwo\r\n"


def test_delete_then_recreate_has_no_residue(tmp_path: Path) -> None:
    f = tmp_path / "b.txt"
    files.ensure_created(f, INITIAL)
    files.append_line(f, "left over")
    assert files.delete(f) is True
    assert not f.exists()
    files.ensure_created(f, INITIAL)
    assert read_lines(f) == INITIAL


def test_delete_missing_is_noop_by_default(tmp_path: Path) -> None:
    assert files.delete(tmp_path / "never.txt") is False


def test_delete_missing_strict_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        files.delete(tmp_path / "never.txt", missing_ok=False)
