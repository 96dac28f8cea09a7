"""Integration tests: textroundtrip write / read / show."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import patch

import pytest

from textroundtrip.commands.read_cmd import run as read_run
from textroundtrip.commands.show_cmd import run as show_run
from textroundtrip.commands.write_cmd import run as write_run


def _args(path: Path, **overrides: object) -> object:
    attrs = {"path": path, "config_file": None, "encoding": None, "newline": None, "file": None, "exact": False}
    attrs.update(overrides)
    return type("Args", (), attrs)()


def test_write_then_read(fixture_project: Path) -> None:
    out = io.StringIO()
    with patch("textroundtrip.commands.write_cmd.sys.stdout", out):
        write_run(_args(fixture_project))
    assert "story.txt" in out.getvalue()

    buf = io.StringIO()
    with patch("textroundtrip.commands.read_cmd.sys.stdout", buf):
        read_run(_args(fixture_project))
    assert buf.getvalue().splitlines() == [
        "A short story...",
        "Hello World!",
        "The end",
        "Magic number, 42, multiplied by 2 = 84",
    ]


def test_read_reports_every_numeric_line(fixture_project: Path) -> None:
    buf = io.StringIO()
    with patch("textroundtrip.commands.read_cmd.sys.stdout", buf):
        read_run(_args(fixture_project, file=fixture_project / "numbers.txt"))
    assert buf.getvalue().splitlines() == [
        "Chapter one",
        "Magic number, 7, multiplied by 2 = 14",
        "Magic number, -3, multiplied by 2 = -6",
        "Magic number, 12, multiplied by 2 = 24",
        "4_2",
        "99999999999",
        "the answer is 42",
    ]


def test_read_exact_only_matches_magic_number(fixture_project: Path) -> None:
    buf = io.StringIO()
    with patch("textroundtrip.commands.read_cmd.sys.stdout", buf):
        read_run(_args(fixture_project, file=fixture_project / "numbers.txt", exact=True))
    assert buf.getvalue().splitlines() == (fixture_project / "numbers.txt").read_text(encoding="utf-8").splitlines()


def test_read_missing_file_exits_with_error(tmp_path: Path) -> None:
    err = io.StringIO()
    with patch("textroundtrip.commands.common.sys.stderr", err):
        with pytest.raises(SystemExit) as exc_info:
            read_run(_args(tmp_path, file=tmp_path / "missing.txt"))
    assert exc_info.value.code == 1
    assert err.getvalue().startswith("Error:")
    assert "missing.txt" in err.getvalue()


def test_read_with_wrong_encoding_exits_with_error(tmp_path: Path) -> None:
    write_run(_args(tmp_path, encoding="utf-16"))
    err = io.StringIO()
    with patch("textroundtrip.commands.common.sys.stderr", err):
        with pytest.raises(SystemExit) as exc_info:
            read_run(_args(tmp_path, encoding="utf-8"))
    assert exc_info.value.code == 1
    assert err.getvalue().startswith("Error:")


def test_show_prints_verbatim(fixture_project: Path) -> None:
    buf = io.StringIO()
    args = type("Args", (), {"file": fixture_project / "numbers.txt", "config_file": None, "encoding": None, "newline": None})()
    with patch("textroundtrip.commands.show_cmd.sys.stdout", buf):
        show_run(args)
    assert buf.getvalue().splitlines()[1:3] == ["7", "-3"]
