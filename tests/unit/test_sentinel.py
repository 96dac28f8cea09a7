"""Unit tests for sentinel parsing and line reporting."""

from __future__ import annotations

import pytest

from textroundtrip.sentinel import parse_int, report_line


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        (" 12 ", 12),
        ("-3", -3),
        ("+7", 7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_accepts(text: str, expected: int) -> None:
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "The end", "4_2", "4 2", "0x2A", "42.0", "2147483648", "99999999999", "٤٢"],
)
def test_parse_int_rejects(text: str) -> None:
    assert parse_int(text) is None


def test_magic_number_is_doubled() -> None:
    out = report_line("42")
    assert out == "Magic number, 42, multiplied by 2 = 84"
    assert "42" in out and "84" in out


def test_any_numeric_line_is_treated_as_sentinel() -> None:
    assert report_line("7") == "Magic number, 7, multiplied by 2 = 14"


def test_exact_mode_only_matches_magic_number() -> None:
    assert report_line("7", magic_number="42", match="exact") == "7"
    assert report_line("42", magic_number="42", match="exact") == "Magic number, 42, multiplied by 2 = 84"


@pytest.mark.parametrize("line", ["A short story...", "Hello World!", "", "  padded  ", "4_2"])
def test_non_numeric_lines_pass_through(line: str) -> None:
    assert report_line(line) == line


def test_exact_mode_unparseable_magic_number_produces_nothing() -> None:
    assert report_line("forty-two", magic_number="forty-two", match="exact") is None
    assert report_line("other", magic_number="forty-two", match="exact") == "other"


def test_numeric_mode_ignores_unparseable_magic_number() -> None:
    assert report_line("forty-two", magic_number="forty-two") == "forty-two"
