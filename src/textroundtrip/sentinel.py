"""Magic-number sentinel: turn a numeric line back into an integer and report it."""

from __future__ import annotations

import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Surrounding whitespace, optional sign, ASCII digits only
_INT_RE = re.compile(r"\s*([+-]?[0-9]+)\s*", re.ASCII)


def parse_int(text: str) -> int | None:
    """
    Parse text as a signed 32-bit integer; return None if it does not parse.

    Stricter than int(): no underscores, no non-ASCII digits, no values outside
    the 32-bit range.
    """
    match = _INT_RE.fullmatch(text)
    if match is None:
        return None
    value = int(match.group(1))
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def format_magic(value: int) -> str:
    return f"Magic number, {value}, multiplied by 2 = {value * 2}"


def report_line(line: str, magic_number: str = "42", match: str = "numeric") -> str | None:
    """
    Return the report for one line read back from the demo file.

    With match="numeric" every line that parses as an integer is treated as the
    sentinel, not only magic_number. Anything else is returned unchanged.

    match="exact" only treats a line equal to magic_number as the sentinel. If
    that line does not parse as an integer it produces no output (None).
    """
    if match == "exact":
        if line != magic_number:
            return line
        value = parse_int(line)
        return None if value is None else format_magic(value)
    value = parse_int(line)
    if value is None:
        return line
    return format_magic(value)
