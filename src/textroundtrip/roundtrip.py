"""Round-trip orchestration: write the demo file, read it back, then exercise the file helpers."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from textroundtrip import files
from textroundtrip.config import (
    require_str,
    require_str_list,
    resolve_newline,
    validate_encoding,
    validate_sentinel_match,
)
from textroundtrip.sentinel import report_line
from textroundtrip.textio import TextWriter, iter_lines

logger = logging.getLogger(__name__)


@dataclass
class RoundTripSettings:
    """Everything one round-trip run needs; built from merged config."""

    file_a: Path  # Demo file: written, then reported
    file_b: Path  # Lifecycle file: created, deleted, recreated, appended
    encoding: str = "utf-8"
    newline: str = "\n"  # Literal terminator, already resolved from aliases
    magic_number: str = "42"
    sentinel_match: str = "numeric"  # 'numeric' or 'exact'
    initial_lines: list[str] = field(default_factory=lambda: ["File number 2", "A short story..."])
    append_text: str = "Appended some text here"

    @classmethod
    def from_config(cls, config: dict[str, Any], base_dir: Path) -> "RoundTripSettings":
        """
        Build settings from a merged config dict. Relative file paths resolve
        against base_dir. Raises ValueError on a value of the wrong type, an
        unknown encoding, an empty newline or an unknown sentinel_match mode.
        """
        base_dir = Path(base_dir)
        return cls(
            file_a=base_dir / Path(require_str(config, "file_a")).expanduser(),
            file_b=base_dir / Path(require_str(config, "file_b")).expanduser(),
            encoding=validate_encoding(config.get("encoding") or "utf-8"),
            newline=resolve_newline(config.get("newline", "\n")),
            magic_number=require_str(config, "magic_number"),
            sentinel_match=validate_sentinel_match(config.get("sentinel_match", "numeric")),
            initial_lines=require_str_list(config, "initial_lines"),
            append_text=require_str(config, "append_text"),
        )


def _emit(line: str, out: TextIO, emitted: list[str]) -> None:
    print(line, file=out)
    emitted.append(line)


def write_demo_file(
    path: Path,
    encoding: str = "utf-8",
    newline: str = "\n",
    magic_number: str = "42",
) -> None:
    """Create or overwrite path with the demo content: a char, strings, and the number as text."""
    with TextWriter(path, encoding, newline) as writer:
        writer.write_char("A")
        writer.write_line(" short story...")
        writer.write("Hello ")
        writer.write_line("World!")
        writer.write("The end" + writer.newline)
        # Numbers go out as text; the reader has to parse them back
        writer.write(magic_number)
    logger.info("Wrote %s (%s)", path, encoding)


def report_file(
    path: Path,
    encoding: str = "utf-8",
    magic_number: str = "42",
    match: str = "numeric",
    out: TextIO | None = None,
) -> list[str]:
    """
    Print each line of path, reporting sentinel lines as their doubled value.
    Returns the output lines; a line report_line drops is neither printed nor returned.
    """
    out = out if out is not None else sys.stdout
    emitted: list[str] = []
    for line in iter_lines(path, encoding):
        report = report_line(line, magic_number, match)
        if report is not None:
            _emit(report, out, emitted)
    return emitted


def print_file(path: Path, encoding: str = "utf-8", out: TextIO | None = None) -> list[str]:
    """Print path line by line. Returns the lines printed."""
    out = out if out is not None else sys.stdout
    emitted: list[str] = []
    for line in iter_lines(path, encoding):
        _emit(line, out, emitted)
    return emitted


def run_roundtrip(settings: RoundTripSettings, out: TextIO | None = None) -> list[str]:
    """
    Run the full sequence, in this order:
    write A, report A, ensure B, print B, delete B, ensure B, append to B, print B.

    Returns every line written to out. Any I/O failure propagates; nothing is retried.
    """
    out = out if out is not None else sys.stdout
    s = settings
    emitted: list[str] = []

    write_demo_file(s.file_a, s.encoding, s.newline, s.magic_number)
    emitted += report_file(s.file_a, s.encoding, s.magic_number, s.sentinel_match, out)

    files.ensure_created(s.file_b, s.initial_lines, s.encoding, s.newline)
    emitted += print_file(s.file_b, s.encoding, out)

    if files.delete(s.file_b):
        logger.info("Deleted %s", s.file_b)

    files.ensure_created(s.file_b, s.initial_lines, s.encoding, s.newline)
    files.append_line(s.file_b, s.append_text, s.encoding, s.newline)
    emitted += print_file(s.file_b, s.encoding, out)
    return emitted
