"""Encoded line reader with one-line lookahead."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    # Universal newlines already turned \r\n and \r into \n
    if line.endswith("\n"):
        return line[:-1]
    return line


class TextReader:
    """
    Scoped line reader. Opens the path in binary mode and decodes it with a
    TextIOWrapper bound to the given encoding (universal newlines, strict errors).

    peek() reports whether another line is available without consuming it;
    read_line() returns the next line without its terminator. Iteration is
    lazy and forward-only; reopen the file to start over.
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._text: io.TextIOWrapper | None = None
        self._pending: str | None = None

    def open(self) -> "TextReader":
        if self._text is not None:
            return self
        raw = open(self.path, "rb")
        try:
            self._text = io.TextIOWrapper(raw, encoding=self.encoding, errors="strict", newline=None)
        except BaseException:
            raw.close()
            raise
        self._pending = None
        logger.debug("Opened %s for read (%s)", self.path, self.encoding)
        return self

    def close(self) -> None:
        text = self._text
        self._text = None
        self._pending = None
        if text is not None:
            text.close()

    def __enter__(self) -> "TextReader":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _fill(self) -> None:
        if self._pending is not None:
            return
        if self._text is None:
            raise ValueError(f"Reader for {self.path} is not open")
        raw_line = self._text.readline()
        # readline() returns "" only at end of stream
        self._pending = raw_line if raw_line else None

    def peek(self) -> bool:
        """True if another line can be read."""
        self._fill()
        return self._pending is not None

    def read_line(self) -> str:
        """Return the next line with its terminator stripped. Raises EOFError at end."""
        if not self.peek():
            raise EOFError(f"No more lines in {self.path}")
        line = self._pending
        self._pending = None
        return _strip_terminator(line)

    def __iter__(self) -> Iterator[str]:
        while self.peek():
            yield self.read_line()


def iter_lines(path: Path | str, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of a text file lazily; the file is closed when the generator ends."""
    with TextReader(path, encoding) as reader:
        yield from reader


def read_lines(path: Path | str, encoding: str = "utf-8") -> list[str]:
    """Read all lines of a text file (terminators stripped)."""
    return list(iter_lines(path, encoding))
