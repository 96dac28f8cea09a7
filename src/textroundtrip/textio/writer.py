"""Encoded text writer over a binary file, with an explicit line terminator."""

from __future__ import annotations

import io
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class TextWriter:
    """
    Scoped text writer. Opens the path in binary mode (truncate, or append when
    append=True) and layers a TextIOWrapper bound to the given encoding on top.

    newline is written verbatim by write_line/write_newline; text passed to
    write() is never translated.

    Usage:
        with TextWriter(path, "utf-8", "\\n") as w:
            w.write_char("A")
            w.write_line(" short story...")
    """

    def __init__(
        self,
        path: Path | str,
        encoding: str = "utf-8",
        newline: str = "\n",
        append: bool = False,
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._newline = newline
        self.append = append
        self._text: io.TextIOWrapper | None = None

    @property
    def newline(self) -> str:
        """Line terminator emitted by write_line and write_newline."""
        return self._newline

    @property
    def closed(self) -> bool:
        return self._text is None

    def open(self) -> "TextWriter":
        if self._text is not None:
            return self
        self.path.parent.mkdir(parents=True, exist_ok=True)
        mode = "ab" if self.append else "wb"
        raw = open(self.path, mode)
        try:
            self._text = io.TextIOWrapper(raw, encoding=self.encoding, newline="")
        except BaseException:
            raw.close()
            raise
        logger.debug("Opened %s for %s (%s)", self.path, "append" if self.append else "write", self.encoding)
        return self

    def close(self) -> None:
        """Flush and close. Safe to call more than once."""
        text = self._text
        self._text = None
        if text is not None:
            # TextIOWrapper.close flushes, then closes the underlying binary file
            text.close()
            logger.debug("Closed %s", self.path)

    def __enter__(self) -> "TextWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _stream(self) -> io.TextIOWrapper:
        if self._text is None:
            raise ValueError(f"Writer for {self.path} is not open")
        return self._text

    def write_char(self, ch: str) -> None:
        """Write a single character."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"write_char expects exactly one character, got {ch!r}")
        self._stream().write(ch)

    def write(self, text: str) -> None:
        """Write text as-is (no terminator)."""
        self._stream().write(str(text))

    def write_line(self, text: str = "") -> None:
        """Write text followed by the line terminator."""
        stream = self._stream()
        stream.write(str(text))
        stream.write(self._newline)

    def write_newline(self) -> None:
        self._stream().write(self._newline)
