"""Text I/O: encoded writer and line reader over binary files."""

from textroundtrip.textio.reader import TextReader, iter_lines, read_lines
from textroundtrip.textio.writer import TextWriter

__all__ = [
    "TextReader",
    "TextWriter",
    "iter_lines",
    "read_lines",
]
