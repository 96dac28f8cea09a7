"""Text file round-trip: encoded writes, line-by-line reads, file lifecycle helpers."""

__version__ = "0.1.0"
