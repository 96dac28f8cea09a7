"""File lifecycle helpers: existence check, create-if-missing, append, delete."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from textroundtrip.textio import TextWriter

logger = logging.getLogger(__name__)


def exists(path: Path | str) -> bool:
    """True if path is an existing regular file."""
    return Path(path).is_file()


def ensure_created(
    path: Path | str,
    lines: Iterable[str],
    encoding: str = "utf-8",
    newline: str = "\n",
) -> bool:
    """
    Create path with the given lines unless it already exists.

    Returns True if the file was created, False if it was left untouched.
    """
    path = Path(path)
    if exists(path):
        logger.debug("%s already exists; not recreating", path)
        return False
    with TextWriter(path, encoding, newline) as writer:
        for line in lines:
            writer.write_line(line)
    logger.debug("Created %s", path)
    return True


def append_line(
    path: Path | str,
    text: str,
    encoding: str = "utf-8",
    newline: str = "\n",
) -> bool:
    """Append one line to an existing file. Returns False (no-op) if the file is missing."""
    path = Path(path)
    if not exists(path):
        logger.debug("%s does not exist; nothing appended", path)
        return False
    with TextWriter(path, encoding, newline, append=True) as writer:
        writer.write_line(text)
    logger.debug("Appended a line to %s", path)
    return True


def delete(path: Path | str, missing_ok: bool = True) -> bool:
    """
    Remove a file. Returns True if something was deleted.

    A missing path is a no-op (returns False) unless missing_ok is False, in which
    case FileNotFoundError propagates.
    """
    path = Path(path)
    try:
        path.unlink()
    except FileNotFoundError:
        if not missing_ok:
            raise
        logger.debug("%s does not exist; nothing deleted", path)
        return False
    logger.debug("Deleted %s", path)
    return True
