"""Read a file back line by line, reporting numeric sentinel lines."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from textroundtrip.commands.common import fail, load_settings
from textroundtrip.config import resolve_path
from textroundtrip.roundtrip import report_file


def run(args: Namespace) -> None:
    """Run the read command on --file (default: configured file_a)."""
    try:
        settings = load_settings(args)
        target = getattr(args, "file", None)
        path = resolve_path(Path(target)) if target else settings.file_a
        match = "exact" if getattr(args, "exact", False) else settings.sentinel_match
        report_file(path, settings.encoding, settings.magic_number, match, out=sys.stdout)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        fail(e)
