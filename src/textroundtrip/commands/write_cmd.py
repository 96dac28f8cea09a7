"""Write the demo file (character, strings and the magic number as text)."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from textroundtrip.commands.common import fail, load_settings
from textroundtrip.config import resolve_path
from textroundtrip.roundtrip import write_demo_file


def run(args: Namespace) -> None:
    """Run the write command: overwrite --file (default: configured file_a)."""
    try:
        settings = load_settings(args)
        target = getattr(args, "file", None)
        path = resolve_path(Path(target)) if target else settings.file_a
        write_demo_file(path, settings.encoding, settings.newline, settings.magic_number)
    except (OSError, ValueError) as e:
        fail(e)
    print(f"Wrote {path.as_posix()} ({settings.encoding})")
