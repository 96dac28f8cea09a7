"""Append one line to an existing text file."""

from __future__ import annotations

from argparse import Namespace

from textroundtrip import files
from textroundtrip.commands.common import fail, load_settings
from textroundtrip.config import resolve_path


def run(args: Namespace) -> None:
    """Run the append command. TEXT defaults to the configured append_text."""
    path = resolve_path(args.file)
    try:
        settings = load_settings(args)
        text = getattr(args, "text", None)
        if text is None:
            text = settings.append_text
        appended = files.append_line(path, text, settings.encoding, settings.newline)
    except (OSError, ValueError) as e:
        fail(e)
    if appended:
        print(f"Appended 1 line to {path.as_posix()}")
    else:
        print(f"{path.as_posix()} does not exist; nothing appended.")
