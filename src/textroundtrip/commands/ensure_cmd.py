"""Create a text file with the configured initial lines, unless it already exists."""

from __future__ import annotations

from argparse import Namespace

from textroundtrip import files
from textroundtrip.commands.common import fail, load_settings
from textroundtrip.config import resolve_path


def run(args: Namespace) -> None:
    path = resolve_path(args.file)
    try:
        settings = load_settings(args)
        created = files.ensure_created(path, settings.initial_lines, settings.encoding, settings.newline)
    except (OSError, ValueError) as e:
        fail(e)
    if created:
        print(f"Created {path.as_posix()}")
    else:
        print(f"{path.as_posix()} already exists; left unchanged.")
