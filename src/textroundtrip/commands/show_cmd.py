"""Print a text file line by line."""

from __future__ import annotations

import sys
from argparse import Namespace

from textroundtrip.commands.common import fail, load_settings
from textroundtrip.config import resolve_path
from textroundtrip.roundtrip import print_file


def run(args: Namespace) -> None:
    try:
        settings = load_settings(args)
        print_file(resolve_path(args.file), settings.encoding, out=sys.stdout)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        fail(e)
