"""Run the full round trip: demo file write/report, then the second file's lifecycle."""

from __future__ import annotations

import sys
from argparse import Namespace

from textroundtrip.commands.common import fail, load_settings
from textroundtrip.roundtrip import run_roundtrip


def run(args: Namespace) -> None:
    try:
        settings = load_settings(args)
        run_roundtrip(settings, out=sys.stdout)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        fail(e)
