"""Helpers shared by subcommands: settings from args, error exit."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

from textroundtrip.config import load_config, resolve_path
from textroundtrip.roundtrip import RoundTripSettings


def base_dir_for(args) -> Path:
    """
    Directory whose .textroundtrip/config.json applies to a command: its path
    argument, else the directory of its target file, else the current directory.
    """
    path = getattr(args, "path", None)
    if path is None:
        target = getattr(args, "file", None)
        path = Path(target).parent if target is not None else Path(".")
    return resolve_path(Path(path))


def load_settings(args) -> RoundTripSettings:
    """
    Merge config (defaults, global, <base dir>/.textroundtrip, --config) and apply
    --encoding / --newline overrides from args. Raises ValueError on bad values.
    """
    base_dir = base_dir_for(args)
    config = load_config(base_dir, getattr(args, "config_file", None))
    for key in ("encoding", "newline"):
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value
    return RoundTripSettings.from_config(config, base_dir)


def fail(message: object) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)
