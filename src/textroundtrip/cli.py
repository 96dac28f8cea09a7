"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from textroundtrip import __version__
from textroundtrip.commands.common import base_dir_for
from textroundtrip.config import load_config


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    config_file: Path | None = None,
    base_dir: Path | None = None,
) -> None:
    """
    Configure the package logger: level from --verbose/--quiet or config, console
    handler on stderr, optional file handler from config. base_dir selects the
    project-local config (default: current directory).
    """
    config = load_config(base_dir if base_dir is not None else Path.cwd(), config_file)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = str(log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("textroundtrip")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textroundtrip",
        description="Write text with an explicit encoding, read it back line by line, and manage text files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", dest="config_file", type=Path, help="Extra JSON config file (applied last).")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "textroundtrip run . -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    global_flags.add_argument("--config", dest="config_file", type=Path, default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)

    # --encoding / --newline overrides for commands that touch file contents
    text_flags = argparse.ArgumentParser(add_help=False)
    text_flags.add_argument("--encoding", "-e", type=str, help="Text encoding (default from config: utf-8).")
    text_flags.add_argument("--newline", type=str, help="Line terminator: lf, crlf, cr, platform, or a literal.")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p_run = subparsers.add_parser(
        "run",
        help="Full round trip: write and read back the demo file, then create/delete/append the second file.",
        parents=[global_flags, text_flags],
    )
    p_run.add_argument("path", type=Path, nargs="?", default=Path("."), help="Working directory for both files (default: .).")
    p_run.set_defaults(run="run")

    p_write = subparsers.add_parser("write", help="Write the demo file.", parents=[global_flags, text_flags])
    p_write.add_argument("path", type=Path, nargs="?", default=Path("."), help="Working directory (default: .).")
    p_write.add_argument("--file", "-f", type=Path, help="Target file (default: configured file_a).")
    p_write.set_defaults(run="write")

    p_read = subparsers.add_parser(
        "read",
        help="Read a file line by line; numeric lines are reported doubled.",
        parents=[global_flags, text_flags],
    )
    p_read.add_argument("path", type=Path, nargs="?", default=Path("."), help="Working directory (default: .).")
    p_read.add_argument("--file", "-f", type=Path, help="File to read (default: configured file_a).")
    p_read.add_argument("--exact", action="store_true", help="Only the configured magic number counts as the sentinel.")
    p_read.set_defaults(run="read")

    p_show = subparsers.add_parser("show", help="Print a text file line by line.", parents=[global_flags, text_flags])
    p_show.add_argument("file", type=Path, help="File to print.")
    p_show.set_defaults(run="show")

    p_ensure = subparsers.add_parser(
        "ensure",
        help="Create a file with the configured initial lines unless it exists.",
        parents=[global_flags, text_flags],
    )
    p_ensure.add_argument("file", type=Path, help="File to create.")
    p_ensure.set_defaults(run="ensure")

    p_append = subparsers.add_parser("append", help="Append a line to an existing file.", parents=[global_flags, text_flags])
    p_append.add_argument("file", type=Path, help="File to append to (must exist).")
    p_append.add_argument("text", nargs="?", default=None, help="Line to append (default: configured append_text).")
    p_append.set_defaults(run="append")

    p_delete = subparsers.add_parser("delete", help="Delete a file.", parents=[global_flags])
    p_delete.add_argument("file", type=Path, help="File to delete.")
    p_delete.add_argument("--strict", action="store_true", help="Fail if the file does not exist.")
    p_delete.set_defaults(run="delete")

    p_config = subparsers.add_parser("config", help="Show or edit configuration.", parents=[global_flags])
    p_config.add_argument("path", type=Path, nargs="?", default=Path("."), help="Directory for project-local config (default: .).")
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value.")
    p_config.add_argument("--add", dest="add_key", metavar=("KEY", "VALUE"), nargs=2, help="Append VALUE to list KEY (e.g. initial_lines TEXT).")
    p_config.add_argument("--remove", dest="remove_key", metavar=("KEY", "VALUE"), nargs=2, help="Remove VALUE from list KEY.")
    p_config.add_argument("--global", dest="global_", action="store_true", help="With --set/--add/--remove: write to global config.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
        config_file=getattr(args, "config_file", None),
        base_dir=base_dir_for(args),
    )
    run = getattr(args, "run", None)

    if run == "run":
        from textroundtrip.commands.run_cmd import run as cmd_run
    elif run == "write":
        from textroundtrip.commands.write_cmd import run as cmd_run
    elif run == "read":
        from textroundtrip.commands.read_cmd import run as cmd_run
    elif run == "show":
        from textroundtrip.commands.show_cmd import run as cmd_run
    elif run == "ensure":
        from textroundtrip.commands.ensure_cmd import run as cmd_run
    elif run == "append":
        from textroundtrip.commands.append_cmd import run as cmd_run
    elif run == "delete":
        from textroundtrip.commands.delete_cmd import run as cmd_run
    elif run == "config":
        from textroundtrip.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)
