"""Delete a file. A missing file is a no-op unless --strict is given."""

from __future__ import annotations

from argparse import Namespace

from textroundtrip import files
from textroundtrip.commands.common import fail
from textroundtrip.config import resolve_path


def run(args: Namespace) -> None:
    path = resolve_path(args.file)
    strict = getattr(args, "strict", False)
    try:
        deleted = files.delete(path, missing_ok=not strict)
    except FileNotFoundError:
        fail(f"No such file: {path.as_posix()}")
    except OSError as e:
        fail(e)
    if deleted:
        print(f"Deleted {path.as_posix()}")
    else:
        print(f"{path.as_posix()} does not exist; nothing deleted.")
