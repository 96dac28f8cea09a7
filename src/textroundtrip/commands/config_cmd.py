"""Show or edit configuration (CLI command).

Only keys present in default_config() can be edited. String settings are stored
verbatim (so file_a=5 names a file "5"), list settings take a JSON list, and the
edited configuration must still build valid RoundTripSettings before it is saved.
"""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path
from typing import Any

from textroundtrip.commands.common import fail
from textroundtrip.config import (
    deep_merge,
    default_config,
    global_config_path,
    load_config,
    project_config_path,
    read_config_file,
    resolve_path,
    save_config,
    validate_log_level,
)
from textroundtrip.roundtrip import RoundTripSettings


def _split_key(key_path: str) -> tuple[str, str]:
    """'logging.level' -> ('logging', 'level'); 'encoding' -> ('', 'encoding')."""
    section, _, leaf = key_path.strip().rpartition(".")
    return section, leaf


def _default_for(key_path: str) -> Any:
    """Default value of a known setting; ValueError for unknown keys and whole sections."""
    section, leaf = _split_key(key_path)
    defaults = default_config()
    table = defaults.get(section) if section else defaults
    if not leaf or not isinstance(table, dict) or leaf not in table:
        raise ValueError(f"Unknown config key: {key_path!r}")
    if isinstance(table[leaf], dict):
        raise ValueError(f"{key_path!r} is a section; set one of its keys (e.g. {leaf}.level)")
    return table[leaf]


def _coerce(key_path: str, raw: str) -> Any:
    default = _default_for(key_path)
    if isinstance(default, list):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise ValueError(f'{key_path} expects a JSON list, e.g. ["first line", "second line"]') from None
    if default is None:
        # Optional path (logging.file): empty clears it
        return raw or None
    return raw


def _put(data: dict[str, Any], key_path: str, value: Any) -> None:
    section, leaf = _split_key(key_path)
    if section:
        if not isinstance(data.get(section), dict):
            data[section] = {}
        data[section][leaf] = value
    else:
        data[leaf] = value


def _lookup(data: dict[str, Any], key_path: str) -> Any:
    section, leaf = _split_key(key_path)
    table = data.get(section) if section else data
    return table.get(leaf) if isinstance(table, dict) else None


def _check(stored: dict[str, Any], project_root: Path) -> None:
    """Raise ValueError unless the stored overrides, applied on the merged config, are usable."""
    candidate = deep_merge(load_config(project_root), stored)
    RoundTripSettings.from_config(candidate, project_root)
    validate_log_level((candidate.get("logging") or {}).get("level"))


def _edit_list(stored: dict[str, Any], key_path: str, value: str, project_root: Path, add: bool) -> None:
    if not isinstance(_default_for(key_path), list):
        raise ValueError(f"{key_path} is not a list setting")
    current = _lookup(stored, key_path)
    if not isinstance(current, list):
        # Start from the effective list so editing initial_lines keeps the defaults
        merged = _lookup(load_config(project_root), key_path)
        current = list(merged) if isinstance(merged, list) else []
    if add:
        current = current + [value]
    else:
        current = [item for item in current if item != value]
    _put(stored, key_path, current)


def run(args: Namespace) -> None:
    """Run the config command: show merged settings or set/add/remove values (global or project-local)."""
    show = getattr(args, "show", False)
    set_key = getattr(args, "set_key", None)
    add_key = getattr(args, "add_key", None)
    remove_key = getattr(args, "remove_key", None)
    project_root = resolve_path(Path(getattr(args, "path", None) or "."))

    if not (show or set_key or add_key or remove_key):
        fail("specify --show, --set KEY=VALUE, --add KEY VALUE, or --remove KEY VALUE.")

    if getattr(args, "global_", False):
        target, label = global_config_path(), "global"
    else:
        target, label = project_config_path(project_root), f"project ({project_root.as_posix()})"

    if set_key or add_key or remove_key:
        stored = read_config_file(target) or {}
        changes: list[str] = []
        try:
            if set_key:
                if "=" not in set_key:
                    raise ValueError("--set requires KEY=VALUE (e.g. encoding=utf-16)")
                key_path, _, raw = set_key.partition("=")
                value = _coerce(key_path.strip(), raw.strip())
                _put(stored, key_path.strip(), value)
                changes.append(f"Set {key_path.strip()} = {json.dumps(value)}")
            if add_key:
                _edit_list(stored, add_key[0].strip(), add_key[1], project_root, add=True)
                changes.append(f"Added {json.dumps(add_key[1])} to {add_key[0].strip()}")
            if remove_key:
                _edit_list(stored, remove_key[0].strip(), remove_key[1], project_root, add=False)
                changes.append(f"Removed {json.dumps(remove_key[1])} from {remove_key[0].strip()}")
            _check(stored, project_root)
        except ValueError as e:
            fail(f"{e}; {label} config left unchanged.")
        save_config(target, stored)
        for change in changes:
            print(f"{change} in {label} config.")

    if show:
        config = load_config(project_root, getattr(args, "config_file", None))
        print(f"# Config: defaults + global + project ({project_root.as_posix()})")
        print(json.dumps(config, indent=2))
