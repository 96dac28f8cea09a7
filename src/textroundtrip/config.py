"""Configuration: defaults, config loading (global + project + explicit file) and validation."""

from __future__ import annotations

import codecs
import json
import os
from pathlib import Path
from typing import Any

# Directory name inside a working directory for project-local settings
PROJECT_DIR = ".textroundtrip"
CONFIG_FILENAME = "config.json"

NEWLINE_ALIASES = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
}
SENTINEL_MATCH_MODES = ("numeric", "exact")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# Global config location
def _global_config_dir() -> Path:
    return Path.home() / ".textroundtrip"


def global_config_path() -> Path:
    """Path to global config file (~/.textroundtrip/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration: the demo's two files, UTF-8 and LF line endings."""
    return {
        "encoding": "utf-8",
        "newline": "\n",
        "file_a": "helloworld.txt",
        "file_b": "helloworld2.txt",
        "magic_number": "42",
        "sentinel_match": "numeric",
        "initial_lines": ["File number 2", "A short story..."],
        "append_text": "Appended some text here",
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def read_config_file(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.textroundtrip/config.json. Returns defaults if missing."""
    data = read_config_file(global_config_path())
    if data is None:
        return default_config()
    return deep_merge(default_config(), data)


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<dir>/.textroundtrip/config.json)."""
    return project_root / PROJECT_DIR / CONFIG_FILENAME


def load_config(
    project_root: Path | None = None,
    config_file: Path | None = None,
) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global + project overrides + explicit file.

    If project_root is None, project-local config is skipped. config_file, when given,
    is applied last (it wins over everything else).
    """
    merged = load_global_config()
    if project_root is not None:
        project_data = read_config_file(project_config_path(project_root.resolve()))
        if project_data is not None:
            deep_merge(merged, project_data)
    if config_file is not None:
        explicit = read_config_file(Path(config_file).expanduser())
        if explicit is not None:
            deep_merge(merged, explicit)
    return merged


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write config dict as pretty JSON (UTF-8). Creates parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def resolve_newline(value: str) -> str:
    """
    Turn a configured line terminator into the literal string.

    Accepts lf / crlf / cr / platform (case-insensitive) or a literal terminator.
    """
    if not isinstance(value, str) or value == "":
        raise ValueError(f"Invalid newline setting: {value!r}")
    key = value.lower()
    if key == "platform":
        return os.linesep
    return NEWLINE_ALIASES.get(key, value)


def validate_encoding(name: str) -> str:
    """Return the encoding name if Python knows it, else raise ValueError."""
    try:
        codecs.lookup(name)
    except (LookupError, TypeError):
        raise ValueError(f"Unknown encoding: {name!r}") from None
    return name


def validate_sentinel_match(mode: str) -> str:
    if mode not in SENTINEL_MATCH_MODES:
        raise ValueError(
            f"Invalid sentinel_match {mode!r} (expected one of {', '.join(SENTINEL_MATCH_MODES)})"
        )
    return mode


def resolve_path(path: Path) -> Path:
    """Resolve path to absolute, normalized."""
    return path.expanduser().resolve()


def require_str(config: dict[str, Any], key: str) -> str:
    """Return config[key] if it is a string, else raise ValueError."""
    value = config.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def require_str_list(config: dict[str, Any], key: str) -> list[str]:
    """Return config[key] if it is a list of strings, else raise ValueError."""
    value = config.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{key} must be a list of strings, got {value!r}")
    return list(value)


def validate_log_level(level: object) -> str:
    """Return the upper-cased level name if logging knows it, else raise ValueError."""
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid logging.level {level!r} (expected one of {', '.join(LOG_LEVELS)})")
    return level.upper()
