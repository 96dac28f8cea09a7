"""Shared fixtures: isolated global config and a clean package logger per test."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from textroundtrip import config as textroundtrip_config


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config directory at an empty temp dir for every test."""
    global_dir = tmp_path / "global_config"
    monkeypatch.setattr(textroundtrip_config, "_global_config_dir", lambda: global_dir)
    return global_dir


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main() attaches handlers and a level to the package logger; start each test clean."""
    logger = logging.getLogger("textroundtrip")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
