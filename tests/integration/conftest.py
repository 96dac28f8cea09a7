"""Integration fixtures: a copy of testing_grounds as the working directory."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent.parent
TESTING_GROUNDS = REPO_ROOT / "testing_grounds"


@pytest.fixture
def fixture_project(tmp_path: Path) -> Path:
    """Copy testing_grounds into tmp_path."""
    if not TESTING_GROUNDS.is_dir():
        pytest.skip("testing_grounds not found")
    dest = tmp_path / "project"
    shutil.copytree(TESTING_GROUNDS, dest)
    return dest
