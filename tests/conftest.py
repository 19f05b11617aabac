"""
Shared fixtures for prmirror tests.

Every test runs in its own temporary working directory so the
mirror-repo workspace never lands in the checkout, and with the
DEFAULT_* variables cleared so a developer's .env cannot leak in.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run each test from a clean temporary directory."""
    monkeypatch.chdir(tmp_path)
    for var in ("DEFAULT_BASE", "DEFAULT_ORG", "DEFAULT_REPO", "DEBUG"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def mirror_repo(workdir: Path) -> Path:
    """Path of the workspace inside the temp directory."""
    return workdir / "mirror-repo"


