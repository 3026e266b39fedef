"""Test fixtures for Nette hooks tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest


def write_helper(path: Path, body: str) -> Path:
    """Write an executable shell script helper."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project directory the agent works in."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def make_helper() -> Callable[[Path, str], Path]:
    """Factory for fake helper scripts."""
    return write_helper


@pytest.fixture
def composer_home(tmp_path: Path) -> Path:
    """Global Composer home with an empty vendor/bin."""
    home = tmp_path / "composer"
    (home / "vendor" / "bin").mkdir(parents=True)
    return home


@pytest.fixture
def posix_environ(tmp_path: Path) -> dict[str, str]:
    """Minimal POSIX environment with a HOME that has no Composer setup."""
    home = tmp_path / "home"
    home.mkdir()
    return {"HOME": str(home), "PATH": os.environ.get("PATH", "")}
