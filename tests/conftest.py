"""Shared test fixtures for gitpeek."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings file at a temp dir so tests never touch ~/.config."""
    home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty directory to build fake repository trees in."""
    root = tmp_path / "work"
    root.mkdir()
    return root


@pytest.fixture
def make_repo() -> Callable[..., Path]:
    """Create a fake repository: <path>/.git/HEAD with the given content."""

    def _make(path: Path, head: str | bytes | None = "ref: refs/heads/main\n") -> Path:
        git_dir = path / ".git"
        git_dir.mkdir(parents=True)
        if isinstance(head, bytes):
            (git_dir / "HEAD").write_bytes(head)
        elif head is not None:
            (git_dir / "HEAD").write_bytes(head.encode())
        return path

    return _make


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for testing."""
    repo = tmp_path / "test-repo"
    repo.mkdir()
    subprocess.run(["git", "init"], cwd=repo, capture_output=True, check=True)
    subprocess.run(
        ["git", "checkout", "-b", "feature-x"],
        cwd=repo,
        capture_output=True,
        check=True,
    )
    return repo


@pytest.fixture
def mock_subprocess_run(mocker: Any) -> MagicMock:
    """Mock subprocess.run for testing clipboard commands."""
    return mocker.patch("subprocess.run")
