"""Combine repository discovery with branch resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Any, NamedTuple

from gitpeek.seek.branch import resolve_branch
from gitpeek.seek.discovery import SearchConfig, search


class SearchResult(NamedTuple):
    path: Path
    branch: str

    def label(self) -> str:
        """Display form: "<path> (<branch>)", parentheses kept when empty."""
        return f"{self.path} ({self.branch})"

    def to_dict(self) -> dict[str, Any]:
        return {"path": str(self.path), "branch": self.branch}


def fetch_git_dirs(config: SearchConfig) -> list[SearchResult]:
    """Find repositories and resolve the branch of each.

    DirectoryReadError from the search propagates unchanged.
    """
    return [SearchResult(path, resolve_branch(path)) for path in search(config)]
