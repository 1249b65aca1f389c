"""Read the checked-out branch from a repository's HEAD file."""

from __future__ import annotations

import os
from pathlib import Path

from gitpeek.seek.discovery import GIT_MARKER

HEAD_FILE = "HEAD"
SYMBOLIC_REF_PREFIX = "ref: refs/heads/"


def parse_head(content: str) -> str:
    """Extract the branch name from HEAD content, or "" if there is none.

    Detached heads (a raw object id) and malformed content give "".
    """
    if content.endswith("\r\n"):
        content = content[:-2]
    elif content.endswith("\n"):
        content = content[:-1]

    parts = content.split(SYMBOLIC_REF_PREFIX)
    if len(parts) < 2:
        return ""
    return parts[1]


def _read_head(repo_root: Path) -> str | None:
    """Return raw HEAD content, or None if it can't be found or read."""
    try:
        with os.scandir(repo_root / GIT_MARKER) as it:
            head = next((e.path for e in it if e.name == HEAD_FILE), None)
        if head is None:
            return None
        # read_bytes keeps \r\n intact; read_text would translate it
        return Path(head).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def resolve_branch(repo_root: Path) -> str:
    """Get the current branch name of a repository. Never raises."""
    content = _read_head(repo_root)
    if content is None:
        return ""
    return parse_head(content)
