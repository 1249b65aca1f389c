"""Breadth-first, depth-bounded discovery of git repositories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple, Union

# Marker entry that makes a directory a repository root
GIT_MARKER = ".git"


class DirectoryReadError(Exception):
    """Raised when a directory the search committed to cannot be listed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read directory {path}: {cause}")


class SearchConfig(NamedTuple):
    """Parameters of a single search. Read-only for its duration."""

    start_dir: Path
    max_depth: int = 1
    ignore_list: frozenset[str] = frozenset()


class PlainDirectory(NamedTuple):
    path: Path
    children: tuple[Path, ...]


class RepositoryRoot(NamedTuple):
    path: Path


DirectoryEntry = Union[PlainDirectory, RepositoryRoot]


def classify(directory: Path, ignore_list: frozenset[str]) -> DirectoryEntry:
    """Classify a directory as a repository root or a plain directory.

    Ignored names are filtered before the marker check, so ignoring ".git"
    turns a repository into a plain directory. Symlinks are not followed.
    Children come back sorted by name.
    """
    subdirs: list[Path] = []
    has_git = False
    try:
        with os.scandir(directory) as it:
            for entry in it:
                if entry.name in ignore_list:
                    continue
                if not entry.is_dir(follow_symlinks=False):
                    continue
                if entry.name == GIT_MARKER:
                    has_git = True
                subdirs.append(directory / entry.name)
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    if has_git:
        return RepositoryRoot(directory)
    return PlainDirectory(directory, tuple(sorted(subdirs, key=lambda p: p.name)))


def search(config: SearchConfig) -> list[Path]:
    """Return repository roots under config.start_dir in discovery order.

    Runs exactly max_depth + 1 rounds. Each round records the repository
    roots in the frontier and classifies the children of every plain
    directory into the next frontier. Repository roots are never expanded.
    """
    repos: list[Path] = []
    frontier: list[DirectoryEntry] = [classify(config.start_dir, config.ignore_list)]

    for _ in range(config.max_depth + 1):
        next_frontier: list[DirectoryEntry] = []
        for item in frontier:
            if isinstance(item, RepositoryRoot):
                repos.append(item.path)
                continue
            next_frontier.extend(
                classify(child, config.ignore_list) for child in item.children
            )
        frontier = next_frontier

    return repos
