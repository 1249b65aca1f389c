"""Input validation for search parameters."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def validate_max_depth(value: Any) -> int:
    """Validate max depth is a non-negative integer.

    Returns validated int or raises ValidationError.
    """
    # bool is an int subclass; true/false in a JSON file is a mistake
    if isinstance(value, bool):
        raise ValidationError(f"Invalid max depth: {value!r}")
    try:
        depth = int(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"Invalid max depth: {value!r}") from e

    if isinstance(value, float) and value != depth:
        raise ValidationError(f"Invalid max depth: {value!r}")

    if depth < 0:
        raise ValidationError(f"Max depth cannot be negative: {depth}")

    return depth


def parse_ignore_list(raw: str) -> frozenset[str]:
    """Parse a comma-separated list of directory names.

    Surrounding whitespace is stripped and empty items are dropped.
    """
    return validate_ignore_list([name.strip() for name in raw.split(",")])


def validate_ignore_list(names: Any) -> frozenset[str]:
    """Validate a list of directory base names (not paths).

    Returns a frozenset of names or raises ValidationError.
    """
    if isinstance(names, str) or not isinstance(names, (list, tuple, set, frozenset)):
        raise ValidationError(f"Ignore list must be a list of names: {names!r}")

    result: set[str] = set()
    for name in names:
        if not isinstance(name, str):
            raise ValidationError(f"Invalid directory name in ignore list: {name!r}")
        if not name:
            continue
        if "/" in name or "\\" in name:
            raise ValidationError(
                f"Invalid directory name in ignore list: {name!r} (names, not paths)"
            )
        result.add(name)

    return frozenset(result)


def validate_start_dir(path: Path) -> Path:
    """Validate the start directory exists.

    Returns an absolute path with ".." folded away. Symlinks are kept.
    """
    path = Path(os.path.normpath(path.expanduser().absolute()))
    if not path.exists():
        raise ValidationError(f"Directory does not exist: {path}")
    if not path.is_dir():
        raise ValidationError(f"Not a directory: {path}")
    return path
