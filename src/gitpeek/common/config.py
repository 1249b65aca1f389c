"""Persisted default settings stored as a JSON file."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, NamedTuple

from gitpeek.common.validate import (
    ValidationError,
    validate_ignore_list,
    validate_max_depth,
)

CONFIG_FILENAME = "gitpeek.json"
DEFAULT_MAX_DEPTH = 1


class ConfigError(Exception):
    """Raised when the settings file can't be read or holds bad values."""

    pass


class Settings(NamedTuple):
    max_depth: int = DEFAULT_MAX_DEPTH
    ignore_list: frozenset[str] = frozenset()

    def to_dict(self) -> dict[str, Any]:
        return {"max_depth": self.max_depth, "ignore_list": sorted(self.ignore_list)}


def config_path() -> Path:
    """Location of the settings file.

    $XDG_CONFIG_HOME/gitpeek.json if set, else ~/.config/gitpeek.json.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / CONFIG_FILENAME
    return Path.home() / ".config" / CONFIG_FILENAME


class SettingsFile:
    """JSON settings file that is created with defaults on first use."""

    def __init__(self, path: Path | None = None) -> None:
        """Initialize settings file.

        Args:
            path: Path to the settings file (default: config_path())
        """
        self.path = path if path is not None else config_path()

    def exists(self) -> bool:
        return self.path.is_file()

    def write(self, settings: Settings) -> None:
        """Save settings, creating parent directories as needed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(settings.to_dict(), indent=2) + "\n")
        except OSError as e:
            raise ConfigError(f"Cannot write {self.path}: {e}") from e

    def read(self) -> Settings:
        """Parse and validate the settings file."""
        try:
            data = json.loads(self.path.read_text())
        except OSError as e:
            raise ConfigError(f"Cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Malformed JSON in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a JSON object in {self.path}")

        try:
            return Settings(
                max_depth=validate_max_depth(data.get("max_depth", DEFAULT_MAX_DEPTH)),
                ignore_list=validate_ignore_list(data.get("ignore_list", [])),
            )
        except ValidationError as e:
            raise ConfigError(f"{self.path}: {e}") from e

    def load(self) -> tuple[Settings, bool]:
        """Read settings, writing the defaults first if the file is missing.

        Returns (settings, created).
        """
        if not self.exists():
            defaults = Settings()
            self.write(defaults)
            return defaults, True
        return self.read(), False
