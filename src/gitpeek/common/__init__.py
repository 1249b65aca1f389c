"""Shared utilities for gitpeek."""

from gitpeek.common.config import ConfigError, Settings, SettingsFile, config_path
from gitpeek.common.shell import copy_to_clipboard, format_cd_command
from gitpeek.common.ui import (
    CYAN,
    DIM,
    fuzzy_select,
    style_dim,
    style_error,
    style_info,
    style_success,
)
from gitpeek.common.validate import (
    ValidationError,
    parse_ignore_list,
    validate_max_depth,
    validate_start_dir,
)

__all__ = [
    "CYAN",
    "DIM",
    "ConfigError",
    "Settings",
    "SettingsFile",
    "ValidationError",
    "config_path",
    "copy_to_clipboard",
    "format_cd_command",
    "fuzzy_select",
    "parse_ignore_list",
    "style_dim",
    "style_error",
    "style_info",
    "style_success",
    "validate_max_depth",
    "validate_start_dir",
]
