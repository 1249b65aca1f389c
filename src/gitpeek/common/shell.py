"""Clipboard output for the selected repository."""

from __future__ import annotations

import base64
import os
import shlex
import subprocess
import sys
from pathlib import Path

# Tried in order for local sessions
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],  # macOS
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],  # Windows
]


def format_cd_command(path: Path) -> str:
    """Shell command that changes into path, quoted if needed."""
    return f"cd {shlex.quote(str(path))}"


def _osc52_copy(text: str) -> bool:
    """Send text to the terminal clipboard with an OSC 52 escape.

    Works over SSH in terminals that support it. There is no way to
    confirm receipt, so this always returns True.
    """
    encoded = base64.b64encode(text.encode()).decode()
    sys.stdout.write(f"\033]52;c;{encoded}\a")
    sys.stdout.flush()
    return True


def _is_ssh_session() -> bool:
    return bool(os.environ.get("SSH_CONNECTION") or os.environ.get("SSH_TTY"))


def copy_to_clipboard(text: str) -> bool:
    """Copy text to clipboard. Always returns True.

    Over SSH goes straight to OSC 52; locally tries the platform
    commands first and falls back to OSC 52, which cannot report failure.
    """
    if _is_ssh_session():
        return _osc52_copy(text)

    for cmd in CLIPBOARD_COMMANDS:
        try:
            subprocess.run(cmd, input=text.encode(), check=True, capture_output=True)
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            continue

    return _osc52_copy(text)
