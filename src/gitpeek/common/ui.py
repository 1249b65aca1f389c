"""Shared UI utilities: colors, styling, and interactive selection."""

from __future__ import annotations

import click
from InquirerPy import inquirer

# Colors using click.style
CYAN = "cyan"
GREEN = "green"
RED = "red"
DIM = "bright_black"


def style_error(msg: str) -> str:
    """Style an error message."""
    return click.style(f"✗ {msg}", fg=RED)


def style_success(msg: str) -> str:
    """Style a success message."""
    return click.style(f"✓ {msg}", fg=GREEN)


def style_info(msg: str) -> str:
    """Style an info message."""
    return click.style(f"→ {msg}", fg=CYAN)


def style_dim(msg: str) -> str:
    return click.style(msg, fg=DIM)


def fuzzy_select(options: list[str], message: str) -> int | None:
    """Show fuzzy select menu. Returns index or None if cancelled.

    Esc skips the prompt; Ctrl-C is treated the same way.
    """
    try:
        prompt = inquirer.fuzzy(  # type: ignore[attr-defined]
            message=message,
            choices=options,
            match_exact=True,
            mandatory=False,
            keybindings={"skip": [{"key": "escape"}]},
        )
        result = prompt.execute()
    except KeyboardInterrupt:
        return None
    if result is None:
        return None
    return options.index(result)
