"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os

from rich.console import Console


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(line: str, style: str) -> str:
    console = Console(highlight=False, soft_wrap=True)
    console.print(line, style=style, markup=False, emoji=False)
    return line


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    prefix = "!" if no_emoji() else "⚠️ "
    return _emit(f"{prefix} {message}", "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    prefix = "✓" if no_emoji() else "✅"
    return _emit(f"{prefix} {message}", "green")