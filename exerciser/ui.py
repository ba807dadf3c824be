"""Coloured status messages."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def warn(message: str) -> None:
    """Print a warning in red."""
    marker = "!" if _no_emoji() else "⚠️ "
    _console().print(Text.assemble((marker, "red"), " ", (message, "red")))


def success(message: str) -> None:
    """Print a success message in green."""
    marker = "✓" if _no_emoji() else "✅"
    _console().print(Text.assemble((marker, "green"), " ", (message, "green")))