"""Console configuration and theme for SpecFit UI.

This module provides the central console instance and theme used throughout
the application for consistent styling.
"""

import os
import sys

from rich.console import Console
from rich.theme import Theme

from specfit import __version__

SPECFIT_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        "neutral": "dim white",
        # --- UI Structure ---
        "header": "bold cyan",
        "subheader": "bold white",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "number": "green",
        "path": "blue underline",
        "code": "bold magenta",
        "dim": "dim",
        "emphasis": "bold",
    }
)

# Single console instance for entire application
console = Console(theme=SPECFIT_THEME, record=True)

VERSION = __version__


class Verbosity:
    """Verbosity levels for UI output."""

    QUIET = 0  # Errors only
    NORMAL = 1  # Standard output
    VERBOSE = 2  # Detailed output


_verbosity = Verbosity.NORMAL


def set_verbosity(level: int) -> None:
    """Set the global verbosity level (0=QUIET, 1=NORMAL, 2=VERBOSE)."""
    global _verbosity
    _verbosity = level
    console.quiet = level == Verbosity.QUIET


def get_verbosity() -> int:
    """Get the current verbosity level."""
    return _verbosity


_EMOJI_DISABLED = os.getenv("SPECFIT_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_unicode() -> bool:
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a status icon, with ASCII fallbacks for limited terminals.

    Names: check, warn, error, info, bullet, separator
    """
    use_unicode = _supports_unicode()
    mapping = {
        "check": "✓" if use_unicode else "+",
        "warn": "⚠" if use_unicode else "!",
        "error": "✗" if use_unicode else "x",
        "info": "▸" if use_unicode else ">",
        "bullet": "‣" if use_unicode else "-",
        "separator": "━" if use_unicode else "-",
    }
    return mapping.get(name, mapping["bullet"])


__all__ = [
    "SPECFIT_THEME",
    "VERSION",
    "Verbosity",
    "console",
    "get_verbosity",
    "icon",
    "set_verbosity",
]
