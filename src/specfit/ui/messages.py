"""UI messages and status indicators."""

from __future__ import annotations

from specfit.ui.console import VERSION, console, icon
from specfit.ui.logging import log, log_section

__all__ = [
    "error",
    "info",
    "show_header",
    "show_version",
    "spacer",
    "success",
    "warning",
]


def show_header(text: str, do_log: bool = True) -> None:
    """Display a prominent section header."""
    rule = icon("separator") * 60
    console.print(f"[header]{rule}[/header]")
    console.print(f"[header]  {text}[/header]")
    console.print(f"[header]{rule}[/header]")
    if do_log:
        log_section(text)


def success(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a success message."""
    spaces = "  " * indent
    console.print(f"{spaces}[success]{icon('check')}[/success] {message}")
    if do_log:
        log(message)


def warning(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a warning message."""
    spaces = "  " * indent
    console.print(f"{spaces}[warning]{icon('warn')}[/warning]  {message}")
    if do_log:
        log(message, level="warning")


def error(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an error message."""
    spaces = "  " * indent
    console.print(f"{spaces}[error]{icon('error')}[/error] {message}")
    if do_log:
        log(message, level="error")


def info(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an info message."""
    spaces = "  " * indent
    console.print(f"{spaces}[dim]{icon('info')}[/dim] {message}")
    if do_log:
        log(message)


def spacer() -> None:
    """Print an empty line for visual spacing."""
    console.print()


def show_version() -> None:
    """Show version information (for --version flag)."""
    console.print(f"[header]SpecFit[/header] [dim]v{VERSION}[/dim]")
