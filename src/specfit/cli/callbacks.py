"""Typer callbacks and shared helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from pydantic import ValidationError

from specfit.core.shared.exceptions import SpecFitError
from specfit.ui import error, show_version


def version_callback(value: bool | None) -> None:
    """Show version information and exit."""
    if value:
        show_version()
        raise typer.Exit


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err["loc"])
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts)


@contextmanager
def exit_on_error(context: str) -> Iterator[None]:
    """Report expected failures as a Rich error message and exit with status 1."""
    try:
        yield
    except ValidationError as exc:
        error(f"{context}: invalid configuration ({_format_validation_error(exc)})")
        raise typer.Exit(code=1) from exc
    except (SpecFitError, OSError) as exc:
        error(f"{context}: {exc}")
        raise typer.Exit(code=1) from exc
