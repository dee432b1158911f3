"""UI tables for displaying structured data.

This module provides functions for creating and displaying Rich tables
with consistent styling across the application.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table

from specfit.ui.console import console

if TYPE_CHECKING:
    from specfit.core.domain.peaks import DetectedPeak
    from specfit.core.results.metrics import PeakMetric

__all__ = [
    "create_table",
    "print_detected_peaks",
    "print_metrics",
    "print_summary",
]


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling.

    Args:
        title: Optional table title
        show_header: Whether to show table header

    Returns
    -------
        Configured Table instance
    """
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table.

    Args:
        items: Dictionary of key-value pairs to display
        title: Table title
    """
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)


def print_detected_peaks(peaks: Sequence[DetectedPeak], title: str = "Detected Peaks") -> None:
    """Print one row per detected peak."""
    table = create_table(title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Index", justify="right")
    table.add_column("Position", justify="right", style="value")
    table.add_column("Height", justify="right", style="value")
    table.add_column("Est. FWHM", justify="right", style="value")

    for number, peak in enumerate(peaks, start=1):
        table.add_row(
            str(number),
            str(peak.index),
            f"{peak.x:.4f}",
            f"{peak.y:.4f}",
            f"{peak.estimated_fwhm:.4f}",
        )

    console.print(table)


def print_metrics(metrics: Sequence[PeakMetric], title: str = "Fitted Peaks") -> None:
    """Print the per-peak metrics of a fit."""
    show_eta = any(m.eta is not None for m in metrics)

    table = create_table(title)
    table.add_column("Peak#", justify="right", style="dim")
    table.add_column("Position", justify="right", style="value")
    table.add_column("Height", justify="right", style="value")
    table.add_column("FWHM", justify="right", style="value")
    table.add_column("Area", justify="right", style="metric")
    if show_eta:
        table.add_column("Eta", justify="right", style="value")
    table.add_column("Shape")

    for m in metrics:
        row = [
            str(m.peak_number),
            f"{m.position:.4f}",
            f"{m.height:.4f}",
            f"{m.fwhm:.4f}",
            f"{m.area:.4f}",
        ]
        if show_eta:
            row.append(f"{m.eta:.3f}" if m.eta is not None else "")
        row.append(m.shape.value)
        table.add_row(*row)

    console.print(table)
