"""CSV export of peak metrics and fitted curves.

All numbers are written with four decimals and rows are separated by
``\\n`` with no trailing newline, so the text is identical on every
platform.
"""

from __future__ import annotations

import csv
import io
import math
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from specfit.core.domain.spectrum import Spectrum
    from specfit.core.results.metrics import PeakMetric
    from specfit.core.shared.typing import ArrayLike

METRICS_HEADER = ("Peak#", "Position", "Height", "FWHM", "Area", "Shape")
CURVE_HEADER = ("x", "y_raw", "y_fitted", "residual")
BASELINE_HEADER = ("x", "y_raw", "baseline", "corrected")
PRECISION = 4

# Wide enough to quantize any finite double to four decimals
_EXACT = Context(prec=400)


def format_float(value: float, precision: int = PRECISION) -> str:
    """Fixed-point representation with ``precision`` decimals.

    Ties are rounded half away from zero on the exact binary value, so
    ``0.03125`` is written as ``0.0313``. Negative zero is written as ``0.0000``.
    """
    value = float(value) + 0.0
    if not math.isfinite(value):
        return f"{value:.{precision}f}"
    quantum = Decimal(1).scaleb(-precision)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_EXACT)
    return f"{rounded:f}"


def _render(header: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue().removesuffix("\n")


def _columns(*columns: ArrayLike) -> Iterable[list[str]]:
    for values in zip(*columns, strict=True):
        yield [format_float(float(v)) for v in values]


def metrics_to_csv(metrics: Sequence[PeakMetric]) -> str:
    """Render peak metrics as CSV text."""
    rows = (
        [
            str(m.peak_number),
            format_float(m.position),
            format_float(m.height),
            format_float(m.fwhm),
            format_float(m.area),
            m.shape.value,
        ]
        for m in metrics
    )
    return _render(METRICS_HEADER, rows)


def fitted_curve_to_csv(spectrum: Spectrum, fitted_y: ArrayLike, residuals: ArrayLike) -> str:
    """Render the data, fitted model and residuals as CSV text."""
    return _render(CURVE_HEADER, _columns(spectrum.x, spectrum.y, fitted_y, residuals))


def baseline_to_csv(spectrum: Spectrum, baseline: ArrayLike, corrected: ArrayLike) -> str:
    """Render the data, estimated baseline and corrected intensities as CSV text."""
    return _render(BASELINE_HEADER, _columns(spectrum.x, spectrum.y, baseline, corrected))


def _write_text(text: str, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")


def write_metrics_csv(metrics: Sequence[PeakMetric], path: Path) -> None:
    """Write peak metrics to ``path``, creating parent directories."""
    _write_text(metrics_to_csv(metrics), path)


def write_fitted_curve_csv(
    spectrum: Spectrum, fitted_y: ArrayLike, residuals: ArrayLike, path: Path
) -> None:
    """Write the fitted curve table to ``path``, creating parent directories."""
    _write_text(fitted_curve_to_csv(spectrum, fitted_y, residuals), path)


def write_baseline_csv(
    spectrum: Spectrum, baseline: ArrayLike, corrected: ArrayLike, path: Path
) -> None:
    """Write the baseline table to ``path``, creating parent directories."""
    _write_text(baseline_to_csv(spectrum, baseline, corrected), path)


__all__ = [
    "baseline_to_csv",
    "fitted_curve_to_csv",
    "format_float",
    "metrics_to_csv",
    "write_baseline_csv",
    "write_fitted_curve_csv",
    "write_metrics_csv",
]
