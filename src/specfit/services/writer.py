"""Writing of pipeline results in the configured output formats."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from specfit.io.writers import write_fitted_curve_csv, write_metrics_csv, write_results_json
from specfit.ui.logging import log

if TYPE_CHECKING:
    from collections.abc import Iterable

    from specfit.core.domain.config import OutputFormat
    from specfit.services.pipeline import AnalysisResult

METRICS_FILENAME = "peaks.csv"
CURVE_FILENAME = "fitted_curve.csv"
SUMMARY_FILENAME = "fit_summary.json"


def write_outputs(
    result: AnalysisResult,
    directory: Path,
    formats: Iterable[OutputFormat],
    metadata: dict[str, Any] | None = None,
) -> list[Path]:
    """Write ``result`` into ``directory``.

    ``csv`` produces the metrics table and the fitted curve; ``json`` the
    full summary.

    Returns
    -------
        Paths of the files written, in write order.
    """
    written: list[Path] = []
    fit = result.fit

    for fmt in dict.fromkeys(formats):
        match fmt:
            case "csv":
                metrics_path = directory / METRICS_FILENAME
                curve_path = directory / CURVE_FILENAME
                write_metrics_csv(result.metrics, metrics_path)
                write_fitted_curve_csv(result.corrected, fit.fitted_y, fit.residuals, curve_path)
                written.extend([metrics_path, curve_path])
            case "json":
                summary_path = directory / SUMMARY_FILENAME
                write_results_json(fit, summary_path, result.detected, metadata)
                written.append(summary_path)

    for path in written:
        log(f"Wrote {path}")
    return written


__all__ = ["write_outputs"]
