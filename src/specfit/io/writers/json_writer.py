"""JSON output writer for SpecFit results.

Produces a machine-readable summary of a fit: the fitted peaks, their
metrics, goodness of fit and the detected candidates that seeded it.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from specfit.core.results.metrics import extract_metrics

if TYPE_CHECKING:
    from specfit.core.domain.peaks import DetectedPeak
    from specfit.core.fitting.results import FitResult

SCHEMA_VERSION = "1.0.0"


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types and Path objects."""

    def default(self, o: Any) -> Any:
        """Convert numpy types and Path objects to Python types."""
        if isinstance(o, np.integer):
            return int(o)
        if isinstance(o, np.floating):
            return float(o)
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Path):
            return str(o)
        return super().default(o)


def results_to_dict(
    result: FitResult,
    detected: Sequence[DetectedPeak] = (),
    metadata: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Assemble the JSON document for a fit."""
    return {
        "schema_version": SCHEMA_VERSION,
        "metadata": {"timestamp": datetime.now(), **(metadata or {})},
        "fit": result.to_dict(),
        "metrics": [metric.to_dict() for metric in extract_metrics(result)],
        "detected_peaks": [peak.to_dict() for peak in detected],
    }


def write_results_json(
    result: FitResult,
    path: Path,
    detected: Sequence[DetectedPeak] = (),
    metadata: dict[str, Any] | None = None,
    indent: int = 2,
) -> None:
    """Write fit results to ``path`` as JSON, creating parent directories.

    Args:
        result: Fit to serialize
        path: Output file path (e.g. ``Results/fit_summary.json``)
        detected: Detected peaks that seeded the fit
        metadata: Extra entries for the ``metadata`` block (input file, config)
        indent: JSON indentation
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    document = results_to_dict(result, detected, metadata)
    with path.open("w", encoding="utf-8") as f:
        json.dump(document, f, cls=NumpyEncoder, indent=indent)
        f.write("\n")


__all__ = ["NumpyEncoder", "results_to_dict", "write_results_json"]
