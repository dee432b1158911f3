"""Reported quantities derived from fits: per-peak metrics and fit statistics."""

from specfit.core.results.metrics import PeakMetric, compute_envelope, extract_metrics
from specfit.core.results.statistics import compute_chi_squared, compute_r_squared

__all__ = [
    "PeakMetric",
    "compute_chi_squared",
    "compute_envelope",
    "compute_r_squared",
    "extract_metrics",
]
