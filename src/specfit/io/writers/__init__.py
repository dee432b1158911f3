"""Output writers for SpecFit results (CSV and JSON)."""

from specfit.io.writers.csv_writer import (
    baseline_to_csv,
    fitted_curve_to_csv,
    metrics_to_csv,
    write_baseline_csv,
    write_fitted_curve_csv,
    write_metrics_csv,
)
from specfit.io.writers.json_writer import NumpyEncoder, results_to_dict, write_results_json

__all__ = [
    "NumpyEncoder",
    "baseline_to_csv",
    "fitted_curve_to_csv",
    "metrics_to_csv",
    "results_to_dict",
    "write_baseline_csv",
    "write_fitted_curve_csv",
    "write_metrics_csv",
    "write_results_json",
]
