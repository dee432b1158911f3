"""I/O module for SpecFit.

Handles file operations including:
- Spectrum text parsing
- Configuration file loading/saving (TOML)
- Result file output (CSV, JSON)
"""

from specfit.io.config import generate_default_config, load_config, save_config
from specfit.io.readers import load_spectrum, parse_spectrum_text
from specfit.io.writers import (
    fitted_curve_to_csv,
    metrics_to_csv,
    write_fitted_curve_csv,
    write_metrics_csv,
    write_results_json,
)

__all__ = [
    "fitted_curve_to_csv",
    "generate_default_config",
    "load_config",
    "load_spectrum",
    "metrics_to_csv",
    "parse_spectrum_text",
    "save_config",
    "write_fitted_curve_csv",
    "write_metrics_csv",
    "write_results_json",
]
