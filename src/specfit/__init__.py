"""SpecFit - Baseline correction, peak detection and peak fitting for 1-D spectra.

Public API:
    - AnalysisPipeline: baseline -> detection -> fitting on one spectrum
    - compute_baseline, correct_baseline, detect_peaks, fit_peaks

Configuration:
    - SpecFitConfig: Main configuration object
    - BaselineConfig, DetectConfig, FitConfig, OutputConfig: Sub-configurations
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from specfit.core.baseline import compute_baseline, correct_baseline
from specfit.core.detection import detect_peaks, estimate_noise
from specfit.core.domain import (
    BaselineConfig,
    DetectConfig,
    DetectedPeak,
    FitConfig,
    OutputConfig,
    PeakParameters,
    SpecFitConfig,
    Spectrum,
)
from specfit.core.fitting import FitResult, fit_peaks
from specfit.core.lineshapes import PeakShape
from specfit.services import AnalysisPipeline, AnalysisResult

__all__ = [
    # Version
    "__version__",
    # Services
    "AnalysisPipeline",
    "AnalysisResult",
    # Operations
    "compute_baseline",
    "correct_baseline",
    "detect_peaks",
    "estimate_noise",
    "fit_peaks",
    # Configuration
    "BaselineConfig",
    "DetectConfig",
    "FitConfig",
    "OutputConfig",
    "SpecFitConfig",
    # Domain
    "DetectedPeak",
    "FitResult",
    "PeakParameters",
    "PeakShape",
    "Spectrum",
]
