"""Domain models representing core SpecFit entities."""

from specfit.core.domain.config import (
    BaselineConfig,
    DetectConfig,
    FitConfig,
    OutputConfig,
    SpecFitConfig,
)
from specfit.core.domain.peaks import DetectedPeak, PeakParameters
from specfit.core.domain.spectrum import Point, Spectrum

__all__ = [
    "BaselineConfig",
    "DetectConfig",
    "DetectedPeak",
    "FitConfig",
    "OutputConfig",
    "PeakParameters",
    "Point",
    "SpecFitConfig",
    "Spectrum",
]
