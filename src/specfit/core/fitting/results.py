"""Fitting result classes and utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from specfit.core.domain.peaks import PeakParameters
from specfit.core.lineshapes import PeakShape
from specfit.core.results.statistics import compute_chi_squared


def _frozen(values: Any) -> np.ndarray:
    arr = np.array(values, dtype=float, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class FitResult:
    """Result of a multi-peak fit.

    ``residuals`` and ``fitted_y`` are index-aligned with the fitted series
    and are read-only copies.
    """

    peaks: tuple[PeakParameters, ...]
    shape: PeakShape
    r_squared: float
    residuals: np.ndarray = field(repr=False)
    fitted_y: np.ndarray = field(repr=False)
    iterations: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "peaks", tuple(self.peaks))
        object.__setattr__(self, "residuals", _frozen(self.residuals))
        object.__setattr__(self, "fitted_y", _frozen(self.fitted_y))

    @property
    def chisqr(self) -> float:
        """Sum of squared residuals."""
        return compute_chi_squared(self.residuals)

    def to_dict(self) -> dict[str, Any]:
        """Return the result as plain JSON-serializable values."""
        return {
            "shape": self.shape.value,
            "r_squared": self.r_squared,
            "iterations": self.iterations,
            "peaks": [peak.to_dict() for peak in self.peaks],
            "fitted_y": self.fitted_y.tolist(),
            "residuals": self.residuals.tolist(),
        }


__all__ = ["FitResult"]
