"""Per-peak metrics derived from a fit.

Metrics are what gets reported to the user and exported: peak number
(1-based, in fit order), position, height, FWHM, integrated area and the
shape. ``eta`` is only reported for pseudo-Voigt fits.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from specfit.core.lineshapes import PeakShape, evaluate_profile, profile_area

if TYPE_CHECKING:
    from specfit.core.domain.peaks import PeakParameters
    from specfit.core.fitting.results import FitResult
    from specfit.core.shared.typing import ArrayLike, FloatArray


@dataclass(frozen=True, slots=True)
class PeakMetric:
    """Reported quantities for one fitted peak."""

    peak_number: int
    position: float
    height: float
    fwhm: float
    area: float
    shape: PeakShape
    eta: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the metric as plain values."""
        data: dict[str, Any] = {
            "peak_number": self.peak_number,
            "position": self.position,
            "height": self.height,
            "fwhm": self.fwhm,
            "area": self.area,
            "shape": self.shape.value,
        }
        if self.eta is not None:
            data["eta"] = self.eta
        return data


def extract_metrics(result: FitResult) -> list[PeakMetric]:
    """Build one :class:`PeakMetric` per fitted peak."""
    shape = result.shape
    return [
        PeakMetric(
            peak_number=number,
            position=peak.x0,
            height=peak.height,
            fwhm=peak.fwhm,
            area=profile_area(peak, shape),
            shape=shape,
            eta=peak.eta if shape is PeakShape.PSEUDO_VOIGT else None,
        )
        for number, peak in enumerate(result.peaks, start=1)
    ]


def compute_envelope(
    x: ArrayLike, peaks: Sequence[PeakParameters], shape: PeakShape
) -> FloatArray:
    """Total fitted envelope: the sum of all peak profiles at ``x``."""
    positions = np.asarray(x, dtype=float)
    envelope = np.zeros_like(positions)
    for peak in peaks:
        envelope = envelope + evaluate_profile(positions, peak, shape)
    return envelope


__all__ = ["PeakMetric", "compute_envelope", "extract_metrics"]
