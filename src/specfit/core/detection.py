"""Peak detection on 1-D spectra.

Candidates are local maxima that clear two filters:

1. an absolute threshold, ``noise * noise_multiplier``, where the noise is the
   MAD-based estimate of the whole series;
2. a prominence threshold, ``max(y) * min_prominence_fraction``.

Local maxima use ``y[i] >= y[i-1]`` and ``y[i] > y[i+1]`` so that a flat top
is reported once, at its right-most sample. The first and last samples may
also be reported when ``detect_edges`` is set. Each accepted peak gets a FWHM
estimate from linear interpolation of its half-maximum crossings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from specfit.core.algorithms.noise import estimate_noise
from specfit.core.constants import DETECTION_MIN_POINTS
from specfit.core.domain.config import DetectConfig
from specfit.core.domain.peaks import DetectedPeak

if TYPE_CHECKING:
    from specfit.core.domain.spectrum import Spectrum
    from specfit.core.shared.typing import FloatArray


def _side_minimum(values: FloatArray, peak_idx: int, step: int) -> float | None:
    """Lowest value met scanning from the peak until a taller sample.

    Returns None when the peak has no neighbor in that direction.
    """
    peak_val = values[peak_idx]
    i = peak_idx + step
    if not 0 <= i < values.size:
        return None
    lowest = peak_val
    while 0 <= i < values.size:
        if values[i] > peak_val:
            break
        lowest = min(lowest, values[i])
        i += step
    return float(lowest)


def prominence(values: FloatArray, peak_idx: int) -> float:
    """Height of a peak above the higher of its two surrounding valleys.

    At the ends of the series only the inner side is scanned.
    """
    left = _side_minimum(values, peak_idx, -1)
    right = _side_minimum(values, peak_idx, 1)
    sides = [m for m in (left, right) if m is not None]
    if not sides:
        return 0.0
    return float(values[peak_idx] - max(sides))


def _local_spacing(x: FloatArray, peak_idx: int, step: int) -> float:
    neighbor = peak_idx + step
    if not 0 <= neighbor < x.size:
        neighbor = peak_idx - step
    return float(abs(x[neighbor] - x[peak_idx]))


def _half_width(x: FloatArray, y: FloatArray, peak_idx: int, step: int) -> float:
    """Distance from the peak to its half-maximum crossing on one side.

    When the series ends before the signal drops to half maximum, the boundary
    is used as a one-sided approximation: ``max(2 * distance to boundary,
    local sample spacing)``.
    """
    half_max = y[peak_idx] / 2.0
    i = peak_idx + step
    while 0 <= i < y.size:
        if y[i] <= half_max:
            inner = i - step
            drop = y[inner] - y[i]
            frac = (half_max - y[i]) / drop if drop != 0 else 0.0
            cross_x = x[i] + frac * (x[inner] - x[i])
            return float(abs(cross_x - x[peak_idx]))
        i += step

    boundary = 0 if step < 0 else y.size - 1
    distance = float(abs(x[boundary] - x[peak_idx]))
    return max(2.0 * distance, _local_spacing(x, peak_idx, step))


def estimate_fwhm(x: FloatArray, y: FloatArray, peak_idx: int) -> float:
    """Estimate the full width at half maximum of the peak at ``peak_idx``."""
    return _half_width(x, y, peak_idx, -1) + _half_width(x, y, peak_idx, 1)


def _is_candidate(y: FloatArray, i: int, detect_edges: bool) -> bool:
    last = y.size - 1
    if 0 < i < last:
        return bool(y[i] >= y[i - 1] and y[i] > y[i + 1])
    if not detect_edges:
        return False
    if i == 0:
        return bool(y[0] > y[1])
    return bool(y[last] > y[last - 1])


def detect_peaks(spectrum: Spectrum, config: DetectConfig | None = None) -> list[DetectedPeak]:
    """Propose candidate peaks in ``spectrum``.

    Args:
        spectrum: Input series, usually baseline-corrected
        config: Detection options; defaults if None

    Returns
    -------
        Detected peaks sorted by ascending x. Empty for fewer than 3 points.
    """
    config = config or DetectConfig()
    x, y = spectrum.x, spectrum.y
    n = y.size
    if n < DETECTION_MIN_POINTS:
        return []

    threshold = estimate_noise(y) * config.noise_multiplier
    prominence_threshold = float(np.max(y)) * config.min_prominence_fraction

    peaks: list[DetectedPeak] = []
    for i in range(n):
        if not _is_candidate(y, i, config.detect_edges):
            continue
        if y[i] < threshold:
            continue
        if prominence(y, i) < prominence_threshold:
            continue
        peaks.append(
            DetectedPeak(
                index=i,
                x=float(x[i]),
                y=float(y[i]),
                estimated_fwhm=estimate_fwhm(x, y, i),
            )
        )

    peaks.sort(key=lambda peak: peak.x)
    return peaks


__all__ = ["detect_peaks", "estimate_fwhm", "estimate_noise", "prominence"]
