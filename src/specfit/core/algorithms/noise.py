import numpy as np

from specfit.core.constants import MAD_TO_SIGMA
from specfit.core.shared.typing import ArrayLike


def _median(values: np.ndarray) -> float:
    """Median that returns 0 for an empty array."""
    if values.size == 0:
        return 0.0
    return float(np.median(values))


def mad(values: ArrayLike) -> float:
    """Median absolute deviation of ``values`` about their median."""
    arr = np.asarray(values, dtype=float).ravel()
    median = _median(arr)
    return _median(np.abs(arr - median))


def estimate_noise(values: ArrayLike) -> float:
    """Estimate the noise level of a series.

    Robust estimate: the median absolute deviation scaled by 1.4826, which
    matches the standard deviation for Gaussian noise. Peaks occupying a
    minority of samples barely move it; a constant series gives 0.
    """
    return MAD_TO_SIGMA * mad(values)
