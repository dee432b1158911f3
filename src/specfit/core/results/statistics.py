"""Goodness-of-fit statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from specfit.core.shared.typing import FloatArray


def compute_chi_squared(residuals: FloatArray) -> float:
    """Compute chi-squared (sum of squared residuals).

    Args:
        residuals: Unweighted residuals (data - model)

    Returns
    -------
        Chi-squared value (sum of residuals squared)
    """
    return float(np.sum(np.square(residuals)))


def compute_r_squared(y: FloatArray, chi_squared: float) -> float:
    """Coefficient of determination ``1 - SS_res / SS_tot``.

    A series with no variance (``SS_tot == 0``), including an empty one,
    gives 1.0.
    """
    if y.size == 0:
        return 1.0
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    return 1.0 - chi_squared / ss_tot if ss_tot > 0 else 1.0


__all__ = ["compute_chi_squared", "compute_r_squared"]
