"""Finite-difference Jacobian of the multi-peak model."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from specfit.core.constants import JACOBIAN_STEP

if TYPE_CHECKING:
    from specfit.core.shared.typing import FloatArray


def compute_jacobian(
    model: Callable[[FloatArray], FloatArray],
    params: FloatArray,
    baseline_model: FloatArray | None = None,
) -> FloatArray:
    """Forward-difference Jacobian ``d model / d params``.

    The step for parameter ``j`` is ``max(1e-7, |p_j| * 1e-7)``.

    Args:
        model: Maps a parameter vector to model values at every x
        params: Point at which the Jacobian is taken
        baseline_model: ``model(params)`` if already known

    Returns
    -------
    np.ndarray
        Matrix of shape (n_points, n_params)
    """
    y0 = model(params) if baseline_model is None else baseline_model
    jacobian = np.empty((y0.size, params.size), dtype=float)

    for j in range(params.size):
        step = max(JACOBIAN_STEP, abs(float(params[j])) * JACOBIAN_STEP)
        tweaked = params.copy()
        tweaked[j] += step
        jacobian[:, j] = (model(tweaked) - y0) / step

    return jacobian


__all__ = ["compute_jacobian"]
