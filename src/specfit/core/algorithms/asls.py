"""Asymmetric least squares (AsLS) baseline estimation.

Minimizes ``sum_i w_i (y_i - z_i)^2 + lam * sum_i (D2 z)_i^2`` over the
background ``z``, where ``D2`` is the second-difference operator and the
weights are refitted after each pass: points above the current baseline get
the small weight ``p`` and points on or below it get ``1 - p``. The baseline
therefore follows the lower envelope of the signal and ignores peaks.

The penalty ``D2^T D2`` is a pentadiagonal sparse matrix. Each pass solves
``(W + lam D2^T D2) z = W y`` with a conjugate-gradient loop warm-started
from the previous baseline, so no dense n x n matrix is ever formed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy import sparse

from specfit.core.constants import (
    ASLS_DEFAULT_ITERATIONS,
    ASLS_DEFAULT_LAMBDA,
    ASLS_DEFAULT_P,
    ASLS_MAX_P,
    ASLS_MIN_ITERATIONS,
    ASLS_MIN_LAMBDA,
    ASLS_MIN_P,
    ASLS_MIN_POINTS,
    CG_DENOM_TOL,
    CG_MAX_ITERATIONS,
    CG_MIN_ITERATIONS,
    CG_RESIDUAL_TOL,
)

if TYPE_CHECKING:
    from specfit.core.shared.typing import ArrayLike, FloatArray


def second_difference_penalty(n: int) -> sparse.csr_matrix:
    """Return ``D2^T D2`` for a series of ``n`` points as a sparse matrix.

    Interior rows apply the stencil ``1 -4 6 -4 1``; the two rows at each end
    are ``1 -2 1`` and ``-2 5 -4 1`` (mirrored on the right).
    """
    identity = sparse.eye(n, format="csr")
    d2 = identity[2:] - 2 * identity[1:-1] + identity[:-2]
    return (d2.T @ d2).tocsr()


def _cg_iteration_cap(n: int) -> int:
    return min(max(CG_MIN_ITERATIONS, n), CG_MAX_ITERATIONS)


def solve_penalized_system(
    y: FloatArray,
    weights: FloatArray,
    lam: float,
    penalty: sparse.csr_matrix,
    x0: FloatArray,
) -> FloatArray:
    """Solve ``(W + lam * penalty) z = W y`` by conjugate gradient.

    Args:
        y: Observed intensities
        weights: Per-point weights (diagonal of ``W``)
        lam: Smoothness weight
        penalty: ``D2^T D2`` from :func:`second_difference_penalty`
        x0: Starting estimate (not modified)

    Returns
    -------
        Approximate solution ``z``.
    """
    n = y.size

    def apply(v: FloatArray) -> FloatArray:
        return weights * v + lam * (penalty @ v)

    b = weights * y
    x = np.array(x0, dtype=float, copy=True)
    r = b - apply(x)
    direction = r.copy()
    rs_old = float(r @ r)
    if rs_old < CG_DENOM_TOL:
        return x

    sqrt_n = np.sqrt(n)
    for _ in range(_cg_iteration_cap(n)):
        a_dir = apply(direction)
        denom = float(direction @ a_dir)
        if abs(denom) < CG_DENOM_TOL:
            break

        alpha = rs_old / denom
        x += alpha * direction
        r -= alpha * a_dir

        rs_new = float(r @ r)
        if np.sqrt(rs_new) / sqrt_n < CG_RESIDUAL_TOL:
            break

        direction = r + (rs_new / rs_old) * direction
        rs_old = rs_new

    return x


def asls_baseline(
    y: ArrayLike,
    lam: float = ASLS_DEFAULT_LAMBDA,
    p: float = ASLS_DEFAULT_P,
    iterations: int = ASLS_DEFAULT_ITERATIONS,
) -> FloatArray:
    """Estimate a smooth baseline under ``y`` with asymmetric least squares.

    Args:
        y: Intensities (x spacing is not used)
        lam: Smoothness weight, floored at 1
        p: Asymmetry, clamped to [1e-6, 0.499]
        iterations: Number of reweighting passes, floored at 1

    Returns
    -------
        Baseline of the same length as ``y``. Series with fewer than three
        points are returned unchanged.
    """
    values = np.array(y, dtype=float, copy=True)
    n = values.size
    if n < ASLS_MIN_POINTS:
        return values

    lam = max(ASLS_MIN_LAMBDA, float(lam))
    p = min(ASLS_MAX_P, max(ASLS_MIN_P, float(p)))
    iterations = max(ASLS_MIN_ITERATIONS, int(np.floor(iterations)))

    penalty = second_difference_penalty(n)
    weights = np.ones(n, dtype=float)
    baseline = values.copy()

    for _ in range(iterations):
        baseline = solve_penalized_system(values, weights, lam, penalty, baseline)
        weights = np.where(values > baseline, p, 1.0 - p)

    return baseline


__all__ = ["asls_baseline", "second_difference_penalty", "solve_penalized_system"]
