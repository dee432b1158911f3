"""Least-squares polynomial baselines through a set of basis points."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from specfit.core.algorithms.linear_algebra import solve_gaussian_elimination
from specfit.core.constants import (
    AUTO_BASELINE_FRACTION,
    AUTO_BASELINE_MIN_POINTS,
    POLY_PIVOT_TOL,
)
from specfit.core.shared.exceptions import InvalidAnchorError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from specfit.core.shared.typing import ArrayLike, FloatArray, IntArray


def auto_basis_indices(y: ArrayLike) -> IntArray:
    """Indices of the lowest-intensity points used as baseline basis.

    Takes the lowest ``AUTO_BASELINE_FRACTION`` of the points (at least
    ``AUTO_BASELINE_MIN_POINTS``). A stable sort is used, so equal intensities
    keep their input order; which of several tied points is selected is not
    part of the contract.
    """
    values = np.asarray(y, dtype=float)
    count = max(AUTO_BASELINE_MIN_POINTS, int(np.floor(values.size * AUTO_BASELINE_FRACTION)))
    order = np.argsort(values, kind="stable")
    return order[:count]


def validate_anchor_indices(anchors: Sequence[int], n_points: int) -> IntArray:
    """Check that every anchor addresses a point of the series.

    Raises
    ------
    InvalidAnchorError
        If an index is negative or not smaller than ``n_points``.
    """
    for index in anchors:
        if not 0 <= index < n_points:
            raise InvalidAnchorError(int(index), n_points)
    return np.asarray(anchors, dtype=int)


def polyfit_normal_equations(x: ArrayLike, y: ArrayLike, degree: int) -> FloatArray:
    """Fit polynomial coefficients (ascending powers) by normal equations.

    Builds ``X^T X c = X^T y`` with the Vandermonde matrix ``X`` and solves it
    by Gaussian elimination. Singular pivots give zero coefficients.
    """
    xv = np.asarray(x, dtype=float)
    yv = np.asarray(y, dtype=float)
    vander = np.vander(xv, degree + 1, increasing=True)
    xtx = vander.T @ vander
    xty = vander.T @ yv
    return solve_gaussian_elimination(xtx, xty, POLY_PIVOT_TOL)


def polyval_ascending(coeffs: ArrayLike, x: ArrayLike) -> FloatArray:
    """Evaluate a polynomial given in ascending-power coefficients."""
    return np.polynomial.polynomial.polyval(np.asarray(x, dtype=float), np.asarray(coeffs))


def polynomial_baseline(
    x: ArrayLike,
    y: ArrayLike,
    degree: int,
    anchor_indices: Sequence[int] | None = None,
) -> FloatArray:
    """Polynomial baseline evaluated at every ``x``.

    Args:
        x: Sample positions
        y: Intensities
        degree: Polynomial degree (1 for a straight line)
        anchor_indices: Explicit basis points; lowest-intensity points if None

    Returns
    -------
        Baseline values, same length as ``x``.
    """
    xv = np.asarray(x, dtype=float)
    yv = np.asarray(y, dtype=float)
    if xv.size == 0:
        return np.zeros(0, dtype=float)

    if anchor_indices is not None and len(anchor_indices) >= 2:
        basis = validate_anchor_indices(anchor_indices, xv.size)
    else:
        basis = auto_basis_indices(yv)

    coeffs = polyfit_normal_equations(xv[basis], yv[basis], degree)
    return polyval_ascending(coeffs, xv)


__all__ = [
    "auto_basis_indices",
    "polyfit_normal_equations",
    "polynomial_baseline",
    "polyval_ascending",
    "validate_anchor_indices",
]
