"""Small dense linear solvers.

The systems solved here are tiny (polynomial normal equations and the damped
Levenberg-Marquardt normal equations), so a plain Gaussian elimination with
partial pivoting is used. Singular pivots do not raise: the corresponding
unknown is set to zero and the solve carries on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from specfit.core.shared.typing import ArrayLike, FloatArray


def solve_gaussian_elimination(
    matrix: ArrayLike, rhs: ArrayLike, pivot_tol: float
) -> FloatArray:
    """Solve ``matrix @ x = rhs`` by Gaussian elimination with partial pivoting.

    Args:
        matrix: Square (m, m) coefficient matrix
        rhs: Right-hand side of length m
        pivot_tol: Pivots with magnitude below this value are treated as singular

    Returns
    -------
        Solution vector of length m. Unknowns whose pivot is singular are 0.
    """
    a = np.array(matrix, dtype=float, copy=True)
    m = a.shape[0]
    aug = np.empty((m, m + 1), dtype=float)
    aug[:, :m] = a
    aug[:, m] = np.asarray(rhs, dtype=float)

    for col in range(m):
        max_row = col + int(np.argmax(np.abs(aug[col:, col])))
        if max_row != col:
            aug[[col, max_row]] = aug[[max_row, col]]
        pivot = aug[col, col]
        if abs(pivot) < pivot_tol:
            continue
        factors = aug[col + 1 :, col] / pivot
        aug[col + 1 :, col:] -= np.outer(factors, aug[col, col:])

    solution = np.zeros(m, dtype=float)
    for i in range(m - 1, -1, -1):
        acc = aug[i, m] - aug[i, i + 1 : m] @ solution[i + 1 :]
        solution[i] = acc / aug[i, i] if abs(aug[i, i]) >= pivot_tol else 0.0
    return solution


__all__ = ["solve_gaussian_elimination"]
