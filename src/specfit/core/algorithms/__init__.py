"""Numerical building blocks: linear solvers, baselines and noise estimation."""

from specfit.core.algorithms.asls import asls_baseline
from specfit.core.algorithms.linear_algebra import solve_gaussian_elimination
from specfit.core.algorithms.noise import estimate_noise
from specfit.core.algorithms.polynomial import polynomial_baseline

__all__ = [
    "asls_baseline",
    "estimate_noise",
    "polynomial_baseline",
    "solve_gaussian_elimination",
]
