"""Levenberg-Marquardt refinement of multi-peak models.

All peaks share one profile shape. The parameter vector packs ``x0, height,
fwhm`` per peak (plus ``eta`` for pseudo-Voigt); the model is always built
from the bounded, unpacked parameters so heights and widths never fall below
the floor and eta stays in [0, 1].

Each iteration solves the damped normal equations

    (J^T J + lambda I) dp = J^T r

with a forward-difference Jacobian. A step is accepted only if it lowers the
sum of squared residuals; damping is halved on acceptance and multiplied by
five on rejection. The loop ends once an accepted step improves chi-square by
less than ``tolerance`` (relative) or after ``max_iterations``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from specfit.core.algorithms.linear_algebra import solve_gaussian_elimination
from specfit.core.constants import (
    LM_CHI2_EPS,
    LM_DAMPING_DECREASE,
    LM_DAMPING_INCREASE,
    LM_INITIAL_DAMPING,
    LM_PIVOT_TOL,
)
from specfit.core.domain.config import FitConfig
from specfit.core.fitting.jacobian import compute_jacobian
from specfit.core.fitting.parameters import pack_parameters, unpack_parameters
from specfit.core.fitting.results import FitResult
from specfit.core.results.metrics import compute_envelope
from specfit.core.results.statistics import compute_chi_squared, compute_r_squared

if TYPE_CHECKING:
    from specfit.core.domain.peaks import PeakParameters
    from specfit.core.domain.spectrum import Spectrum
    from specfit.core.lineshapes import PeakShape
    from specfit.core.shared.typing import FloatArray


@dataclass
class LevenbergMarquardt:
    """Damped Gauss-Newton optimizer for a fixed x grid and peak shape.

    Holds the accepted state (``params``, ``model``, ``residuals``, ``chi2``)
    between iterations. One instance serves a single fit.
    """

    x: FloatArray
    y: FloatArray
    shape: PeakShape
    fixed_eta: list[float]
    damping: float = LM_INITIAL_DAMPING

    params: FloatArray = field(init=False, repr=False)
    model: FloatArray = field(init=False, repr=False)
    residuals: FloatArray = field(init=False, repr=False)
    chi2: float = field(init=False, default=0.0)

    def start(self, params: FloatArray) -> None:
        """Set the initial state from ``params``."""
        self.params = np.asarray(params, dtype=float).copy()
        self.model = self.evaluate(self.params)
        self.residuals = self.y - self.model
        self.chi2 = compute_chi_squared(self.residuals)

    def evaluate(self, params: FloatArray) -> FloatArray:
        """Model values for a raw parameter vector."""
        peaks = unpack_parameters(params, self.shape, self.fixed_eta)
        return compute_envelope(self.x, peaks, self.shape)

    def propose(self) -> FloatArray:
        """Solve the damped normal equations for the next step."""
        jacobian = compute_jacobian(self.evaluate, self.params, self.model)
        normal = jacobian.T @ jacobian
        normal[np.diag_indices_from(normal)] += self.damping
        gradient = jacobian.T @ self.residuals
        return solve_gaussian_elimination(normal, gradient, LM_PIVOT_TOL)

    def step(self) -> tuple[bool, float]:
        """Try one step.

        Returns
        -------
        tuple[bool, float]
            Whether the step was accepted and its relative chi-square
            improvement (0.0 when rejected).
        """
        candidate = self.params + self.propose()
        model = self.evaluate(candidate)
        residuals = self.y - model
        chi2 = compute_chi_squared(residuals)

        if chi2 < self.chi2:
            improvement = abs(self.chi2 - chi2) / (self.chi2 + LM_CHI2_EPS)
            self.params, self.model, self.residuals, self.chi2 = candidate, model, residuals, chi2
            self.damping *= LM_DAMPING_DECREASE
            return True, improvement

        self.damping *= LM_DAMPING_INCREASE
        return False, 0.0


def fit_peaks(
    spectrum: Spectrum,
    initial_peaks: Sequence[PeakParameters],
    config: FitConfig | None = None,
) -> FitResult:
    """Refine ``initial_peaks`` against ``spectrum``.

    Args:
        spectrum: Series to fit, usually baseline-corrected
        initial_peaks: Starting parameters, one entry per peak
        config: Shape, iteration limit and tolerance; defaults if None

    Returns
    -------
    FitResult
        Best parameters found, R², residuals, fitted curve and the number of
        iterations performed. Non-convergence is not an error: the last
        accepted state is returned.
    """
    config = config or FitConfig()
    shape = config.shape
    x, y = spectrum.x, spectrum.y

    if not initial_peaks:
        model = np.zeros_like(y)
        residuals = y - model
        return FitResult(
            peaks=(),
            shape=shape,
            r_squared=compute_r_squared(y, compute_chi_squared(residuals)),
            residuals=residuals,
            fitted_y=model,
            iterations=0,
        )

    optimizer = LevenbergMarquardt(
        x=x,
        y=y,
        shape=shape,
        fixed_eta=[peak.eta for peak in initial_peaks],
    )
    optimizer.start(pack_parameters(initial_peaks, shape))

    iterations = 0
    for iteration in range(config.max_iterations):
        iterations = iteration + 1
        accepted, improvement = optimizer.step()
        if accepted and improvement < config.tolerance:
            break

    return FitResult(
        peaks=tuple(unpack_parameters(optimizer.params, shape, optimizer.fixed_eta)),
        shape=shape,
        r_squared=compute_r_squared(y, optimizer.chi2),
        residuals=optimizer.residuals,
        fitted_y=optimizer.model,
        iterations=iterations,
    )


__all__ = ["LevenbergMarquardt", "fit_peaks"]
