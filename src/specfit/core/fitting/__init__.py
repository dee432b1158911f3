"""Peak fitting optimization and computation.

Multi-peak Levenberg-Marquardt fitting with a shared profile shape,
together with the parameter packing and Jacobian it relies on.
"""

from specfit.core.fitting.jacobian import compute_jacobian
from specfit.core.fitting.optimizer import LevenbergMarquardt, fit_peaks
from specfit.core.fitting.parameters import clamp_eta, pack_parameters, unpack_parameters
from specfit.core.fitting.results import FitResult

__all__ = [
    "FitResult",
    "LevenbergMarquardt",
    "clamp_eta",
    "compute_jacobian",
    "fit_peaks",
    "pack_parameters",
    "unpack_parameters",
]
