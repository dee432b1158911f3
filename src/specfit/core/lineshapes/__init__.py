"""Peak profile models.

Three height-normalized profiles parameterized by center, height and FWHM:

- Gaussian
- Lorentzian
- Pseudo-Voigt (Lorentzian fraction ``eta``)
"""

from specfit.core.lineshapes.base import PeakShape, evaluate_profile, profile_area
from specfit.core.lineshapes.functions import (
    gaussian,
    gaussian_area,
    lorentzian,
    lorentzian_area,
    pseudo_voigt,
    pseudo_voigt_area,
)

__all__ = [
    "PeakShape",
    "evaluate_profile",
    "gaussian",
    "gaussian_area",
    "lorentzian",
    "lorentzian_area",
    "profile_area",
    "pseudo_voigt",
    "pseudo_voigt_area",
]
