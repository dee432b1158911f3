"""Pure NumPy peak profile functions.

All profiles are height-normalized: they equal ``height`` at ``x0`` and
``height / 2`` at ``x0 +/- fwhm / 2``. Every function accepts either a scalar
or an array for ``x`` and broadcasts with NumPy.

Closed-form areas integrate each profile over the whole real line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from specfit.core.shared.typing import ArrayLike, FloatArray

# =============================================================================
# Module-Level Constants
# =============================================================================

_LN2 = np.log(2.0)
_FOUR_LN2 = 4.0 * _LN2
_SQRT_PI_4LN2 = np.sqrt(np.pi / _FOUR_LN2)


# =============================================================================
# Profile Values
# =============================================================================


def gaussian(x: ArrayLike, height: float, x0: float, fwhm: float) -> FloatArray:
    """Gaussian profile ``H * exp(-4 ln2 ((x - x0) / w)^2)``."""
    t = (np.asarray(x, dtype=float) - x0) / fwhm
    return height * np.exp(-_FOUR_LN2 * t * t)


def lorentzian(x: ArrayLike, height: float, x0: float, fwhm: float) -> FloatArray:
    """Lorentzian profile ``H * w^2 / (4 (x - x0)^2 + w^2)``."""
    dx = np.asarray(x, dtype=float) - x0
    w2 = fwhm * fwhm
    return height * w2 / (4.0 * dx * dx + w2)


def pseudo_voigt(
    x: ArrayLike, height: float, x0: float, fwhm: float, eta: float
) -> FloatArray:
    """Pseudo-Voigt profile ``eta * L(x) + (1 - eta) * G(x)``.

    Linear combination of Lorentzian and Gaussian sharing center, height and
    FWHM, with mixing parameter ``eta`` in [0, 1].
    """
    return eta * lorentzian(x, height, x0, fwhm) + (1.0 - eta) * gaussian(x, height, x0, fwhm)


# =============================================================================
# Closed-Form Areas
# =============================================================================


def gaussian_area(height: float, fwhm: float) -> float:
    """Area under a Gaussian: ``H * w * sqrt(pi / (4 ln2))``."""
    return float(height * fwhm * _SQRT_PI_4LN2)


def lorentzian_area(height: float, fwhm: float) -> float:
    """Area under a Lorentzian: ``H * w * pi / 2``."""
    return float(height * fwhm * np.pi / 2.0)


def pseudo_voigt_area(height: float, fwhm: float, eta: float) -> float:
    """Area under a pseudo-Voigt profile."""
    return eta * lorentzian_area(height, fwhm) + (1.0 - eta) * gaussian_area(height, fwhm)


__all__ = [
    "gaussian",
    "gaussian_area",
    "lorentzian",
    "lorentzian_area",
    "pseudo_voigt",
    "pseudo_voigt_area",
]
