"""Closed set of peak shapes with their evaluation and area behaviour."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, assert_never

from specfit.core.constants import DEFAULT_ETA
from specfit.core.lineshapes.functions import (
    gaussian,
    gaussian_area,
    lorentzian,
    lorentzian_area,
    pseudo_voigt,
    pseudo_voigt_area,
)
from specfit.core.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from specfit.core.domain.peaks import PeakParameters
    from specfit.core.shared.typing import ArrayLike, FloatArray

_ALIASES: dict[str, str] = {
    "gaussian": "gaussian",
    "gauss": "gaussian",
    "lorentzian": "lorentzian",
    "lorentz": "lorentzian",
    "pseudo_voigt": "pseudo_voigt",
    "pseudovoigt": "pseudo_voigt",
    "pseudo-voigt": "pseudo_voigt",
    "pvoigt": "pseudo_voigt",
}


class PeakShape(str, Enum):
    """Peak profile selected by the caller.

    Each member knows how to evaluate itself and how to compute its
    closed-form area. ``eta`` is ignored by the Gaussian and Lorentzian shapes.
    """

    GAUSSIAN = "gaussian"
    LORENTZIAN = "lorentzian"
    PSEUDO_VOIGT = "pseudo_voigt"

    @classmethod
    def from_name(cls, name: str | PeakShape) -> PeakShape:
        """Resolve a shape from its name or a common alias."""
        if isinstance(name, PeakShape):
            return name
        key = _ALIASES.get(name.strip().lower())
        if key is None:
            valid = ", ".join(member.value for member in cls)
            msg = f"Unknown peak shape '{name}'. Valid shapes: {valid}"
            raise ConfigError(msg)
        return cls(key)

    @property
    def n_params(self) -> int:
        """Number of packed fit parameters per peak (stride)."""
        return 4 if self is PeakShape.PSEUDO_VOIGT else 3

    def evaluate(
        self,
        x: ArrayLike,
        height: float,
        x0: float,
        fwhm: float,
        eta: float = DEFAULT_ETA,
    ) -> FloatArray:
        """Evaluate this profile at ``x``."""
        match self:
            case PeakShape.GAUSSIAN:
                return gaussian(x, height, x0, fwhm)
            case PeakShape.LORENTZIAN:
                return lorentzian(x, height, x0, fwhm)
            case PeakShape.PSEUDO_VOIGT:
                return pseudo_voigt(x, height, x0, fwhm, eta)
            case _:
                assert_never(self)

    def area(self, height: float, fwhm: float, eta: float = DEFAULT_ETA) -> float:
        """Closed-form area of this profile."""
        match self:
            case PeakShape.GAUSSIAN:
                return gaussian_area(height, fwhm)
            case PeakShape.LORENTZIAN:
                return lorentzian_area(height, fwhm)
            case PeakShape.PSEUDO_VOIGT:
                return pseudo_voigt_area(height, fwhm, eta)
            case _:
                assert_never(self)


def evaluate_profile(x: ArrayLike, params: PeakParameters, shape: PeakShape) -> FloatArray:
    """Evaluate one peak described by ``params`` at ``x``."""
    return shape.evaluate(x, params.height, params.x0, params.fwhm, params.eta)


def profile_area(params: PeakParameters, shape: PeakShape) -> float:
    """Closed-form area of one peak described by ``params``."""
    return shape.area(params.height, params.fwhm, params.eta)


__all__ = ["PeakShape", "evaluate_profile", "profile_area"]
