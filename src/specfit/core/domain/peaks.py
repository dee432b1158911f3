"""Peak value objects shared by detection, fitting and metrics."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from specfit.core.constants import DEFAULT_ETA


@dataclass(frozen=True, slots=True)
class PeakParameters:
    """Parameters of a single peak profile.

    Attributes
    ----------
    x0 : float
        Peak center.
    height : float
        Peak maximum (value at ``x0``).
    fwhm : float
        Full width at half maximum.
    eta : float
        Lorentzian fraction in [0, 1]; only used by the pseudo-Voigt shape.
    """

    x0: float
    height: float
    fwhm: float
    eta: float = DEFAULT_ETA

    def to_dict(self) -> dict[str, float]:
        """Return the parameters as plain floats."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class DetectedPeak:
    """Candidate peak proposed by the detector.

    ``index`` addresses the series passed to the detector.
    """

    index: int
    x: float
    y: float
    estimated_fwhm: float

    def to_parameters(self, eta: float = DEFAULT_ETA) -> PeakParameters:
        """Convert to an initial guess for the fitter."""
        return PeakParameters(x0=self.x, height=self.y, fwhm=self.estimated_fwhm, eta=eta)

    def to_dict(self) -> dict[str, float | int]:
        """Return the peak as plain values."""
        return asdict(self)


__all__ = ["DetectedPeak", "PeakParameters"]
