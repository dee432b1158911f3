"""Baseline estimation and correction for 1-D spectra.

Two families are available, selected by :class:`BaselineConfig.method`:

``linear`` / ``polynomial``
    Least-squares polynomial through basis points (explicit anchors or the
    lowest 20% of intensities).
``asls``
    Asymmetric least squares smoothing for curved backgrounds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from specfit.core.algorithms.asls import asls_baseline
from specfit.core.algorithms.polynomial import polynomial_baseline
from specfit.core.domain.config import BaselineConfig

if TYPE_CHECKING:
    from specfit.core.domain.spectrum import Spectrum
    from specfit.core.shared.typing import FloatArray


def compute_baseline(spectrum: Spectrum, config: BaselineConfig | None = None) -> FloatArray:
    """Compute the background curve under ``spectrum``.

    Args:
        spectrum: Input series (sorted by x)
        config: Baseline options; linear baseline with automatic basis if None

    Returns
    -------
        Baseline values index-aligned with ``spectrum``.

    Raises
    ------
    InvalidAnchorError
        If an anchor index lies outside the series.
    """
    config = config or BaselineConfig()

    if config.method == "asls":
        return asls_baseline(
            spectrum.y, lam=config.lam, p=config.p, iterations=config.iterations
        )

    return polynomial_baseline(
        spectrum.x,
        spectrum.y,
        degree=config.effective_degree,
        anchor_indices=config.anchor_indices,
    )


def correct_baseline(spectrum: Spectrum, config: BaselineConfig | None = None) -> Spectrum:
    """Return a new spectrum with the baseline subtracted (``y - baseline``)."""
    baseline = compute_baseline(spectrum, config)
    return spectrum.with_y(spectrum.y - baseline)


__all__ = ["compute_baseline", "correct_baseline"]
