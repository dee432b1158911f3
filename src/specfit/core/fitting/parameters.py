"""Packing of peak parameters into the flat vector seen by the optimizer.

Each peak contributes ``x0, height, fwhm`` and, for the pseudo-Voigt shape,
``eta``. Unpacking applies the physical bounds: height and FWHM are floored
at ``PARAM_FLOOR`` and eta is clamped to [0, 1].
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from specfit.core.constants import DEFAULT_ETA, ETA_MAX, ETA_MIN, PARAM_FLOOR
from specfit.core.domain.peaks import PeakParameters
from specfit.core.lineshapes import PeakShape

if TYPE_CHECKING:
    from specfit.core.shared.typing import FloatArray


def clamp_eta(eta: float) -> float:
    """Clamp a Lorentzian fraction to [0, 1]."""
    return float(min(ETA_MAX, max(ETA_MIN, eta)))


def pack_parameters(peaks: Sequence[PeakParameters], shape: PeakShape) -> FloatArray:
    """Flatten ``peaks`` into a parameter vector with stride ``shape.n_params``."""
    values: list[float] = []
    for peak in peaks:
        values.extend((peak.x0, peak.height, peak.fwhm))
        if shape is PeakShape.PSEUDO_VOIGT:
            values.append(peak.eta)
    return np.asarray(values, dtype=float)


def unpack_parameters(
    values: FloatArray,
    shape: PeakShape,
    fixed_eta: Sequence[float] | None = None,
) -> list[PeakParameters]:
    """Rebuild bounded peak parameters from a flat vector.

    Args:
        values: Flat vector produced by :func:`pack_parameters`
        shape: Peak shape that fixes the stride
        fixed_eta: Per-peak eta used when ``shape`` has no free eta;
            each value is clamped to [0, 1]. Defaults to 0.5.

    Returns
    -------
        One :class:`PeakParameters` per peak.
    """
    stride = shape.n_params
    n_peaks = len(values) // stride
    peaks: list[PeakParameters] = []
    for i in range(n_peaks):
        base = i * stride
        if shape is PeakShape.PSEUDO_VOIGT:
            eta = clamp_eta(values[base + 3])
        elif fixed_eta is not None:
            eta = clamp_eta(fixed_eta[i])
        else:
            eta = DEFAULT_ETA
        peaks.append(
            PeakParameters(
                x0=float(values[base]),
                height=float(max(values[base + 1], PARAM_FLOOR)),
                fwhm=float(max(values[base + 2], PARAM_FLOOR)),
                eta=eta,
            )
        )
    return peaks


__all__ = ["clamp_eta", "pack_parameters", "unpack_parameters"]
