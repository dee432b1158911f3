"""Domain models for 1-D spectra."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from specfit.core.shared.typing import ArrayLike, FloatArray


def _frozen_array(values: ArrayLike) -> FloatArray:
    """Return a read-only float64 copy of ``values``."""
    arr = np.array(values, dtype=np.float64, copy=True).reshape(-1)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, slots=True)
class Point:
    """A single sample of a spectrum."""

    x: float
    y: float


@dataclass(frozen=True)
class Spectrum:
    """Ordered 1-D spectrum.

    The x values are expected to be sorted in ascending order. Both arrays are
    private read-only copies, so a Spectrum never aliases the caller's buffers.

    Attributes
    ----------
    x : FloatArray
        Sample positions (ascending).
    y : FloatArray
        Intensities, index-aligned with ``x``.
    x_label, y_label : str
        Axis labels carried through from the input file.
    """

    x: FloatArray
    y: FloatArray
    x_label: str = field(default="x")
    y_label: str = field(default="y")

    def __post_init__(self) -> None:
        x = _frozen_array(self.x)
        y = _frozen_array(self.y)
        if x.shape != y.shape:
            msg = f"x and y must have the same length (got {x.size} and {y.size})"
            raise ValueError(msg)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        x_label: str = "x",
        y_label: str = "y",
    ) -> Spectrum:
        """Build a spectrum from two array-likes."""
        return cls(x=np.asarray(x), y=np.asarray(y), x_label=x_label, y_label=y_label)

    @classmethod
    def from_points(
        cls,
        points: Iterable[Point],
        x_label: str = "x",
        y_label: str = "y",
    ) -> Spectrum:
        """Build a spectrum from a sequence of points."""
        pts = list(points)
        return cls(
            x=np.array([p.x for p in pts], dtype=np.float64),
            y=np.array([p.y for p in pts], dtype=np.float64),
            x_label=x_label,
            y_label=y_label,
        )

    @property
    def points(self) -> list[Point]:
        """Return the spectrum as a list of points."""
        return [Point(float(xi), float(yi)) for xi, yi in zip(self.x, self.y, strict=True)]

    def with_y(self, y: ArrayLike) -> Spectrum:
        """Return a new spectrum sharing x and labels with replaced intensities."""
        return Spectrum(x=self.x, y=np.asarray(y), x_label=self.x_label, y_label=self.y_label)

    def __len__(self) -> int:
        return int(self.x.size)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


__all__ = ["Point", "Spectrum"]
