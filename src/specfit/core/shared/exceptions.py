"""Exception taxonomy for SpecFit.

Numerical degeneracy is not an error in SpecFit: singular pivots, short
series and non-converged fits all return a usable result. The exceptions
below are reserved for malformed input and configuration.
"""

from __future__ import annotations


class SpecFitError(Exception):
    """Base class for all SpecFit-specific exceptions."""


class ConfigError(SpecFitError):
    """Configuration-related errors (invalid/missing options, unknown names)."""


class InvalidAnchorError(ConfigError):
    """A baseline anchor index does not address a point of the input series."""

    def __init__(self, index: int, n_points: int) -> None:
        self.index = index
        self.n_points = n_points
        super().__init__(
            f"invalid anchor index {index}: expected 0 <= index < {n_points}"
        )


class DataIOError(SpecFitError):
    """Data loading/saving errors (empty input, no valid rows, bad files)."""


__all__ = [
    "ConfigError",
    "DataIOError",
    "InvalidAnchorError",
    "SpecFitError",
]
