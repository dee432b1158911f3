"""Shared exceptions and typing helpers."""

from specfit.core.shared.exceptions import (
    ConfigError,
    DataIOError,
    InvalidAnchorError,
    SpecFitError,
)
from specfit.core.shared.typing import FloatArray, IntArray

__all__ = [
    "ConfigError",
    "DataIOError",
    "FloatArray",
    "IntArray",
    "InvalidAnchorError",
    "SpecFitError",
]
