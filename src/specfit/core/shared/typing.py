"""Shared typing aliases used across SpecFit."""

from typing import TypeAlias

import numpy as np
import numpy.typing as npt

FloatArray: TypeAlias = npt.NDArray[np.float64]
IntArray: TypeAlias = npt.NDArray[np.int_]
ArrayLike: TypeAlias = npt.ArrayLike
