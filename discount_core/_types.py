"""
Common type aliases used throughout the discount factor library.

This module defines type aliases for numpy arrays and other common types
to improve code readability and enable better static type checking.
"""

from typing import TypeAlias

import numpy as np
import numpy.typing as npt

# Array type aliases
FloatArray: TypeAlias = npt.NDArray[np.float64]
"""1D array of 64-bit floats."""

SensitivityArray: TypeAlias = npt.NDArray[np.float64]
"""
1D array with one entry per curve parameter.

Ordering matches the parameter ordering of the curve that produced it.
"""

# Scalar type aliases
Rate: TypeAlias = float
"""Interest rate or spread as a decimal (e.g., 0.02 for 2%)."""

YearFraction: TypeAlias = float
"""Signed time measured in years under a day-count convention."""

EFFECTIVE_ZERO: float = 1e-10
"""Year fraction below which elapsed time is treated as zero."""
