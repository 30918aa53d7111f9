"""
Sensitivity value types.

Provides:
- ZeroRateSensitivity: point sensitivity to the zero rate at a date
- CurveUnitParameterSensitivity: curve Jacobian at a point
- CurveCurrencyParameterSensitivity: Jacobian scaled into a currency amount
"""

from discount_core.sensitivity.parameter import (
    CurveCurrencyParameterSensitivity,
    CurveUnitParameterSensitivity,
)
from discount_core.sensitivity.point import ZeroRateSensitivity

__all__ = [
    "ZeroRateSensitivity",
    "CurveUnitParameterSensitivity",
    "CurveCurrencyParameterSensitivity",
]
