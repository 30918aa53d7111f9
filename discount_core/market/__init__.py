"""
Market data building blocks for discounting.

This module provides:
- Currency identifiers
- Day count conventions
- Curve metadata with typed info keys
- Nodal zero-rate curves with analytic parameter sensitivity
- Curve perturbations (parallel and per-node shifts)
"""

from discount_core.market.currency import CHF, EUR, GBP, JPY, USD, Currency
from discount_core.market.curve import Curve, InterpolatedNodalCurve, flat_curve
from discount_core.market.daycount import DayCount
from discount_core.market.metadata import CurveInfoType, CurveMetadata, ValueType
from discount_core.market.perturbation import (
    CurvePerturbation,
    ParallelShiftPerturbation,
    PointShiftPerturbation,
)

__all__ = [
    "Currency",
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "CHF",
    "DayCount",
    "ValueType",
    "CurveInfoType",
    "CurveMetadata",
    "Curve",
    "InterpolatedNodalCurve",
    "flat_curve",
    "CurvePerturbation",
    "ParallelShiftPerturbation",
    "PointShiftPerturbation",
]
