"""
Discount Factor Engine - Core Package.

Discount factors and closed-form rate sensitivities for a single currency,
based on a periodically-compounded zero-rate curve.

Example
-------
>>> from datetime import date
>>> from discount_core import (
...     USD, CurveMetadata, DayCount, ZeroRatePeriodicDiscountFactors, flat_curve
... )
>>> meta = CurveMetadata.zero_rates("USD-DSC", DayCount.ACT_365F, 2)
>>> dfs = ZeroRatePeriodicDiscountFactors.of(USD, date(2025, 1, 1), flat_curve(meta, 0.03))
>>> dfs.discount_factor(date(2026, 1, 1))
"""

__version__ = "1.0.0"

# Core types
from discount_core._types import EFFECTIVE_ZERO, FloatArray, SensitivityArray

# Market
from discount_core.market import (
    CHF,
    EUR,
    GBP,
    JPY,
    USD,
    Currency,
    Curve,
    CurveInfoType,
    CurveMetadata,
    CurvePerturbation,
    DayCount,
    InterpolatedNodalCurve,
    ParallelShiftPerturbation,
    PointShiftPerturbation,
    ValueType,
    flat_curve,
)

# Sensitivities
from discount_core.sensitivity import (
    CurveCurrencyParameterSensitivity,
    CurveUnitParameterSensitivity,
    ZeroRateSensitivity,
)

# Discounting
from discount_core.discounting import CompoundedRateType, ZeroRatePeriodicDiscountFactors

# Configuration
from discount_core.config import (
    CurveConfig,
    DiscountFactorsConfig,
    build_discount_factors,
    load_discount_factors,
)

# Reporting
from discount_core.reporting import (
    create_discount_curve_plot,
    create_discount_factor_table,
    discount_factors_from_dict,
    discount_factors_to_dict,
    export_to_csv,
)

__all__ = [
    # Version
    "__version__",
    # Types
    "FloatArray",
    "SensitivityArray",
    "EFFECTIVE_ZERO",
    # Market
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
    # Sensitivities
    "ZeroRateSensitivity",
    "CurveUnitParameterSensitivity",
    "CurveCurrencyParameterSensitivity",
    # Discounting
    "CompoundedRateType",
    "ZeroRatePeriodicDiscountFactors",
    # Config
    "CurveConfig",
    "DiscountFactorsConfig",
    "build_discount_factors",
    "load_discount_factors",
    # Reporting
    "create_discount_factor_table",
    "create_discount_curve_plot",
    "export_to_csv",
    "discount_factors_to_dict",
    "discount_factors_from_dict",
]
