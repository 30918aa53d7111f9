"""
Discount factor calculation.

Provides discount factors, spread-adjusted discount factors and closed-form
sensitivities based on a periodically-compounded zero-rate curve.
"""

from discount_core.discounting.zero_rate_periodic import (
    CompoundedRateType,
    ZeroRatePeriodicDiscountFactors,
)

__all__ = [
    "CompoundedRateType",
    "ZeroRatePeriodicDiscountFactors",
]
