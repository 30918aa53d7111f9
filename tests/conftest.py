"""
Pytest fixtures for discount factor testing.

Provides reusable test fixtures for dates, curve metadata, curves and
discount factors.
"""

from datetime import date

import numpy as np
import pytest

from discount_core.discounting import ZeroRatePeriodicDiscountFactors
from discount_core.market import (
    USD,
    CurveMetadata,
    DayCount,
    InterpolatedNodalCurve,
    flat_curve,
)


@pytest.fixture
def valuation_date() -> date:
    """Valuation date in a non-leap year."""
    return date(2025, 1, 1)


@pytest.fixture
def one_year_date() -> date:
    """Exactly one ACT/365F year after the valuation date."""
    return date(2026, 1, 1)


@pytest.fixture
def zero_metadata() -> CurveMetadata:
    """Semi-annual ACT/365F zero-rate metadata."""
    return CurveMetadata.zero_rates("USD-DSC", DayCount.ACT_365F, 2)


@pytest.fixture
def flat_zero_curve(zero_metadata: CurveMetadata) -> InterpolatedNodalCurve:
    """Single-node curve at 3%."""
    return flat_curve(zero_metadata, 0.03)


@pytest.fixture
def nodal_curve(zero_metadata: CurveMetadata) -> InterpolatedNodalCurve:
    """Upward sloping four-node zero curve."""
    return InterpolatedNodalCurve(
        metadata=zero_metadata,
        x_values=np.array([0.5, 1.0, 2.0, 5.0]),
        y_values=np.array([0.020, 0.025, 0.030, 0.035]),
    )


@pytest.fixture
def flat_discount_factors(
    valuation_date: date, flat_zero_curve: InterpolatedNodalCurve
) -> ZeroRatePeriodicDiscountFactors:
    """Discount factors on the flat 3% curve."""
    return ZeroRatePeriodicDiscountFactors.of(USD, valuation_date, flat_zero_curve)


@pytest.fixture
def nodal_discount_factors(
    valuation_date: date, nodal_curve: InterpolatedNodalCurve
) -> ZeroRatePeriodicDiscountFactors:
    """Discount factors on the four-node curve."""
    return ZeroRatePeriodicDiscountFactors.of(USD, valuation_date, nodal_curve)
