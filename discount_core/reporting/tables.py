"""
Table generation utilities for discount factor reporting.

Creates pandas DataFrames for display and export.
"""

import logging
from datetime import date, datetime
from typing import Sequence

import pandas as pd

from discount_core.discounting import CompoundedRateType, ZeroRatePeriodicDiscountFactors
from discount_core.market.daycount import to_date
from discount_core.sensitivity import CurveCurrencyParameterSensitivity

logger = logging.getLogger(__name__)


def create_discount_factor_table(
    discount_factors: ZeroRatePeriodicDiscountFactors,
    dates: Sequence[date | datetime],
    z_spread: float = 0.0,
    compounded_rate_type: CompoundedRateType = CompoundedRateType.PERIODIC,
    periods_per_year: int = 1,
) -> pd.DataFrame:
    """
    Create a discount factor table for a set of dates.

    Parameters
    ----------
    discount_factors : ZeroRatePeriodicDiscountFactors
        Discount factors to evaluate
    dates : Sequence[date | datetime]
        Dates to report; datetimes are reported by their date
    z_spread : float
        Spread used for the spread-adjusted column
    compounded_rate_type : CompoundedRateType
        Compounding of the spread
    periods_per_year : int
        Periods per year of the spread under periodic compounding

    Returns
    -------
    pd.DataFrame
        One row per date with year fraction, zero rate, discount factor,
        spread discount factor and zero-rate sensitivity
    """
    rows = []
    for d in map(to_date, dates):
        if d < discount_factors.valuation_date:
            logger.warning(
                "Date %s is before valuation date %s",
                d,
                discount_factors.valuation_date,
            )
        rows.append(
            {
                "Date": d,
                "Year Fraction": discount_factors.relative_year_fraction(d),
                "Zero Rate": discount_factors.zero_rate(d),
                "Discount Factor": discount_factors.discount_factor(d),
                "Spread Discount Factor": discount_factors.discount_factor_with_spread(
                    d, z_spread, compounded_rate_type, periods_per_year
                ),
                "Zero Rate Sensitivity": discount_factors.zero_rate_point_sensitivity(
                    d
                ).sensitivity,
            }
        )

    return pd.DataFrame(
        rows,
        columns=[
            "Date",
            "Year Fraction",
            "Zero Rate",
            "Discount Factor",
            "Spread Discount Factor",
            "Zero Rate Sensitivity",
        ],
    )


def create_parameter_sensitivity_table(
    discount_factors: ZeroRatePeriodicDiscountFactors,
    sensitivity: CurveCurrencyParameterSensitivity,
) -> pd.DataFrame:
    """
    Create a per-node parameter sensitivity table.

    Parameters
    ----------
    discount_factors : ZeroRatePeriodicDiscountFactors
        Discount factors whose curve produced the sensitivity
    sensitivity : CurveCurrencyParameterSensitivity
        Sensitivity to the curve parameters

    Returns
    -------
    pd.DataFrame
        One row per parameter; the tenor column is filled for nodal curves
    """
    if sensitivity.curve_name != discount_factors.curve_name:
        raise ValueError(
            f"Sensitivity is to curve '{sensitivity.curve_name}', "
            f"not '{discount_factors.curve_name}'"
        )

    x_values = getattr(discount_factors.curve, "x_values", None)
    tenors = list(x_values) if x_values is not None else [None] * sensitivity.parameter_count

    return pd.DataFrame(
        {
            "Parameter": range(sensitivity.parameter_count),
            "Tenor": tenors,
            f"Sensitivity ({sensitivity.currency})": sensitivity.sensitivity,
        }
    )
