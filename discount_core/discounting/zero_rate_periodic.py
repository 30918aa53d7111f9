"""
Discount factors from a periodically-compounded zero-rate curve.

The underlying curve maps year fractions to zero-coupon rates compounded
``frequency`` times per year. The discount factor at year fraction t is

    DF(t) = (1 + r(t) / m) ** (-t * m)

where m is the compounding frequency read from the curve metadata.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from numbers import Integral
from typing import Any

from discount_core._types import EFFECTIVE_ZERO, YearFraction
from discount_core.market.currency import Currency
from discount_core.market.curve import Curve
from discount_core.market.daycount import DayCountConvention, to_date
from discount_core.market.metadata import CurveInfoType, ValueType
from discount_core.market.perturbation import CurvePerturbation
from discount_core.sensitivity import (
    CurveCurrencyParameterSensitivity,
    CurveUnitParameterSensitivity,
    ZeroRateSensitivity,
)

logger = logging.getLogger(__name__)


class CompoundedRateType(Enum):
    """How a z-spread is compounded when added to the curve."""

    PERIODIC = "periodic"
    CONTINUOUS = "continuous"


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class ZeroRatePeriodicDiscountFactors:
    """
    Discount factors for one currency based on a periodic zero-rate curve.

    The curve must have year fractions as x-values and zero rates as
    y-values, and its metadata must declare the day count and the number
    of compounding periods per year. Both are read once at construction.

    Attributes
    ----------
    currency : Currency
        Currency the discount factors apply to
    valuation_date : date
        Date from which year fractions are measured
    curve : Curve
        Underlying zero-rate curve, shared and never modified
    frequency : int
        Compounding periods per year (derived)
    day_count : DayCount
        Day count of the curve (derived)

    Example
    -------
    >>> meta = CurveMetadata.zero_rates("USD-DSC", DayCount.ACT_365F, 2)
    >>> dfs = ZeroRatePeriodicDiscountFactors.of(
    ...     USD, date(2025, 1, 1), flat_curve(meta, 0.03)
    ... )
    >>> round(dfs.discount_factor(date(2026, 1, 1)), 6)
    0.970662
    """

    currency: Currency
    valuation_date: date
    curve: Curve
    frequency: int = field(init=False, repr=False, compare=False)
    day_count: DayCountConvention = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the curve and cache frequency and day count."""
        if self.currency is None:
            raise ValueError("currency must not be None")
        if self.valuation_date is None:
            raise ValueError("valuation_date must not be None")
        if self.curve is None:
            raise ValueError("curve must not be None")
        object.__setattr__(self, "currency", Currency.of(self.currency))
        object.__setattr__(self, "valuation_date", to_date(self.valuation_date))

        metadata = self.curve.metadata
        if metadata.y_value_type != ValueType.ZERO_RATE:
            raise ValueError(
                f"Incorrect y-value type for zero-rate discount curve: "
                f"expected {ValueType.ZERO_RATE.name}, got {metadata.y_value_type.name}"
            )
        if metadata.x_value_type != ValueType.YEAR_FRACTION:
            raise ValueError(
                f"Incorrect x-value type for zero-rate discount curve: "
                f"expected {ValueType.YEAR_FRACTION.name}, "
                f"got {metadata.x_value_type.name}"
            )

        day_count = metadata.find_info(CurveInfoType.DAY_COUNT)
        if day_count is None:
            raise ValueError(
                f"Incorrect curve metadata for '{metadata.curve_name}', missing day count"
            )

        frequency = metadata.find_info(CurveInfoType.COMPOUNDING_PER_YEAR)
        if frequency is None:
            raise ValueError(
                f"Compounding per year must be present for periodically "
                f"compounded curve '{metadata.curve_name}'"
            )
        if not _is_positive_int(frequency):
            raise ValueError(
                f"Compounding per year must be a positive integer, got {frequency!r}"
            )

        object.__setattr__(self, "frequency", int(frequency))
        object.__setattr__(self, "day_count", day_count)
        logger.debug(
            "Discount factors %s on %s: curve=%s, frequency=%d, day_count=%s",
            self.currency,
            self.valuation_date,
            metadata.curve_name,
            self.frequency,
            day_count,
        )

    @classmethod
    def of(
        cls,
        currency: Currency | str,
        valuation_date: date,
        curve: Curve,
    ) -> ZeroRatePeriodicDiscountFactors:
        """
        Create discount factors from a zero-rate curve.

        Raises
        ------
        ValueError
            If any input is missing or the curve metadata is unsuitable
        """
        return cls(currency, valuation_date, curve)  # type: ignore[arg-type]

    @property
    def curve_name(self) -> str:
        """Name of the underlying curve."""
        return self.curve.name

    @property
    def parameter_count(self) -> int:
        """Number of parameters of the underlying curve."""
        return self.curve.parameter_count

    def relative_year_fraction(self, date: date) -> YearFraction:
        """Signed year fraction from the valuation date to ``date``."""
        return self.day_count.relative_year_fraction(self.valuation_date, date)

    def zero_rate(self, date: date) -> float:
        """Periodically-compounded zero rate at ``date``."""
        return self.curve.y_value(self.relative_year_fraction(date))

    def discount_factor(self, date: date) -> float:
        """
        Discount factor at a date.

        Parameters
        ----------
        date : date
            Target date, may be before the valuation date

        Returns
        -------
        float
            (1 + r / m) ** (-t * m); greater than 1 for past dates
            when rates are positive

        Raises
        ------
        ValueError
            If the zero rate is at or below -m
        """
        return self._discount_factor(self.relative_year_fraction(date))

    def _discount_factor(self, year_fraction: YearFraction) -> float:
        rate = self.curve.y_value(year_fraction)
        base = 1.0 + rate / self.frequency
        if base <= 0.0:
            raise ValueError(
                f"Zero rate {rate} at year fraction {year_fraction} is at or below "
                f"-{self.frequency}, discount factor is undefined"
            )
        return math.pow(base, -year_fraction * self.frequency)

    def discount_factor_with_spread(
        self,
        date: date,
        z_spread: float,
        compounded_rate_type: CompoundedRateType,
        periods_per_year: int,
    ) -> float:
        """
        Discount factor with a z-spread added to the curve.

        Parameters
        ----------
        date : date
            Target date
        z_spread : float
            Spread as a decimal (e.g., 0.01 for 100bps)
        compounded_rate_type : CompoundedRateType
            PERIODIC adds the spread to the periodic rate implied by the
            discount factor, CONTINUOUS to the continuous rate
        periods_per_year : int
            Compounding periods per year of the spread, used for PERIODIC

        Returns
        -------
        float
            Spread-adjusted discount factor, exactly 1.0 at the valuation date

        Raises
        ------
        ValueError
            If compounding is PERIODIC and periods_per_year is not positive,
            or if the spread pushes the periodic growth factor to zero or below
        """
        year_fraction = self.relative_year_fraction(date)
        if abs(year_fraction) < EFFECTIVE_ZERO:
            return 1.0
        if not isinstance(compounded_rate_type, CompoundedRateType):
            raise TypeError(
                f"compounded_rate_type must be a CompoundedRateType, "
                f"got {compounded_rate_type!r}"
            )

        df = self._discount_factor(year_fraction)
        if compounded_rate_type is CompoundedRateType.PERIODIC:
            if not _is_positive_int(periods_per_year):
                raise ValueError(
                    f"periods_per_year must be a positive integer, got {periods_per_year!r}"
                )
            rate_periodic_plus_one = (
                math.pow(df, -1.0 / periods_per_year / year_fraction)
                + z_spread / periods_per_year
            )
            if rate_periodic_plus_one <= 0.0:
                raise ValueError(
                    f"Z-spread {z_spread} gives a non-positive periodic growth factor "
                    f"{rate_periodic_plus_one} at year fraction {year_fraction}"
                )
            return math.pow(rate_periodic_plus_one, -periods_per_year * year_fraction)

        return df * math.exp(-z_spread * year_fraction)

    def zero_rate_point_sensitivity(
        self,
        date: date,
        sensitivity_currency: Currency | None = None,
    ) -> ZeroRateSensitivity:
        """
        Sensitivity of the discount factor to the zero rate at a date.

        The amount is -DF(t) * t. This is the convention consumed by
        curve_parameter_sensitivity, not the exact derivative of the
        periodic formula.

        Parameters
        ----------
        date : date
            Target date
        sensitivity_currency : Currency | None
            Currency of the sensitivity, defaults to the curve currency

        Returns
        -------
        ZeroRateSensitivity
            Point sensitivity at ``date``
        """
        year_fraction = self.relative_year_fraction(date)
        df = self._discount_factor(year_fraction)
        return ZeroRateSensitivity(
            curve_currency=self.currency,
            date=date,
            currency=self._sensitivity_currency(sensitivity_currency),
            sensitivity=-df * year_fraction,
        )

    def zero_rate_point_sensitivity_with_spread(
        self,
        date: date,
        sensitivity_currency: Currency | None,
        z_spread: float,
        compounded_rate_type: CompoundedRateType,
        periods_per_year: int,
    ) -> ZeroRateSensitivity:
        """
        Point sensitivity using the spread-adjusted discount factor.

        Same -DF(t) * t convention as zero_rate_point_sensitivity.
        """
        year_fraction = self.relative_year_fraction(date)
        df = self.discount_factor_with_spread(
            date, z_spread, compounded_rate_type, periods_per_year
        )
        return ZeroRateSensitivity(
            curve_currency=self.currency,
            date=date,
            currency=self._sensitivity_currency(sensitivity_currency),
            sensitivity=-df * year_fraction,
        )

    def _sensitivity_currency(self, currency: Currency | str | None) -> Currency:
        return self.currency if currency is None else Currency.of(currency)

    def unit_parameter_sensitivity(self, date: date) -> CurveUnitParameterSensitivity:
        """
        Sensitivity of the zero rate at a date to each curve parameter.

        Returns
        -------
        CurveUnitParameterSensitivity
            The curve's Jacobian at the year fraction of ``date``
        """
        year_fraction = self.relative_year_fraction(date)
        return CurveUnitParameterSensitivity(
            curve_name=self.curve.name,
            sensitivity=self.curve.y_value_parameter_sensitivity(year_fraction),
        )

    def curve_parameter_sensitivity(
        self, point_sensitivity: ZeroRateSensitivity
    ) -> CurveCurrencyParameterSensitivity:
        """
        Convert a point sensitivity into curve parameter sensitivity.

        Applies the chain rule: the unit parameter sensitivity at the point's
        date scaled by the point's amount, in the point's currency.
        """
        unit = self.unit_parameter_sensitivity(point_sensitivity.date)
        return unit.multiplied_by(point_sensitivity.currency, point_sensitivity.sensitivity)

    def with_curve(self, curve: Curve) -> ZeroRatePeriodicDiscountFactors:
        """
        Return a new instance based on a different curve.

        The new curve is validated exactly as at construction.
        """
        logger.debug("Replacing curve %s with %s", self.curve_name, getattr(curve, "name", None))
        return ZeroRatePeriodicDiscountFactors(self.currency, self.valuation_date, curve)

    def apply_perturbation(
        self, perturbation: CurvePerturbation
    ) -> ZeroRatePeriodicDiscountFactors:
        """Return a new instance based on the perturbed curve."""
        logger.debug("Applying %s to curve %s", perturbation, self.curve_name)
        return self.with_curve(self.curve.apply_perturbation(perturbation))
