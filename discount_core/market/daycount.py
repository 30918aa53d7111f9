"""
Day count conventions.

A day count converts a pair of dates into a year fraction. Curves are
parameterised in year fractions, so the discount factor calculation needs
the convention the curve was built with. Conventions with a QuantLib
equivalent delegate to QuantLib.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from enum import Enum
from typing import Callable, Protocol

import QuantLib as ql

logger = logging.getLogger(__name__)

YearFractionFunc = Callable[[date, date], float]


class DayCountConvention(Protocol):
    """Anything that converts a date pair into a signed year fraction."""

    def relative_year_fraction(self, start: date, end: date) -> float:
        ...


def to_date(dt: date | datetime) -> date:
    """Convert datetime to date if needed."""
    return dt.date() if isinstance(dt, datetime) else dt


def _to_ql_date(dt: date | datetime) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    py_date = to_date(dt)
    return ql.Date(py_date.day, py_date.month, py_date.year)


def _quantlib(ql_daycount: ql.DayCounter) -> YearFractionFunc:
    def year_fraction(start: date, end: date) -> float:
        return ql_daycount.yearFraction(_to_ql_date(start), _to_ql_date(end))

    return year_fraction


def _act_365_25(start: date, end: date) -> float:
    # no QuantLib equivalent
    return (end - start).days / 365.25


class DayCount(Enum):
    """
    Supported day count conventions.

    The member value is the market name of the convention.

    Example
    -------
    >>> DayCount.ACT_365F.year_fraction(date(2024, 1, 1), date(2025, 1, 1))
    1.0027397260273974
    >>> DayCount.of("act/360")
    <DayCount.ACT_360: 'ACT/360'>
    """

    ACT_360 = "ACT/360"
    ACT_365F = "ACT/365F"
    ACT_365_25 = "ACT/365.25"
    THIRTY_360 = "30/360"
    ACT_ACT_ISDA = "ACT/ACT ISDA"

    @classmethod
    def of(cls, name: "str | DayCount") -> "DayCount":
        """
        Look up a convention by market name or member name.

        Raises
        ------
        ValueError
            If the name is not a supported convention
        """
        if isinstance(name, DayCount):
            return name
        key = str(name).strip().upper()
        for member in cls:
            if key in (member.value, member.name):
                return member
        raise ValueError(f"Unsupported day count convention: {name}")

    def year_fraction(self, start: date | datetime, end: date | datetime) -> float:
        """
        Year fraction from start to end.

        Parameters
        ----------
        start : date
            First date
        end : date
            Second date, must not be before ``start``

        Returns
        -------
        float
            Non-negative year fraction
        """
        start, end = to_date(start), to_date(end)
        if end < start:
            raise ValueError(f"End date {end} is before start date {start}")
        return _YEAR_FRACTION[self](start, end)

    def relative_year_fraction(
        self, start: date | datetime, end: date | datetime
    ) -> float:
        """
        Signed year fraction from start to end.

        Negative when ``end`` is before ``start``.
        """
        start, end = to_date(start), to_date(end)
        if end < start:
            logger.debug("Negative year fraction for %s: %s -> %s", self.value, start, end)
            return -_YEAR_FRACTION[self](end, start)
        return _YEAR_FRACTION[self](start, end)

    def __str__(self) -> str:
        return self.value


_YEAR_FRACTION: dict[DayCount, YearFractionFunc] = {
    DayCount.ACT_360: _quantlib(ql.Actual360()),
    DayCount.ACT_365F: _quantlib(ql.Actual365Fixed()),
    DayCount.ACT_365_25: _act_365_25,
    DayCount.THIRTY_360: _quantlib(ql.Thirty360(ql.Thirty360.BondBasis)),
    DayCount.ACT_ACT_ISDA: _quantlib(ql.ActualActual(ql.ActualActual.ISDA)),
}
