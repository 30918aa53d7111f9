"""
Point sensitivity to a zero rate.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from discount_core.market.currency import Currency


@dataclass(frozen=True)
class ZeroRateSensitivity:
    """
    Sensitivity of a value to the zero rate at a single date.

    Attributes
    ----------
    curve_currency : Currency
        Currency of the discount curve
    date : date
        Date the zero rate applies to
    currency : Currency
        Currency the sensitivity is expressed in
    sensitivity : float
        Sensitivity amount

    Example
    -------
    >>> s = ZeroRateSensitivity(USD, date(2026, 1, 2), USD, -0.97)
    >>> s.multiplied_by(1e6).sensitivity
    -970000.0
    """

    curve_currency: Currency
    date: date
    currency: Currency
    sensitivity: float

    def multiplied_by(self, factor: float) -> ZeroRateSensitivity:
        """Return a copy with the amount scaled by ``factor``."""
        return replace(self, sensitivity=self.sensitivity * factor)

    def with_currency(self, currency: Currency) -> ZeroRateSensitivity:
        """Return a copy expressed in another currency, amount unchanged."""
        return replace(self, currency=currency)
