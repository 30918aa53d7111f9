"""
Pydantic configuration models for discount factor construction.

These models provide validation and type-safe configuration for:
- Zero-rate curve definitions (nodes, day count, compounding)
- Discount factor setup (currency, valuation date, curve)
"""

import warnings
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from discount_core.market.daycount import DayCount

_USUAL_FREQUENCIES = (1, 2, 4, 12)


class CurveConfig(BaseModel):
    """
    Zero-rate curve configuration.

    Attributes
    ----------
    name : str
        Curve name (e.g., "USD-DSC")
    day_count : DayCount
        Day count used to turn dates into year fractions
    compounding_per_year : int
        Compounding periods per year of the zero rates
    tenors : list[float]
        Node year fractions, strictly increasing
    rates : list[float]
        Zero rates at each tenor (decimal)

    Example
    -------
    >>> config = CurveConfig(
    ...     name="USD-DSC",
    ...     day_count="ACT/365F",
    ...     compounding_per_year=2,
    ...     tenors=[1.0, 2.0, 5.0],
    ...     rates=[0.03, 0.032, 0.035],
    ... )
    """

    name: str = Field(min_length=1, description="Curve name")
    day_count: DayCount = Field(default=DayCount.ACT_365F, description="Day count")
    compounding_per_year: int = Field(gt=0, le=365, description="Compounding per year")
    tenors: list[float] = Field(min_length=1, description="Node year fractions")
    rates: list[float] = Field(min_length=1, description="Zero rates at nodes")

    @field_validator("day_count", mode="before")
    @classmethod
    def parse_day_count(cls, v: Any) -> DayCount:
        """Accept market names in any letter case."""
        return DayCount.of(v)

    @field_validator("compounding_per_year")
    @classmethod
    def compounding_usual(cls, v: int) -> int:
        """Warn about unusual compounding frequencies."""
        if v not in _USUAL_FREQUENCIES:
            warnings.warn(
                f"Compounding per year {v} is unusual; "
                f"typical values are {', '.join(map(str, _USUAL_FREQUENCIES))}",
                UserWarning,
                stacklevel=2,
            )
        return v

    @model_validator(mode="after")
    def validate_nodes(self) -> "CurveConfig":
        """Ensure tenors and rates line up and tenors increase."""
        if len(self.tenors) != len(self.rates):
            raise ValueError(
                f"Tenors and rates must have same length, "
                f"got {len(self.tenors)} and {len(self.rates)}"
            )
        if any(t2 <= t1 for t1, t2 in zip(self.tenors, self.tenors[1:])):
            raise ValueError("Tenors must be strictly increasing")
        return self


class DiscountFactorsConfig(BaseModel):
    """
    Complete discount factor configuration.

    Attributes
    ----------
    currency : str
        Three-letter currency code
    valuation_date : date
        Valuation date
    curve : CurveConfig
        Zero-rate curve
    """

    currency: str = Field(pattern=r"^[A-Za-z]{3}$", description="Currency code")
    valuation_date: date
    curve: CurveConfig

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        """Normalise the currency code to upper case."""
        return v.upper()
