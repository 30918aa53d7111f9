"""
Curve metadata.

Metadata describes what a curve's axes mean and carries typed extra
information, such as the day count used to compute the x-values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from discount_core.market.daycount import DayCount


class ValueType(Enum):
    """Semantic type of a curve axis."""

    YEAR_FRACTION = "year_fraction"
    ZERO_RATE = "zero_rate"
    DISCOUNT_FACTOR = "discount_factor"
    UNKNOWN = "unknown"


class CurveInfoType(Enum):
    """Typed keys for additional curve information."""

    DAY_COUNT = "day_count"
    COMPOUNDING_PER_YEAR = "compounding_per_year"


@dataclass(frozen=True, eq=False)
class CurveMetadata:
    """
    Metadata attached to a curve.

    Attributes
    ----------
    curve_name : str
        Name of the curve
    x_value_type : ValueType
        Meaning of the x-values
    y_value_type : ValueType
        Meaning of the y-values
    info : Mapping[CurveInfoType, Any]
        Additional typed information

    Example
    -------
    >>> meta = CurveMetadata.zero_rates("USD-DSC", DayCount.ACT_365F, 2)
    >>> meta.find_info(CurveInfoType.COMPOUNDING_PER_YEAR)
    2
    """

    curve_name: str
    x_value_type: ValueType = ValueType.UNKNOWN
    y_value_type: ValueType = ValueType.UNKNOWN
    info: Mapping[CurveInfoType, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate inputs and freeze the info mapping."""
        if not self.curve_name:
            raise ValueError("Curve name must not be empty")
        for key in self.info:
            if not isinstance(key, CurveInfoType):
                raise ValueError(f"Curve info key must be a CurveInfoType, got {key!r}")
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveMetadata):
            return NotImplemented
        return (
            self.curve_name == other.curve_name
            and self.x_value_type == other.x_value_type
            and self.y_value_type == other.y_value_type
            and dict(self.info) == dict(other.info)
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.curve_name,
                self.x_value_type,
                self.y_value_type,
                frozenset(self.info.items()),
            )
        )

    def find_info(self, info_type: CurveInfoType) -> Any | None:
        """Return the info value, or None if absent."""
        return self.info.get(info_type)

    def get_info(self, info_type: CurveInfoType) -> Any:
        """
        Return the info value.

        Raises
        ------
        ValueError
            If the metadata does not contain the info type
        """
        if info_type not in self.info:
            raise ValueError(
                f"Curve metadata for '{self.curve_name}' does not contain "
                f"{info_type.name}"
            )
        return self.info[info_type]

    def with_info(self, info_type: CurveInfoType, value: Any) -> CurveMetadata:
        """Return a copy with the info value added or replaced."""
        info = dict(self.info)
        info[info_type] = value
        return CurveMetadata(self.curve_name, self.x_value_type, self.y_value_type, info)

    def without_info(self, info_type: CurveInfoType) -> CurveMetadata:
        """Return a copy with the info value removed."""
        info = {k: v for k, v in self.info.items() if k is not info_type}
        return CurveMetadata(self.curve_name, self.x_value_type, self.y_value_type, info)

    @classmethod
    def zero_rates(
        cls,
        curve_name: str,
        day_count: DayCount,
        compounding_per_year: int,
    ) -> CurveMetadata:
        """Metadata for a year-fraction / zero-rate curve."""
        return cls(
            curve_name=curve_name,
            x_value_type=ValueType.YEAR_FRACTION,
            y_value_type=ValueType.ZERO_RATE,
            info={
                CurveInfoType.DAY_COUNT: day_count,
                CurveInfoType.COMPOUNDING_PER_YEAR: compounding_per_year,
            },
        )
