"""
Curve parameter sensitivities.

A parameter sensitivity holds one value per curve parameter. The unit form
is the raw Jacobian of the curve; the currency form is that Jacobian scaled
by a point sensitivity amount.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from discount_core._types import SensitivityArray
from discount_core.market.currency import Currency


def _frozen_vector(values: SensitivityArray) -> SensitivityArray:
    vector = np.array(values, dtype=np.float64)
    if vector.ndim != 1:
        raise ValueError(f"Sensitivity must be one-dimensional, got shape {vector.shape}")
    vector.setflags(write=False)
    return vector


@dataclass(frozen=True, eq=False)
class CurveUnitParameterSensitivity:
    """
    Sensitivity to each curve parameter for a unit zero-rate change.

    Attributes
    ----------
    curve_name : str
        Name of the curve the parameters belong to
    sensitivity : SensitivityArray
        One value per curve parameter
    """

    curve_name: str
    sensitivity: SensitivityArray

    def __post_init__(self) -> None:
        object.__setattr__(self, "sensitivity", _frozen_vector(self.sensitivity))

    @property
    def parameter_count(self) -> int:
        return len(self.sensitivity)

    def multiplied_by(
        self, currency: Currency, factor: float
    ) -> CurveCurrencyParameterSensitivity:
        """Scale every entry by ``factor`` and express it in ``currency``."""
        return CurveCurrencyParameterSensitivity(
            curve_name=self.curve_name,
            currency=currency,
            sensitivity=self.sensitivity * factor,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveUnitParameterSensitivity):
            return NotImplemented
        return self.curve_name == other.curve_name and np.array_equal(
            self.sensitivity, other.sensitivity
        )

    def __hash__(self) -> int:
        return hash((self.curve_name, self.sensitivity.tobytes()))


@dataclass(frozen=True, eq=False)
class CurveCurrencyParameterSensitivity:
    """
    Sensitivity to each curve parameter in a currency.

    Attributes
    ----------
    curve_name : str
        Name of the curve the parameters belong to
    currency : Currency
        Currency of the amounts
    sensitivity : SensitivityArray
        One value per curve parameter

    Example
    -------
    >>> unit = CurveUnitParameterSensitivity("USD-DSC", np.array([0.5, 0.5]))
    >>> unit.multiplied_by(USD, -2.0).sensitivity
    array([-1., -1.])
    """

    curve_name: str
    currency: Currency
    sensitivity: SensitivityArray

    def __post_init__(self) -> None:
        object.__setattr__(self, "sensitivity", _frozen_vector(self.sensitivity))

    @property
    def parameter_count(self) -> int:
        return len(self.sensitivity)

    def multiplied_by(self, factor: float) -> CurveCurrencyParameterSensitivity:
        """Scale every entry by ``factor``."""
        return CurveCurrencyParameterSensitivity(
            self.curve_name, self.currency, self.sensitivity * factor
        )

    def combined_with(
        self, other: CurveCurrencyParameterSensitivity
    ) -> CurveCurrencyParameterSensitivity:
        """
        Add another sensitivity to the same curve in the same currency.

        Raises
        ------
        ValueError
            If curve, currency or parameter count differ
        """
        if self.curve_name != other.curve_name or self.currency != other.currency:
            raise ValueError(
                f"Cannot combine sensitivity to {other.curve_name}/{other.currency} "
                f"with {self.curve_name}/{self.currency}"
            )
        if self.parameter_count != other.parameter_count:
            raise ValueError(
                f"Parameter counts differ: {self.parameter_count} "
                f"and {other.parameter_count}"
            )
        return CurveCurrencyParameterSensitivity(
            self.curve_name, self.currency, self.sensitivity + other.sensitivity
        )

    def total(self) -> float:
        """Sum over all parameters."""
        return float(self.sensitivity.sum())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveCurrencyParameterSensitivity):
            return NotImplemented
        return (
            self.curve_name == other.curve_name
            and self.currency == other.currency
            and np.array_equal(self.sensitivity, other.sensitivity)
        )

    def __hash__(self) -> int:
        return hash((self.curve_name, self.currency, self.sensitivity.tobytes()))
