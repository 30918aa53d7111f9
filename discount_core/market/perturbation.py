"""
Curve perturbations for scenario and what-if analysis.

A perturbation maps a curve to a (possibly different) curve. The discount
factor model applies it and re-validates the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np

from discount_core._types import FloatArray
from discount_core.market.curve import Curve, InterpolatedNodalCurve


class CurvePerturbation(Protocol):
    """Transform from one curve to another."""

    def apply_to(self, curve: Curve) -> Curve:
        """Return the perturbed curve."""
        ...


def _require_nodal(curve: Curve) -> InterpolatedNodalCurve:
    if not isinstance(curve, InterpolatedNodalCurve):
        raise TypeError(
            f"Perturbation requires an InterpolatedNodalCurve, "
            f"got {type(curve).__name__}"
        )
    return curve


@dataclass(frozen=True)
class ParallelShiftPerturbation:
    """
    Add the same shift to every node value.

    Attributes
    ----------
    shift : float
        Shift in rate units (e.g., 0.0001 for 1bp)

    Example
    -------
    >>> bumped = curve.apply_perturbation(ParallelShiftPerturbation(0.0001))
    """

    shift: float

    def apply_to(self, curve: Curve) -> Curve:
        """Return the shifted curve."""
        nodal = _require_nodal(curve)
        return nodal.with_y_values(nodal.y_values + self.shift)

    @classmethod
    def from_bps(cls, shift_bps: float) -> ParallelShiftPerturbation:
        """Create a shift given in basis points."""
        return cls(shift=shift_bps / 10000)


@dataclass(frozen=True, eq=False)
class PointShiftPerturbation:
    """
    Add a separate shift to each node value.

    Attributes
    ----------
    shifts : FloatArray
        One shift per curve node
    """

    shifts: FloatArray

    def __post_init__(self) -> None:
        """Freeze the shift vector."""
        shifts = np.array(self.shifts, dtype=np.float64)
        shifts.setflags(write=False)
        object.__setattr__(self, "shifts", shifts)

    def apply_to(self, curve: Curve) -> Curve:
        """Return the shifted curve."""
        nodal = _require_nodal(curve)
        if len(self.shifts) != nodal.parameter_count:
            raise ValueError(
                f"Expected {nodal.parameter_count} shifts for curve "
                f"'{nodal.name}', got {len(self.shifts)}"
            )
        return nodal.with_y_values(nodal.y_values + self.shifts)
