"""
Curve implementation for zero-rate discounting.

Provides the curve capability consumed by the discount factor model and a
nodal curve with linear interpolation, flat extrapolation and a closed-form
parameter sensitivity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from discount_core._types import FloatArray, SensitivityArray, YearFraction
from discount_core.market.metadata import CurveMetadata

if TYPE_CHECKING:
    from discount_core.market.perturbation import CurvePerturbation


@runtime_checkable
class Curve(Protocol):
    """
    Capability required of a curve by the discount factor model.

    Any class implementing these members can be used, so interpolation
    and calibration stay outside the discounting code.
    """

    @property
    def name(self) -> str:
        """Curve name."""
        ...

    @property
    def metadata(self) -> CurveMetadata:
        """Curve metadata."""
        ...

    @property
    def parameter_count(self) -> int:
        """Number of curve parameters."""
        ...

    def y_value(self, x: YearFraction) -> float:
        """Return the y-value at x."""
        ...

    def y_value_parameter_sensitivity(self, x: YearFraction) -> SensitivityArray:
        """Return dy/dp for each parameter p at x."""
        ...

    def apply_perturbation(self, perturbation: CurvePerturbation) -> Curve:
        """Return the curve produced by the perturbation."""
        ...


@dataclass(frozen=True, eq=False)
class InterpolatedNodalCurve:
    """
    Curve defined by nodes with linear interpolation.

    Values outside the node range are extrapolated flat. Each node's
    y-value is one curve parameter.

    Attributes
    ----------
    metadata : CurveMetadata
        Curve metadata, including the curve name
    x_values : FloatArray
        Node x-values, strictly increasing
    y_values : FloatArray
        Node y-values, same length as x_values

    Example
    -------
    >>> meta = CurveMetadata.zero_rates("USD-DSC", DayCount.ACT_365F, 1)
    >>> curve = InterpolatedNodalCurve(
    ...     metadata=meta,
    ...     x_values=np.array([1.0, 2.0, 5.0]),
    ...     y_values=np.array([0.02, 0.025, 0.03]),
    ... )
    >>> curve.y_value(1.5)
    0.0225
    """

    metadata: CurveMetadata
    x_values: FloatArray
    y_values: FloatArray

    def __post_init__(self) -> None:
        """Validate curve inputs."""
        x_values = np.array(self.x_values, dtype=np.float64)
        y_values = np.array(self.y_values, dtype=np.float64)
        if x_values.ndim != 1 or y_values.ndim != 1:
            raise ValueError("Node values must be one-dimensional")
        if len(x_values) != len(y_values):
            raise ValueError(
                f"x-values and y-values must have same length, "
                f"got {len(x_values)} and {len(y_values)}"
            )
        if len(x_values) == 0:
            raise ValueError("Curve must have at least one node")
        if not np.all(np.diff(x_values) > 0):
            raise ValueError("x-values must be strictly increasing")

        # Nodes are owned by the curve and never change after construction
        x_values.setflags(write=False)
        y_values.setflags(write=False)
        object.__setattr__(self, "x_values", x_values)
        object.__setattr__(self, "y_values", y_values)

    @property
    def name(self) -> str:
        """Curve name, taken from the metadata."""
        return self.metadata.curve_name

    @property
    def parameter_count(self) -> int:
        """Number of nodes."""
        return len(self.y_values)

    def y_value(self, x: YearFraction) -> float:
        """
        Interpolated y-value at x.

        Parameters
        ----------
        x : float
            Year fraction, may be negative

        Returns
        -------
        float
            Linearly interpolated value, flat beyond the first and last nodes
        """
        return float(np.interp(x, self.x_values, self.y_values))

    def y_value_parameter_sensitivity(self, x: YearFraction) -> SensitivityArray:
        """
        Sensitivity of the y-value at x to each node value.

        Parameters
        ----------
        x : float
            Year fraction

        Returns
        -------
        SensitivityArray
            Interpolation weights, shape (parameter_count,)

        Notes
        -----
        Between nodes i and i+1 with w = (x - x_i) / (x_{i+1} - x_i) the
        weights are (1 - w) at i and w at i+1. Beyond the ends the whole
        weight sits on the boundary node.
        """
        n = self.parameter_count
        sensitivity = np.zeros(n)
        if n == 1 or x <= self.x_values[0]:
            sensitivity[0] = 1.0
            return sensitivity
        if x >= self.x_values[-1]:
            sensitivity[-1] = 1.0
            return sensitivity

        i = int(np.searchsorted(self.x_values, x, side="right")) - 1
        w = (x - self.x_values[i]) / (self.x_values[i + 1] - self.x_values[i])
        sensitivity[i] = 1.0 - w
        sensitivity[i + 1] = w
        return sensitivity

    def with_y_values(self, y_values: FloatArray) -> InterpolatedNodalCurve:
        """Return a copy with new node y-values."""
        return InterpolatedNodalCurve(self.metadata, self.x_values, np.asarray(y_values))

    def with_metadata(self, metadata: CurveMetadata) -> InterpolatedNodalCurve:
        """Return a copy with new metadata."""
        return InterpolatedNodalCurve(metadata, self.x_values, self.y_values)

    def apply_perturbation(self, perturbation: CurvePerturbation) -> Curve:
        """Return the curve produced by the perturbation."""
        return perturbation.apply_to(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterpolatedNodalCurve):
            return NotImplemented
        return (
            self.metadata == other.metadata
            and np.array_equal(self.x_values, other.x_values)
            and np.array_equal(self.y_values, other.y_values)
        )

    def __hash__(self) -> int:
        return hash((self.metadata, self.x_values.tobytes(), self.y_values.tobytes()))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"name={self.name!r}, "
            f"nodes={self.parameter_count})"
        )


def flat_curve(metadata: CurveMetadata, rate: float) -> InterpolatedNodalCurve:
    """
    Build a single-node curve returning the same rate everywhere.

    Example
    -------
    >>> meta = CurveMetadata.zero_rates("EUR-FLAT", DayCount.ACT_360, 2)
    >>> flat_curve(meta, 0.03).y_value(10.0)
    0.03
    """
    return InterpolatedNodalCurve(metadata, np.array([1.0]), np.array([rate]))
