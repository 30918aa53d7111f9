"""
Export utilities for discount factors.

Provides CSV and JSON export, and an explicit dictionary encoding of
discount factors for persistence.
"""

import json
from datetime import date
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from discount_core.discounting import ZeroRatePeriodicDiscountFactors
from discount_core.market.currency import Currency
from discount_core.market.curve import InterpolatedNodalCurve
from discount_core.market.daycount import DayCount
from discount_core.market.metadata import CurveInfoType, CurveMetadata


def export_to_csv(
    df: pd.DataFrame,
    path: str | Path,
    float_format: str = "%.10f",
) -> None:
    """
    Export DataFrame to CSV.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to export
    path : str | Path
        Output file path
    float_format : str
        Format string for floats
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, float_format=float_format)


def _convert(obj: Any) -> Any:
    """Convert numpy and date values to JSON-compatible types."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, date):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {k: _convert(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_convert(v) for v in obj]
    return obj


def export_to_json(
    data: dict[str, Any],
    path: str | Path,
    indent: int = 2,
) -> None:
    """
    Export dictionary to JSON.

    Parameters
    ----------
    data : dict
        Data to export
    path : str | Path
        Output file path
    indent : int
        JSON indentation
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(_convert(data), f, indent=indent)


def discount_factors_to_dict(
    discount_factors: ZeroRatePeriodicDiscountFactors,
) -> dict[str, Any]:
    """
    Encode discount factors as a plain dictionary.

    Only nodal curves with a ``DayCount`` day count can be encoded.

    Returns
    -------
    dict[str, Any]
        Currency, valuation date and curve definition, JSON-compatible
    """
    curve = discount_factors.curve
    if not isinstance(curve, InterpolatedNodalCurve):
        raise TypeError(f"Cannot encode curve of type {type(curve).__name__}")
    if not isinstance(discount_factors.day_count, DayCount):
        raise TypeError(
            f"Cannot encode day count of type {type(discount_factors.day_count).__name__}"
        )

    return {
        "currency": discount_factors.currency.code,
        "valuation_date": discount_factors.valuation_date.isoformat(),
        "curve": {
            "name": curve.name,
            "day_count": discount_factors.day_count.value,
            "compounding_per_year": discount_factors.frequency,
            "tenors": curve.x_values.tolist(),
            "rates": curve.y_values.tolist(),
        },
    }


def discount_factors_from_dict(data: dict[str, Any]) -> ZeroRatePeriodicDiscountFactors:
    """
    Decode discount factors produced by ``discount_factors_to_dict``.

    The decoded curve goes through full construction validation.

    Raises
    ------
    KeyError
        If a required entry is missing
    ValueError
        If a value is invalid
    """
    curve_data = data["curve"]
    metadata = CurveMetadata.zero_rates(
        curve_data["name"],
        DayCount.of(curve_data["day_count"]),
        curve_data["compounding_per_year"],
    )
    curve = InterpolatedNodalCurve(
        metadata=metadata,
        x_values=np.array(curve_data["tenors"], dtype=np.float64),
        y_values=np.array(curve_data["rates"], dtype=np.float64),
    )
    valuation_date = data["valuation_date"]
    if isinstance(valuation_date, str):
        valuation_date = date.fromisoformat(valuation_date)

    return ZeroRatePeriodicDiscountFactors.of(
        Currency.of(data["currency"]), valuation_date, curve
    )


def create_summary_report(
    discount_factors: ZeroRatePeriodicDiscountFactors,
    table: pd.DataFrame | None = None,
) -> str:
    """
    Generate a text summary of discount factors.

    Parameters
    ----------
    discount_factors : ZeroRatePeriodicDiscountFactors
        Discount factors to summarise
    table : pd.DataFrame | None
        Optional table from ``create_discount_factor_table``

    Returns
    -------
    str
        Formatted summary
    """
    day_count = discount_factors.day_count
    compounding = discount_factors.curve.metadata.get_info(
        CurveInfoType.COMPOUNDING_PER_YEAR
    )
    lines = [
        "Discount Factors Summary",
        "=" * 40,
        f"Currency:        {discount_factors.currency}",
        f"Valuation date:  {discount_factors.valuation_date.isoformat()}",
        f"Curve:           {discount_factors.curve_name}",
        f"Day count:       {day_count}",
        f"Compounding:     {compounding} per year",
        f"Parameters:      {discount_factors.parameter_count}",
    ]

    if table is not None and not table.empty:
        lines.extend(["", "-" * 40])
        for _, row in table.iterrows():
            lines.append(
                f"{row['Date']!s:<12} t={row['Year Fraction']:>8.4f}  "
                f"DF={row['Discount Factor']:.6f}"
            )

    return "\n".join(lines)
