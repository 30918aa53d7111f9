#!/usr/bin/env python3
"""
Discount Factor Engine - Demo Script

This script demonstrates the discount factor workflow:
1. Load a zero-rate curve configuration
2. Compute discount factors, with and without a Z-spread
3. Compute point and curve parameter sensitivities
4. Bump the curve and compare
5. Export results

Usage:
    python examples/run_demo.py
"""

import logging
from datetime import date, timedelta
from pathlib import Path

from discount_core import (
    CompoundedRateType,
    ParallelShiftPerturbation,
    build_discount_factors,
    create_discount_factor_table,
    discount_factors_to_dict,
    export_to_csv,
)
from discount_core.config import create_default_discount_factors_config, load_discount_factors
from discount_core.reporting import (
    create_parameter_sensitivity_table,
    create_summary_report,
    export_to_json,
)

NOTIONAL = 10_000_000


def main() -> None:
    """Run the discount factor demo."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Discount Factor Engine - Demo")
    print("=" * 60)
    print()

    # =========================================================================
    # 1. Load Configuration
    # =========================================================================
    print("1. Loading curve configuration...")

    config_path = Path(__file__).parent.parent / "data" / "usd_discounting.yaml"
    if config_path.exists():
        dfs = load_discount_factors(config_path)
    else:
        dfs = build_discount_factors(create_default_discount_factors_config())

    print(f"   Currency: {dfs.currency}")
    print(f"   Valuation date: {dfs.valuation_date}")
    print(f"   Curve: {dfs.curve_name} ({dfs.parameter_count} nodes)")
    print(f"   Day count: {dfs.day_count}, compounding {dfs.frequency}x per year")
    print()

    # =========================================================================
    # 2. Discount Factors
    # =========================================================================
    print("2. Computing discount factors...")

    dates = [dfs.valuation_date + timedelta(days=round(365.25 * y)) for y in range(1, 11)]
    table = create_discount_factor_table(
        dfs,
        dates,
        z_spread=0.0050,  # 50 bps
        compounded_rate_type=CompoundedRateType.PERIODIC,
        periods_per_year=dfs.frequency,
    )

    print(table.to_string(index=False, float_format=lambda v: f"{v:.6f}"))
    print()

    # =========================================================================
    # 3. Sensitivities
    # =========================================================================
    print("3. Computing sensitivities...")

    maturity = date(dfs.valuation_date.year + 7, dfs.valuation_date.month, 15)
    point = dfs.zero_rate_point_sensitivity(maturity).multiplied_by(NOTIONAL)
    param = dfs.curve_parameter_sensitivity(point)

    print(f"   Cash flow: ${NOTIONAL:,.0f} on {maturity}")
    print(f"   dPV/dz: {point.sensitivity:,.2f} {point.currency}")
    print(create_parameter_sensitivity_table(dfs, param).to_string(index=False))
    print(f"   Total: {param.total():,.2f}")
    print()

    # =========================================================================
    # 4. Curve Bump
    # =========================================================================
    print("4. Bumping curve by +1bp...")

    bumped = dfs.apply_perturbation(ParallelShiftPerturbation.from_bps(1.0))
    pv_base = NOTIONAL * dfs.discount_factor(maturity)
    pv_bumped = NOTIONAL * bumped.discount_factor(maturity)

    print(f"   PV base: ${pv_base:,.2f}")
    print(f"   PV bumped: ${pv_bumped:,.2f}")
    print(f"   Finite difference PV01: {pv_bumped - pv_base:,.2f}")
    print(f"   Analytic PV01: {param.total() * 1e-4:,.2f}")
    print()

    # =========================================================================
    # 5. Export Results
    # =========================================================================
    print("5. Exporting results...")

    output_dir = Path(__file__).parent / "outputs"
    output_dir.mkdir(exist_ok=True)

    csv_path = output_dir / "demo_discount_factors.csv"
    json_path = output_dir / "demo_discount_factors.json"
    export_to_csv(table, csv_path)
    export_to_json(
        {"discount_factors": discount_factors_to_dict(dfs), "sensitivity": param.sensitivity},
        json_path,
    )

    print(f"   Saved: {csv_path}")
    print(f"   Saved: {json_path}")
    print()
    print(create_summary_report(dfs, table))

    print()
    print("=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
