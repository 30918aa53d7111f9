"""
Reporting module for discount factor visualization and export.

Provides:
- Plotly charts for discount curves and node sensitivities
- DataFrame formatters
- CSV/JSON export and dictionary encoding
"""

from discount_core.reporting.export import (
    create_summary_report,
    discount_factors_from_dict,
    discount_factors_to_dict,
    export_to_csv,
    export_to_json,
)
from discount_core.reporting.plots import (
    create_discount_curve_plot,
    create_parameter_sensitivity_chart,
)
from discount_core.reporting.tables import (
    create_discount_factor_table,
    create_parameter_sensitivity_table,
)

__all__ = [
    # Plots
    "create_discount_curve_plot",
    "create_parameter_sensitivity_chart",
    # Tables
    "create_discount_factor_table",
    "create_parameter_sensitivity_table",
    # Export
    "export_to_csv",
    "export_to_json",
    "discount_factors_to_dict",
    "discount_factors_from_dict",
    "create_summary_report",
]
