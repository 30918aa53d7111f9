"""
Plotting utilities for discount curve visualization.

Provides Plotly chart generators.
"""

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from discount_core._types import FloatArray


def create_discount_curve_plot(
    table: pd.DataFrame,
    title: str = "Discount Curve",
) -> go.Figure:
    """
    Create discount factor and zero rate plot.

    Parameters
    ----------
    table : pd.DataFrame
        Table from ``create_discount_factor_table``
    title : str
        Chart title

    Returns
    -------
    go.Figure
        Discount factors on the left axis, zero rates (%) on the right
    """
    fig = make_subplots(specs=[[{"secondary_y": True}]])

    fig.add_trace(
        go.Scatter(
            x=table["Year Fraction"],
            y=table["Discount Factor"],
            mode="lines+markers",
            name="Discount Factor",
            line={"color": "#1f77b4", "width": 2},
            hovertemplate="<b>DF</b><br>Time: %{x:.2f}Y<br>Value: %{y:.6f}<extra></extra>",
        ),
        secondary_y=False,
    )

    if "Spread Discount Factor" in table:
        fig.add_trace(
            go.Scatter(
                x=table["Year Fraction"],
                y=table["Spread Discount Factor"],
                mode="lines",
                name="Discount Factor (spread)",
                line={"color": "#1f77b4", "width": 1, "dash": "dash"},
            ),
            secondary_y=False,
        )

    fig.add_trace(
        go.Scatter(
            x=table["Year Fraction"],
            y=table["Zero Rate"] * 100,
            mode="lines",
            name="Zero Rate (%)",
            line={"color": "#FF4B4B", "width": 2},
            hovertemplate="<b>Zero</b><br>Time: %{x:.2f}Y<br>Rate: %{y:.3f}%<extra></extra>",
        ),
        secondary_y=True,
    )

    fig.update_layout(
        title=title,
        xaxis_title="Time (Years)",
        hovermode="x unified",
        template="plotly_white",
    )
    fig.update_yaxes(title_text="Discount Factor", secondary_y=False)
    fig.update_yaxes(title_text="Zero Rate (%)", secondary_y=True)

    return fig


def create_parameter_sensitivity_chart(
    tenors: FloatArray,
    sensitivity: FloatArray,
    title: str = "Curve Parameter Sensitivity",
) -> go.Figure:
    """
    Create bar chart of sensitivity per curve node.

    Parameters
    ----------
    tenors : FloatArray
        Node year fractions
    sensitivity : FloatArray
        Sensitivity per node
    title : str
        Chart title

    Returns
    -------
    go.Figure
        Bar chart
    """
    colors = ["#FF4B4B" if v < 0 else "#00CC96" for v in sensitivity]
    fig = go.Figure(
        go.Bar(
            x=[f"{t:g}Y" for t in tenors],
            y=sensitivity,
            marker_color=colors,
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Node",
        yaxis_title="Sensitivity",
        template="plotly_white",
    )
    return fig
