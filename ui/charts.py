"""
Plotly helpers — shared layout + rendering

Every chart takes its layout from plotly_layout() so the dashboard and the
reports page look alike.

Dependency direction: ui/ → config/ (theme) + plotly + streamlit
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from config.theme import CHART_PALETTE, COLORS, PLOTLY_LAYOUT_DEFAULTS


def plotly_layout(**overrides: Any) -> Dict[str, Any]:
    """
    Shared Plotly layout

    Usage::
        fig.update_layout(**plotly_layout(height=350, hovermode="x unified"))
    """
    layout = dict(PLOTLY_LAYOUT_DEFAULTS)
    layout.update(overrides)
    return layout


def render_chart(fig: go.Figure, **kwargs: Any) -> None:
    """st.plotly_chart with full width and no mode bar."""
    st.plotly_chart(
        fig,
        use_container_width=True,
        config={"displayModeBar": False},
        **kwargs,
    )


def color_for_value(value: float) -> str:
    return COLORS["gain"] if value >= 0 else COLORS["loss"]


def category_pie(frame: pd.DataFrame, *, height: int = 360) -> Optional[go.Figure]:
    """Donut of expense by category; None when there is nothing to plot."""
    if frame.empty:
        return None
    fig = go.Figure(go.Pie(
        labels=frame["category"],
        values=frame["amount"],
        hole=0.55,
        marker=dict(colors=CHART_PALETTE, line=dict(color=COLORS["bg_main"], width=2)),
        textinfo="percent",
        hovertemplate="%{label}<br>R$ %{value:,.2f}<br>%{percent}<extra></extra>",
        sort=False,
    ))
    fig.update_layout(**plotly_layout(
        height=height, margin=dict(l=5, r=5, t=10, b=10),
        legend=dict(orientation="h", y=-0.1, bgcolor="rgba(0,0,0,0)"),
    ))
    return fig


def trend_bars(trend: pd.DataFrame, *, height: int = 360) -> Optional[go.Figure]:
    """Grouped income/expense bars per month with the net as a line."""
    if trend.empty:
        return None
    fig = go.Figure()
    fig.add_bar(x=trend["month"], y=trend["income"], name="Receitas",
                marker_color=COLORS["gain"],
                hovertemplate="%{x}<br>R$ %{y:,.2f}<extra></extra>")
    fig.add_bar(x=trend["month"], y=trend["expense"], name="Gastos",
                marker_color=COLORS["loss"],
                hovertemplate="%{x}<br>R$ %{y:,.2f}<extra></extra>")
    fig.add_scatter(x=trend["month"], y=trend["net"], name="Saldo",
                    mode="lines+markers",
                    line=dict(color=COLORS["primary"], width=3, shape="spline"),
                    hovertemplate="%{x}<br><b>R$ %{y:,.2f}</b><extra></extra>")
    fig.update_layout(**plotly_layout(
        height=height, barmode="group", hovermode="x unified",
        legend=dict(orientation="h", y=1.1, bgcolor="rgba(0,0,0,0)"),
    ))
    return fig


def trend_lines(trend: pd.DataFrame, *, height: int = 360) -> Optional[go.Figure]:
    """Income vs expense lines over the trend window."""
    if trend.empty:
        return None
    fig = go.Figure()
    for column, name, color in (("income", "Receitas", COLORS["gain"]),
                                ("expense", "Gastos", COLORS["loss"])):
        fig.add_scatter(
            x=trend["month"], y=trend[column], name=name, mode="lines+markers",
            line=dict(color=color, width=3, shape="spline"),
            marker=dict(size=8, color=color),
            hovertemplate="%{x}<br>R$ %{y:,.2f}<extra></extra>",
        )
    fig.update_layout(**plotly_layout(
        height=height, hovermode="x unified",
        legend=dict(orientation="h", y=1.1, bgcolor="rgba(0,0,0,0)"),
    ))
    return fig
