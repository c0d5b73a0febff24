"""
UI components — unified exports

Dependency direction: ui/ → config/ + utils/ + streamlit
Never imports services/ or views/
"""
from .components import UI
from .charts import (
    category_pie,
    color_for_value,
    plotly_layout,
    render_chart,
    trend_bars,
    trend_lines,
)
from .sidebar import current_path, go_to, render_sidebar

__all__ = [
    "UI",
    "category_pie",
    "color_for_value",
    "current_path",
    "go_to",
    "plotly_layout",
    "render_chart",
    "render_sidebar",
    "trend_bars",
    "trend_lines",
]
