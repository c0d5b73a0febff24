"""
Theme — colours, CSS, Plotly layout

The only place visual style is defined. UI components import from here.
"""
from typing import Any, Dict, List

# ═══════════════════════════════════════════════════════
#  Colours
# ═══════════════════════════════════════════════════════

COLORS: Dict[str, str] = {
    # brand
    "primary":     "#3B82F6",
    "secondary":   "#22D3EE",
    "danger":      "#EF4444",
    "warning":     "#D97706",

    # backgrounds
    "bg_main":     "#0F172A",
    "bg_card":     "#1E293B",
    "bg_sidebar":  "#111827",

    # borders
    "border":      "#334155",

    # text
    "text":        "#E2E8F0",
    "text_muted":  "#94A3B8",

    # income / expense
    "gain":        "#16A34A",
    "loss":        "#EF4444",

    "accent":      "#3B82F6",
}

# Pie slices (expense categories)
CHART_PALETTE: List[str] = [
    "#3B82F6", "#22D3EE", "#D97706", "#16A34A", "#EF4444",
    "#A855F7", "#F472B6", "#64748B",
]


# ═══════════════════════════════════════════════════════
#  Global CSS
# ═══════════════════════════════════════════════════════

GLOBAL_CSS: str = """
<style>
    div[data-testid="stMetric"] {
        background: #1E293B;
        border: 1px solid #334155;
        border-radius: 12px;
        padding: 14px 16px;
    }
    .isa-badge {
        display: inline-block;
        padding: 4px 12px;
        border-radius: 8px;
        font-weight: 700;
        color: #FFFFFF;
        background: linear-gradient(135deg, #3B82F6 0%, #22D3EE 100%);
    }
    .reminder-item {
        display: flex;
        justify-content: space-between;
        align-items: center;
        padding: 10px 12px;
        margin-bottom: 8px;
        border-radius: 8px;
        background: rgba(51, 65, 85, 0.5);
    }
</style>
"""

# ═══════════════════════════════════════════════════════
#  Mobile CSS
# ═══════════════════════════════════════════════════════

MOBILE_CSS: str = """
<style>
    @media (max-width: 640px) {
        div[data-testid="stMetric"] { padding: 8px 10px; }
    }
</style>
"""


# ═══════════════════════════════════════════════════════
#  metric_cards style (streamlit-extras)
# ═══════════════════════════════════════════════════════

METRIC_CARD_STYLE: Dict[str, Any] = {
    "background_color": "#1E293B",
    "border_color": "#334155",
    "border_left_color": "#3B82F6",
    "box_shadow": True,
}


# ═══════════════════════════════════════════════════════
#  Plotly layout defaults
# ═══════════════════════════════════════════════════════

PLOTLY_LAYOUT_DEFAULTS: Dict[str, Any] = dict(
    template="plotly_dark",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    margin=dict(l=40, r=20, t=30, b=40),
    font=dict(size=14, color="#E2E8F0"),
    xaxis=dict(showgrid=False, zeroline=False, linecolor="#334155"),
    yaxis=dict(gridcolor="rgba(148,163,184,0.2)", zeroline=False),
    hoverlabel=dict(bgcolor="#1E293B", bordercolor="#334155"),
    legend=dict(bgcolor="rgba(0,0,0,0)"),
)
