"""
UI atomic components — rendering only, no business logic

Every method only renders HTML/Streamlit; numbers arrive already computed.
Dependency direction: ui/ → config/ (theme) + utils/ + streamlit

- user text goes through html.escape()
- never imports services/ or views/
"""
from __future__ import annotations

import html as _html
import re
from contextlib import contextmanager
from typing import Any, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st
from streamlit_extras.metric_cards import style_metric_cards
from streamlit_extras.stylable_container import stylable_container

from config.theme import COLORS, GLOBAL_CSS, METRIC_CARD_STYLE, MOBILE_CSS


def _esc(text: Any) -> str:
    return _html.escape(str(text)) if text is not None else ""


def _strip_html(text: Any) -> str:
    return re.sub(r"<[^>]+>", "", str(text)) if text is not None else ""


_CARD_CSS = (
    "{"
    "border: 1px solid #334155;"
    "border-radius: 12px;"
    "background: #1E293B;"
    "padding: 8px 12px;"
    "}"
)


class UI:
    """
    Atomic UI components

    Example::
        from ui import UI
        UI.inject_css()
        UI.header("Dashboard Financeiro")
        UI.metric_row([("Saldo Atual", "R$ 1.234,56"), ("Receitas", "R$ 4.300,00")])
    """

    # ── global style ──

    @staticmethod
    def inject_css():
        """Global CSS + mobile rules (once per page)."""
        st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
        st.markdown(MOBILE_CSS, unsafe_allow_html=True)

    @staticmethod
    def badge(text: str):
        st.markdown(f'<span class="isa-badge">{_esc(text)}</span>', unsafe_allow_html=True)

    # ── cards ──

    @staticmethod
    def card(label: str, value: str, *, delta: Optional[str] = None,
             subtext: str = "", delta_color: str = "normal"):
        """Metric card; `value` arrives formatted."""
        st.metric(label=label, value=value, delta=delta, delta_color=delta_color)
        if subtext:
            st.caption(subtext)
        style_metric_cards(**METRIC_CARD_STYLE)

    @staticmethod
    def metric_row(items: Sequence[Tuple[str, ...]]):
        """Horizontal metrics: [(label, value), ...] or [(label, value, delta), ...]"""
        cols = st.columns(len(items))
        for col, item in zip(cols, items):
            delta = item[2] if len(item) > 2 else None
            col.metric(label=item[0], value=item[1], delta=delta)
        style_metric_cards(**METRIC_CARD_STYLE)

    # ── headings ──

    @staticmethod
    def header(title: str, subtitle: str = ""):
        st.title(title)
        if subtitle:
            st.caption(subtitle)

    @staticmethod
    def sub_heading(title: str):
        st.markdown(f"### {title}")

    # ── containers ──

    @staticmethod
    @contextmanager
    def expander(title: str, *, expanded: bool = False, key: Optional[str] = None):
        clean_title = _strip_html(title)
        safe_key = key or f"expander_{abs(hash(clean_title))}"
        with stylable_container(key=safe_key, css_styles=_CARD_CSS):
            with st.expander(clean_title, expanded=expanded):
                yield

    @staticmethod
    @contextmanager
    def panel(key: str):
        """Bordered card container."""
        with stylable_container(key=key, css_styles=_CARD_CSS):
            yield

    # ── list rows ──

    @staticmethod
    def list_item(title: str, subtitle: str = "", value: str = "",
                  tag: str = "", value_color: Optional[str] = None):
        """Row with title/subtitle on the left and value/tag on the right."""
        color = value_color or COLORS["text"]
        tag_html = (
            f'<div style="font-size:12px;color:{COLORS["text_muted"]}">{_esc(tag)}</div>'
            if tag else ""
        )
        st.markdown(
            f'<div class="reminder-item">'
            f'<div><div style="font-weight:600">{_esc(title)}</div>'
            f'<div style="font-size:13px;color:{COLORS["text_muted"]}">{_esc(subtitle)}</div></div>'
            f'<div style="text-align:right"><div style="font-weight:700;color:{color}">'
            f'{_esc(value)}</div>{tag_html}</div></div>',
            unsafe_allow_html=True,
        )

    # ── table ──

    @staticmethod
    def table(df: pd.DataFrame, title: str = "", max_height: int = 400):
        if title:
            st.markdown(f"**{_esc(title)}**")
        st.dataframe(
            df, use_container_width=True, hide_index=True,
            height=min(len(df) * 35 + 38, max_height),
        )

    # ── progress ──

    @staticmethod
    def progress_bar(value: float, max_val: float = 100.0, label: str = ""):
        """Limit usage bar; turns red above 80%."""
        pct = min(value / max_val * 100, 100) if max_val > 0 else 0
        bar_color = COLORS["gain"] if pct < 80 else COLORS["loss"]
        st.markdown(
            f'<div style="margin:6px 0">'
            f'<div style="display:flex;justify-content:space-between;font-size:13px;'
            f'color:{COLORS["text_muted"]};margin-bottom:4px">'
            f'<span>{_esc(label)}</span><span>{pct:.1f}%</span></div>'
            f'<div style="background:#334155;height:8px;border-radius:4px;overflow:hidden">'
            f'<div style="width:{pct:.1f}%;height:100%;background:{bar_color}"></div>'
            f'</div></div>',
            unsafe_allow_html=True,
        )

    # ── states ──

    @staticmethod
    def empty(message: str = "Nenhum dado disponível"):
        st.info(message)

    @staticmethod
    def loading_skeleton(blocks: int = 4):
        cols = st.columns(blocks)
        for col in cols:
            col.markdown(
                '<div style="height:96px;border-radius:12px;background:#1E293B"></div>',
                unsafe_allow_html=True,
            )
