"""
Sidebar — ISA badge, greeting, section links, logout

Receives nav entries already resolved (path + active flag); clicking one
writes the path to the `p` query param and reruns.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence

import streamlit as st

from config import APP_BADGE
from ui.components import UI

ROUTE_PARAM = "p"


def current_path() -> str:
    return st.query_params.get(ROUTE_PARAM, "")


def go_to(path: str) -> None:
    st.query_params[ROUTE_PARAM] = path
    st.rerun()


def render_sidebar(items: Sequence[Any], *, user_name: Optional[str] = None) -> None:
    """
    Args:
        items: NavItem-like objects (section.title, section.icon, path, active, badge)
        user_name: shown under the badge when known
    """
    with st.sidebar:
        UI.badge(APP_BADGE)
        st.caption(f"Olá, {user_name}" if user_name else "Painel financeiro")
        st.markdown("---")

        for item in items:
            label = f"{item.section.icon} {item.section.title}"
            if item.badge:
                label = f"{label} ({item.badge})"
            if st.button(
                label,
                key=f"nav_{item.section.key}",
                type="primary" if item.active else "secondary",
                use_container_width=True,
            ) and not item.active:
                go_to(item.path)

        st.markdown("---")
        if st.button("🚪 Sair", key="nav_logout", use_container_width=True):
            go_to("/")
