#!/usr/bin/env python3
"""
ISA 2.0 · Painel Financeiro

    streamlit run app.py

Routing: the `p` query param holds the painel path
(/painel/<matrícula>[/<section>]); anything else shows the login page.
"""
import logging

import streamlit as st

from config import PAGE_CONFIG, settings
from services.navigation import nav_items, parse_path, section
from services.reminders import RemindersController, pending_count
from ui import current_path, render_sidebar
from views import PAGES, page_login
from views.session import controller

logging.basicConfig(
    level=settings.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    st.set_page_config(**PAGE_CONFIG)

    path = current_path()
    route = parse_path(path)
    if route.matricula is None:
        page_login()
        return

    # unknown slug falls back to the dashboard
    sec = route.section or section("dashboard")
    if route.section is None:
        logger.info("unknown section in %s, showing dashboard", path)

    # page first, so the sidebar sees the freshly loaded user
    PAGES[sec.key](route.matricula)
    render_sidebar(
        nav_items(path, route.matricula, badges=_badges(route.matricula)),
        user_name=_user_name(route.matricula),
    )


def _badges(matricula: str):
    ctrl = controller("reminders", RemindersController)
    data = ctrl.data if ctrl.matricula == matricula else None
    count = pending_count(data.reminders) if data else 0
    return {"lembretes": str(count)} if count else {}


def _user_name(matricula: str):
    registry = st.session_state.get("controllers", {})
    for ctrl in registry.values():
        data = ctrl.data
        if ctrl.matricula == matricula and data is not None:
            return data.user.get("name")
    return None


if __name__ == "__main__":
    main()
