"""
views package — one module per sidebar section

Each page only does: route → controller (session_state) → UI rendering.
No direct store access, no aggregation.
"""
from typing import Callable, Dict

from . import cards, dashboard, goals, login, reminders, reports, settings, support, transactions

# section key (services.navigation.SECTIONS) → page renderer
PAGES: Dict[str, Callable[[str], None]] = {
    "dashboard":     dashboard.render,
    "transacoes":    transactions.render,
    "cartoes":       cards.render,
    "lembretes":     reminders.render,
    "metas":         goals.render,
    "relatorios":    reports.render,
    "configuracoes": settings.render,
    "suporte":       support.render,
}

page_login = login.render

__all__ = ["PAGES", "page_login"]
