"""
Dashboard + reports pages

Dashboard reads, in order: user → transactions → cards → reminders.
Reminders are narrowed here to pending ones (any pending label), earliest
due first, DASHBOARD_REMINDER_LIMIT of them.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

import db
from config import DASHBOARD_REMINDER_LIMIT, TREND_MONTHS, ReminderStatus
from services.cards import CardUsage, card_usage, most_used_card
from services.controller import PageController
from services.reminders import normalize_status
from services.summary import TransactionSummary, monthly_trend, summarize


@dataclass(frozen=True)
class DashboardData:
    user: Dict[str, Any]
    summary: TransactionSummary
    trend: pd.DataFrame
    top_card: Optional[CardUsage]
    reminders: List[Dict[str, Any]]


class DashboardController(PageController):
    """Painel principal: cards, upcoming reminders, charts."""

    def __init__(self, store, *, today: Optional[Callable[[], date]] = None):
        super().__init__(store)
        self._today = today or date.today

    def fetch(self, user: Dict[str, Any]) -> DashboardData:
        rows = db.transactions.list_for_user(self.store, user["id"])
        cards = [card_usage(r) for r in db.cards.list_for_user(self.store, user["id"])]
        # legacy labels ("pendente") only match after normalisation
        reminders = [
            r for r in db.reminders.list_for_user(self.store, user["id"])
            if normalize_status(r.get("status")) is ReminderStatus.PENDING
        ][:DASHBOARD_REMINDER_LIMIT]
        return DashboardData(
            user=user,
            summary=summarize(rows),
            trend=monthly_trend(rows, months=TREND_MONTHS, today=self._today()),
            top_card=most_used_card(cards),
            reminders=reminders,
        )


@dataclass(frozen=True)
class ReportsData:
    user: Dict[str, Any]
    summary: TransactionSummary
    trend: pd.DataFrame


class ReportsController(PageController):
    """Relatórios: month-by-month table over a selectable window."""

    def __init__(self, store, *, months: int = 12,
                 today: Optional[Callable[[], date]] = None):
        super().__init__(store)
        self.months = months
        self._today = today or date.today

    def fetch(self, user: Dict[str, Any]) -> ReportsData:
        rows = db.transactions.list_for_user(self.store, user["id"])
        return ReportsData(
            user=user,
            summary=summarize(rows),
            trend=monthly_trend(rows, months=self.months, today=self._today()),
        )
