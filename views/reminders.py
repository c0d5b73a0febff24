"""Reminders — bills and due dates"""
from datetime import date

import streamlit as st

from config import STATUS_LABELS, ReminderStatus
from services.reminders import RemindersController, RemindersData, effective_status
from services.summary import parse_amount
from ui import UI
from utils.format import br_date, brl
from views.session import mounted, render_state

_FILTERS = {"Todos": None, **{label: status for status, label in STATUS_LABELS.items()}}

_STATUS_COLORS = {
    ReminderStatus.PENDING: "#D97706",
    ReminderStatus.DONE:    "#16A34A",
    ReminderStatus.OVERDUE: "#EF4444",
}


def render(matricula: str):
    UI.inject_css()
    ctrl: RemindersController = mounted("reminders", RemindersController, matricula)
    UI.header("Lembretes", "Contas e vencimentos")

    data: RemindersData = render_state(ctrl, retry_key="reminders_retry")
    if data is None:
        return

    label = st.radio("Status", list(_FILTERS), horizontal=True, key="reminder_filter")
    ctrl.set_status_filter(_FILTERS[label])

    today = date.today()
    rows = ctrl.visible(today)
    if not rows:
        UI.empty("Nenhum lembrete encontrado")
        return

    for row in rows:
        status = effective_status(row, today)
        amount, _ = parse_amount(row.get("amount"))
        UI.list_item(
            row.get("title") or "Lembrete",
            subtitle=f"Vence em {br_date(row.get('due_date'))}",
            value=brl(amount) if amount else "",
            tag=STATUS_LABELS.get(status, str(row.get("status") or "")),
            value_color=_STATUS_COLORS.get(status),
        )
