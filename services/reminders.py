"""Reminders — status vocabulary + overdue detection"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

import db
from config import ReminderStatus, parse_reminder_status
from services.controller import PageController
from services.summary import parse_timestamp


def normalize_status(value: Any) -> Optional[ReminderStatus]:
    return parse_reminder_status(value)


def due_date(row: Mapping[str, Any]) -> Optional[date]:
    ts = parse_timestamp(row.get("due_date"))
    return ts.date() if ts else None


def effective_status(row: Mapping[str, Any], today: Optional[date] = None) -> Optional[ReminderStatus]:
    """
    Status to display

    A pending reminder whose due date is already past shows as overdue.
    Unknown statuses stay None (the view prints the raw value).
    """
    status = normalize_status(row.get("status"))
    if status is ReminderStatus.PENDING:
        due = due_date(row)
        if due is not None and due < (today or date.today()):
            return ReminderStatus.OVERDUE
    return status


def filter_by_status(
    rows: Iterable[Mapping[str, Any]],
    status: Optional[ReminderStatus],
    today: Optional[date] = None,
) -> List[Mapping[str, Any]]:
    if status is None:
        return list(rows)
    return [r for r in rows if effective_status(r, today) is status]


def pending_count(rows: Iterable[Mapping[str, Any]], today: Optional[date] = None) -> int:
    """Reminders still open (pending or overdue), for the sidebar badge."""
    open_states = (ReminderStatus.PENDING, ReminderStatus.OVERDUE)
    return sum(1 for r in rows if effective_status(r, today) in open_states)


@dataclass(frozen=True)
class RemindersData:
    user: Dict[str, Any]
    reminders: List[Dict[str, Any]]


class RemindersController(PageController):
    """Lembretes page; the status filter is applied client-side."""

    def __init__(self, store):
        super().__init__(store)
        self.status_filter: Optional[ReminderStatus] = None

    def fetch(self, user: Dict[str, Any]) -> RemindersData:
        return RemindersData(
            user=user,
            reminders=db.reminders.list_for_user(self.store, user["id"]),
        )

    def set_status_filter(self, status: Optional[ReminderStatus]) -> None:
        self.status_filter = status

    def visible(self, today: Optional[date] = None) -> List[Mapping[str, Any]]:
        data = self.data
        if data is None:
            return []
        return filter_by_status(data.reminders, self.status_filter, today)
