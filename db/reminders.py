"""Reminders — listed by due date, optionally filtered by status."""
from typing import Any, Dict, List, Optional

from config import REMINDERS_TABLE, ReminderStatus
from db.store import RecordStore


def list_for_user(
    store: RecordStore,
    user_id: Any,
    *,
    status: Optional[ReminderStatus] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Reminders of a user, earliest due date first

    Args:
        status: keep only this status (server-side filter)
        limit:  page size (dashboard uses a small one)
    """
    filters = {"status": ReminderStatus(status).value} if status else None
    return store.find_many(
        REMINDERS_TABLE, "user_id", user_id,
        order_by="due_date", limit=limit, filters=filters,
    )
