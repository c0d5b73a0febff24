"""
Users — read-only lookups by matrícula

Users are created by the external signup flow; nothing here writes them.
"""
from typing import Any, Dict, Optional

from config import USERS_TABLE
from db.store import RecordStore


def get_by_matricula(store: RecordStore, matricula: str) -> Optional[Dict[str, Any]]:
    """User row for a membership identifier, None when unknown."""
    row = store.find_one(USERS_TABLE, "matricula", matricula)
    return _normalize(row) if row else None


def _normalize(row: Dict[str, Any]) -> Dict[str, Any]:
    """SQLite keeps booleans as 0/1."""
    row = dict(row)
    row["active_plan"] = bool(row.get("active_plan"))
    return row
