"""Credit cards — read only (spend totals are posted by the card feed)."""
from typing import Any, Dict, List

from config import CARDS_TABLE
from db.store import RecordStore


def list_for_user(store: RecordStore, user_id: Any) -> List[Dict[str, Any]]:
    """Cards of a user in creation order."""
    return store.find_many(CARDS_TABLE, "user_id", user_id, order_by="created_at")
