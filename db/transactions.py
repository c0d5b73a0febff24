"""
Transactions — list + append

Pure data access, no aggregation. Rows are never updated or deleted here.
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional

from config import TRANSACTIONS_TABLE, TransactionType
from db.store import RecordStore


def list_for_user(
    store: RecordStore,
    user_id: Any,
    *,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """All transactions of a user, newest first."""
    return store.find_many(
        TRANSACTIONS_TABLE, "user_id", user_id,
        order_by="created_at", descending=True, limit=limit,
    )


def add(
    store: RecordStore,
    user_id: Any,
    amount: Decimal,
    type_: TransactionType,
    *,
    category: Optional[str] = None,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Append a transaction

    Args:
        user_id:     owning user id (already resolved)
        amount:      non-negative amount
        type_:       income / expense
        category:    free-text label, blank stored as NULL
        description: optional note

    Returns:
        the stored row
    """
    row: Dict[str, Any] = {
        "user_id": user_id,
        "amount": amount,
        "type": TransactionType(type_).value,
        "category": category or None,
        "description": description or None,
    }
    return store.insert(TRANSACTIONS_TABLE, row)
