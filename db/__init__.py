"""
Data access layer — unified exports

Usage:
    import db
    store = db.get_store()
    user = db.users.get_by_matricula(store, "1001")
    rows = db.transactions.list_for_user(store, user["id"])
"""
from config import settings
from db import cards, connection, reminders, transactions, users
from db.rest_store import RestStore
from db.sqlite_store import SqliteStore
from db.store import FetchFailed, RecordStore


def get_store() -> RecordStore:
    """
    Build the record store selected by PAINEL_STORE

    Raises:
        ValueError: unknown store kind, or rest store without URL/key
    """
    kind = settings.get_store_kind()
    if kind == "sqlite":
        return SqliteStore(settings.get_db_path())
    if kind == "rest":
        return RestStore(
            settings.get_rest_url() or "",
            settings.get_rest_key() or "",
            timeout=settings.get_rest_timeout(),
        )
    raise ValueError(f"unknown PAINEL_STORE: {kind}")


__all__ = [
    "cards",
    "connection",
    "reminders",
    "transactions",
    "users",
    "FetchFailed",
    "RecordStore",
    "RestStore",
    "SqliteStore",
    "get_store",
]
