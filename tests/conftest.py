"""Test fixtures: a fresh SQLite store per test, seeded with two users."""
from __future__ import annotations

import os
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Mapping, Set

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# tests never touch the prod database
os.environ.setdefault("PAINEL_DB_ROLE", "shadow")

from config import CARDS_TABLE, REMINDERS_TABLE, TRANSACTIONS_TABLE, USERS_TABLE
from db.sqlite_store import SqliteStore
from db.store import FetchFailed, RecordStore


class RecordingStore(RecordStore):
    """Wraps a store, records every call, fails on request."""

    def __init__(self, inner: RecordStore):
        self.inner = inner
        self.calls: List[tuple] = []
        self.fail_tables: Set[str] = set()

    def _check(self, op: str, table: str) -> None:
        self.calls.append((op, table))
        if table in self.fail_tables:
            raise FetchFailed(table, "simulated outage")

    def find_one(self, table, match_field, match_value):
        self._check("find_one", table)
        return self.inner.find_one(table, match_field, match_value)

    def find_many(self, table, match_field, match_value, **kwargs):
        self._check("find_many", table)
        return self.inner.find_many(table, match_field, match_value, **kwargs)

    def insert(self, table, row):
        self._check("insert", table)
        return self.inner.insert(table, row)

    def ops(self, op: str) -> List[str]:
        return [t for o, t in self.calls if o == op]


def _seed(store: RecordStore) -> Dict[str, Any]:
    ana = store.insert(USERS_TABLE, {
        "matricula": "1001", "name": "Ana", "email": "ana@example.com",
        "active_plan": True,
    })
    bruno = store.insert(USERS_TABLE, {
        "matricula": "2002", "name": "Bruno", "email": "bruno@example.com",
        "active_plan": False,
    })

    rows: List[Mapping[str, Any]] = [
        {"amount": Decimal("3000.00"), "type": "income",  "category": "Salário",
         "created_at": "2026-09-05 10:00:00"},
        {"amount": Decimal("120.50"),  "type": "expense", "category": "Alimentação",
         "created_at": "2026-09-10 10:00:00"},
        {"amount": Decimal("79.50"),   "type": "expense", "category": "Alimentação",
         "created_at": "2026-10-02 10:00:00"},
        {"amount": Decimal("900.00"),  "type": "expense", "category": None,
         "created_at": "2026-10-03 10:00:00"},
        {"amount": Decimal("500.00"),  "type": "income",  "category": "Freelance",
         "created_at": "2026-10-04 10:00:00"},
    ]
    for row in rows:
        store.insert(TRANSACTIONS_TABLE, {"user_id": ana["id"], **row})

    for name, limit, used in (("Nubank", "5000", "1200"), ("Itaú", "8000", "2500"),
                              ("Inter", "2000", "2500")):
        store.insert(CARDS_TABLE, {
            "user_id": ana["id"], "card_name": name,
            "limit_amount": Decimal(limit), "used_amount": Decimal(used),
            "closing_day": 3, "due_day": 10,
        })

    for title, due, status in (("Luz", "2026-10-25", "pending"),
                               ("Internet", "2026-10-21", "pending"),
                               ("Aluguel", "2026-11-05", "pending"),
                               ("IPVA", "2026-12-01", "pending"),
                               ("Academia", "2026-10-01", "done")):
        store.insert(REMINDERS_TABLE, {
            "user_id": ana["id"], "title": title, "due_date": due,
            "amount": Decimal("100"), "status": status,
        })

    return {"ana": ana, "bruno": bruno}


@pytest.fixture(scope="function")
def store(tmp_path) -> SqliteStore:
    """Empty database (schema only)."""
    return SqliteStore(tmp_path / "painel.db")


@pytest.fixture(scope="function")
def seeded_store(store) -> SqliteStore:
    """Database with users 1001 (active) / 2002 (inactive) and Ana's data."""
    store.seeded = _seed(store)
    return store


@pytest.fixture(scope="function")
def recording_store(seeded_store) -> RecordingStore:
    return RecordingStore(seeded_store)
