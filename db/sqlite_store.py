"""
SQLite record store — local backend for development, demos and tests

Pure data access. Table and column names are checked against the schema
before being formatted into SQL; values always go through placeholders.
"""
from __future__ import annotations

import logging
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional

from db.connection import get_connection, init_database
from db.store import FetchFailed, RecordStore, Row

logger = logging.getLogger(__name__)


class SqliteStore(RecordStore):
    """RecordStore backed by a SQLite file."""

    def __init__(self, db_path: Optional[Path] = None, *, create: bool = True):
        self.db_path = Path(db_path) if db_path else None
        if create:
            init_database(self.db_path)

    def find_one(self, table: str, match_field: str, match_value: Any) -> Optional[Row]:
        self.check_columns(table, match_field)
        rows = self._select(
            table,
            f"SELECT * FROM {table} WHERE {match_field} = ? LIMIT 1",
            [match_value],
        )
        return rows[0] if rows else None

    def find_many(
        self,
        table: str,
        match_field: str,
        match_value: Any,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> List[Row]:
        filters = dict(filters or {})
        self.check_columns(table, match_field, order_by, *filters.keys())

        clauses = [f"{match_field} = ?"]
        params: list = [match_value]
        for field, value in filters.items():
            clauses.append(f"{field} = ?")
            params.append(value)

        sql = f"SELECT * FROM {table} WHERE {' AND '.join(clauses)}"
        if order_by:
            # id breaks ties so equal timestamps keep insertion order
            direction = "DESC" if descending else "ASC"
            sql += f" ORDER BY {order_by} {direction}, id {direction}"
        if limit is not None:
            sql += " LIMIT ?"
            params.append(int(limit))
        return self._select(table, sql, params)

    def insert(self, table: str, row: Mapping[str, Any]) -> Row:
        if not row:
            raise ValueError("cannot insert an empty row")
        self.check_columns(table, *row.keys())

        fields = list(row.keys())
        placeholders = ", ".join("?" for _ in fields)
        sql = f"INSERT INTO {table} ({', '.join(fields)}) VALUES ({placeholders})"

        try:
            conn = get_connection(self.db_path)
        except sqlite3.Error as exc:
            raise FetchFailed(table, str(exc)) from exc
        try:
            cursor = conn.execute(sql, [_to_sql(row[f]) for f in fields])
            new_id = cursor.lastrowid
            conn.commit()
            stored = conn.execute(
                f"SELECT * FROM {table} WHERE id = ?", (new_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            logger.warning("insert into %s failed: %s", table, exc)
            raise FetchFailed(table, str(exc)) from exc
        finally:
            conn.close()
        return dict(stored)

    # ─── internals ───

    def _select(self, table: str, sql: str, params: list) -> List[Row]:
        try:
            conn = get_connection(self.db_path)
        except sqlite3.Error as exc:
            raise FetchFailed(table, str(exc)) from exc
        try:
            rows = conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            logger.warning("select on %s failed: %s", table, exc)
            raise FetchFailed(table, str(exc)) from exc
        finally:
            conn.close()
        return [dict(r) for r in rows]


def _to_sql(value: Any) -> Any:
    """Decimals / enums into something sqlite3 can bind."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, Enum):
        return value.value
    if value is not None and not isinstance(value, (int, float, str, bytes)):
        return str(value)
    return value
