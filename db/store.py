"""
Record store interface — what the dashboard needs from any backend

Three operations only: find_one / find_many / insert.
Rows are plain dicts. A missing row is `None`, never an exception;
every collaborator failure surfaces as FetchFailed.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from config import TABLE_COLUMNS

Row = Dict[str, Any]


class FetchFailed(Exception):
    """The record store could not complete a read or write."""

    def __init__(self, table: str, message: str):
        super().__init__(f"{table}: {message}")
        self.table = table
        self.message = message


class RecordStore(ABC):
    """Abstract record store client."""

    # ─── abstract operations ───

    @abstractmethod
    def find_one(self, table: str, match_field: str, match_value: Any) -> Optional[Row]:
        """First row where `match_field == match_value`, or None."""
        ...

    @abstractmethod
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
        """All rows matching `match_field` (and every extra equality filter)."""
        ...

    @abstractmethod
    def insert(self, table: str, row: Mapping[str, Any]) -> Row:
        """Insert one row, return it as stored (with id)."""
        ...

    # ─── shared guards ───

    @staticmethod
    def check_columns(table: str, *fields: Optional[str]) -> None:
        """
        Reject unknown tables / columns before they reach the backend

        Raises:
            ValueError: table or column is not part of the schema
        """
        columns = TABLE_COLUMNS.get(table)
        if columns is None:
            raise ValueError(f"unknown table: {table}")
        for field in fields:
            if field is not None and field not in columns:
                raise ValueError(f"unknown column {table}.{field}")
