"""
Hosted record store — PostgREST-compatible REST API (Supabase style)

Endpoint layout:
  GET  {base}/rest/v1/{table}?select=*&{field}=eq.{value}&order={col}.asc&limit=n
  POST {base}/rest/v1/{table}      body = JSON row, Prefer: return=representation

No retries: a failed request is reported once as FetchFailed.
"""
from __future__ import annotations

import json
import logging
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import requests

from db.store import FetchFailed, RecordStore, Row

logger = logging.getLogger(__name__)


class RestStore(RecordStore):
    """RecordStore talking to a hosted PostgREST endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = 8.0,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        if not api_key:
            raise ValueError("api_key is required")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        })

    def find_one(self, table: str, match_field: str, match_value: Any) -> Optional[Row]:
        rows = self.find_many(table, match_field, match_value, limit=1)
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

        params: Dict[str, str] = {"select": "*", match_field: f"eq.{_encode(match_value)}"}
        for field, value in filters.items():
            params[field] = f"eq.{_encode(value)}"
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"
        if limit is not None:
            params["limit"] = str(int(limit))

        payload = self._request("GET", table, params=params)
        if not isinstance(payload, list):
            raise FetchFailed(table, "unexpected response shape")
        return payload

    def insert(self, table: str, row: Mapping[str, Any]) -> Row:
        if not row:
            raise ValueError("cannot insert an empty row")
        self.check_columns(table, *row.keys())

        body = {k: _json_value(v) for k, v in row.items()}
        payload = self._request(
            "POST", table,
            data=json.dumps(body),
            headers={
                "Content-Type": "application/json",
                "Prefer": "return=representation",
            },
        )
        if isinstance(payload, list) and payload:
            return payload[0]
        if isinstance(payload, dict):
            return payload
        raise FetchFailed(table, "insert returned no row")

    # ─── internals ───

    def _request(self, method: str, table: str, **kwargs) -> Any:
        url = f"{self.base_url}/rest/v1/{table}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, table, exc)
            raise FetchFailed(table, str(exc)) from exc
        except ValueError as exc:
            # body was not JSON
            logger.warning("%s %s returned invalid JSON", method, table)
            raise FetchFailed(table, "invalid JSON response") from exc


def _encode(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _json_value(value: Any) -> Any:
    """Decimal → str keeps cents exact on the wire."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    return value
