"""Hosted REST store: query building, insert body, error mapping."""
from __future__ import annotations

import json
from decimal import Decimal

import pytest
import requests

from config import CARDS_TABLE, TRANSACTIONS_TABLE, USERS_TABLE, TransactionType
from db.rest_store import RestStore
from db.store import FetchFailed


class _Response:
    def __init__(self, payload=None, status=200, text=None):
        self.payload = payload
        self.status_code = status
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.text is not None:
            return json.loads(self.text)
        return self.payload


@pytest.fixture()
def rest():
    store = RestStore("https://db.example.com/", "secret", timeout=3)
    store.sent = []
    store.reply = _Response([])

    def fake_request(method, url, **kwargs):
        store.sent.append((method, url, kwargs))
        if isinstance(store.reply, Exception):
            raise store.reply
        return store.reply

    store.session.request = fake_request
    return store


def test_requires_url_and_key():
    with pytest.raises(ValueError):
        RestStore("", "k")
    with pytest.raises(ValueError):
        RestStore("https://x", "")


def test_auth_headers():
    store = RestStore("https://db.example.com", "secret")
    assert store.session.headers["apikey"] == "secret"
    assert store.session.headers["Authorization"] == "Bearer secret"


def test_find_one_query(rest):
    rest.reply = _Response([{"id": 7, "matricula": "1001"}])
    assert rest.find_one(USERS_TABLE, "matricula", "1001") == {"id": 7, "matricula": "1001"}

    method, url, kwargs = rest.sent[0]
    assert method == "GET"
    assert url == "https://db.example.com/rest/v1/users"
    assert kwargs["params"] == {"select": "*", "matricula": "eq.1001", "limit": "1"}
    assert kwargs["timeout"] == 3


def test_find_one_empty_is_none(rest):
    assert rest.find_one(USERS_TABLE, "matricula", "x") is None


def test_find_many_order_limit_filters(rest):
    rest.find_many("reminders", "user_id", 7, order_by="due_date", limit=3,
                   filters={"status": "pending"})
    params = rest.sent[0][2]["params"]
    assert params["order"] == "due_date.asc"
    assert params["limit"] == "3"
    assert params["status"] == "eq.pending"

    rest.find_many(CARDS_TABLE, "user_id", 7, order_by="created_at", descending=True)
    assert rest.sent[1][2]["params"]["order"] == "created_at.desc"


def test_insert_body_and_headers(rest):
    rest.reply = _Response([{"id": 1, "amount": "10.50"}])
    row = rest.insert(TRANSACTIONS_TABLE, {"user_id": 7, "amount": Decimal("10.50"),
                                           "type": TransactionType.EXPENSE})
    assert row == {"id": 1, "amount": "10.50"}

    method, _, kwargs = rest.sent[0]
    assert method == "POST"
    assert json.loads(kwargs["data"]) == {"user_id": 7, "amount": "10.50", "type": "expense"}
    assert kwargs["headers"]["Prefer"] == "return=representation"


def test_insert_without_representation_fails(rest):
    rest.reply = _Response([])
    with pytest.raises(FetchFailed):
        rest.insert(TRANSACTIONS_TABLE, {"user_id": 7})


def test_http_error_is_fetch_failed(rest):
    rest.reply = _Response(status=503)
    with pytest.raises(FetchFailed) as info:
        rest.find_many(TRANSACTIONS_TABLE, "user_id", 7)
    assert info.value.table == TRANSACTIONS_TABLE


def test_connection_error_is_fetch_failed(rest):
    rest.reply = requests.ConnectionError("down")
    with pytest.raises(FetchFailed):
        rest.find_one(USERS_TABLE, "matricula", "1")


def test_invalid_json_is_fetch_failed(rest):
    rest.reply = _Response(text="<html>")
    with pytest.raises(FetchFailed):
        rest.find_one(USERS_TABLE, "matricula", "1")


def test_unexpected_shape_is_fetch_failed(rest):
    rest.reply = _Response({"message": "oops"})
    with pytest.raises(FetchFailed):
        rest.find_many(USERS_TABLE, "matricula", "1")
