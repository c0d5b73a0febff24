"""pt-BR formatting helpers."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from utils.format import br_date, brl, percent


@pytest.mark.parametrize("value, kwargs, expected", [
    (1234.5, {}, "R$ 1.234,50"),
    (Decimal("0"), {}, "R$ 0,00"),
    (-50, {}, "-R$ 50,00"),
    (Decimal("10"), {"signed": True}, "+R$ 10,00"),
    (1234567.891, {"decimals": 0}, "R$ 1.234.568"),
])
def test_brl(value, kwargs, expected):
    assert brl(value, **kwargs) == expected


def test_br_date():
    assert br_date("2026-10-19") == "19/10/2026"
    assert br_date(date(2026, 1, 2)) == "02/01/2026"
    assert br_date(datetime(2026, 1, 2, 23, 59)) == "02/01/2026"
    assert br_date("garbage") == "-"
    assert br_date(None) == "-"


def test_percent():
    assert percent(25.04) == "25,0%"
    assert percent(100, decimals=0) == "100%"
