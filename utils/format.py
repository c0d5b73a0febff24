"""Formatting helpers — BRL amounts and pt-BR dates"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Union

import pandas as pd

Number = Union[Decimal, float, int]


def brl(value: Number, *, decimals: int = 2, signed: bool = False) -> str:
    """
    R$ formatting with pt-BR separators

        brl(1234.5)                 → "R$ 1.234,50"
        brl(-50, signed=True)       → "-R$ 50,00"
        brl(Decimal("10"), signed=True) → "+R$ 10,00"
    """
    number = float(value)
    sign = ""
    if number < 0:
        sign = "-"
    elif signed and number > 0:
        sign = "+"
    text = f"{abs(number):,.{decimals}f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"


def br_date(value: Any) -> str:
    """dd/mm/yyyy, or "-" when the value is not a date."""
    if isinstance(value, datetime):
        ts: Optional[datetime] = value
    elif isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    else:
        parsed = pd.to_datetime(value, errors="coerce")
        ts = None if pd.isna(parsed) else parsed
    return ts.strftime("%d/%m/%Y") if ts is not None else "-"


def percent(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%".replace(".", ",")
