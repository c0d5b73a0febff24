"""
Transaction summary — income / expense / balance / category breakdown

Pure functions over plain row dicts, no DB / UI dependency.
Totals use Decimal so income - expense == balance holds exactly.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from config import OTHER_CATEGORY, TREND_MONTHS, TransactionType, parse_transaction_type

ZERO = Decimal("0")

_CURRENCY_PREFIX = re.compile(r"^\s*R\$\s*")

# Largest accepted magnitude: 10^15 (adjusted exponent)
_MAX_EXPONENT = 15


@dataclass(frozen=True)
class TransactionSummary:
    """Aggregates for one user's transactions."""
    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO
    net_balance: Decimal = ZERO
    expense_by_category: Dict[str, Decimal] = field(default_factory=dict)
    transaction_count: int = 0
    invalid_amount_count: int = 0
    unrecognized_type_count: int = 0


def parse_amount(value: Any) -> Tuple[Decimal, bool]:
    """
    Parse a persisted amount

    Accepts Decimal, int, float and strings such as "1234.56", "1234,56",
    "1.234,56" or "R$ 10,00".

    Returns:
        (amount, ok); (0, False) when the value is missing, unparseable,
        negative, not finite or too large to add up safely
    """
    if value is None or isinstance(value, bool):
        return ZERO, False

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = _to_decimal(str(value))
    elif isinstance(value, str):
        amount = _to_decimal(_normalize_number(value))
    else:
        return ZERO, False

    if amount is None or not amount.is_finite() or amount < 0:
        return ZERO, False
    if not amount:
        return ZERO, True
    if amount.adjusted() >= _MAX_EXPONENT:
        return ZERO, False
    return amount, True


def _normalize_number(text: str) -> str:
    text = _CURRENCY_PREFIX.sub("", text).strip().replace(" ", "")
    if "," in text:
        # pt-BR: "." groups thousands, "," marks decimals
        text = text.replace(".", "").replace(",", ".")
    return text


def _to_decimal(text: str) -> Optional[Decimal]:
    if not text:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def category_label(value: Any) -> str:
    """Category of a row, blank / missing collapsed to OTHER_CATEGORY."""
    if value is None:
        return OTHER_CATEGORY
    label = str(value).strip()
    return label or OTHER_CATEGORY


def summarize(rows: Iterable[Mapping[str, Any]]) -> TransactionSummary:
    """
    Single pass over a user's transactions

    Rows with an unknown `type` are counted but feed no total. Rows whose
    amount cannot be parsed count as zero.

    Returns:
        TransactionSummary (all zeros for an empty sequence)
    """
    income = ZERO
    expense = ZERO
    by_category: Dict[str, Decimal] = {}
    count = invalid = unknown = 0

    for row in rows:
        count += 1
        amount, ok = parse_amount(row.get("amount"))
        if not ok:
            invalid += 1

        tx_type = parse_transaction_type(row.get("type"))
        if tx_type is TransactionType.INCOME:
            income += amount
        elif tx_type is TransactionType.EXPENSE:
            expense += amount
            label = category_label(row.get("category"))
            by_category[label] = by_category.get(label, ZERO) + amount
        else:
            unknown += 1

    return TransactionSummary(
        total_income=income,
        total_expense=expense,
        net_balance=income - expense,
        expense_by_category=by_category,
        transaction_count=count,
        invalid_amount_count=invalid,
        unrecognized_type_count=unknown,
    )


# ═══════════════════════════════════════════════════════
#  Client-side filtering (no re-fetch)
# ═══════════════════════════════════════════════════════

def filter_transactions(
    rows: Iterable[Mapping[str, Any]],
    *,
    category: Optional[str] = None,
    type_: Optional[TransactionType] = None,
) -> List[Mapping[str, Any]]:
    """Rows matching every given filter; None / "" means "any"."""
    wanted_type = parse_transaction_type(type_) if type_ else None
    result = []
    for row in rows:
        if category and row.get("category") != category:
            continue
        if wanted_type and parse_transaction_type(row.get("type")) is not wanted_type:
            continue
        result.append(row)
    return result


def categories(rows: Iterable[Mapping[str, Any]]) -> List[str]:
    """Distinct non-blank categories, in order of first appearance."""
    seen: Dict[str, None] = {}
    for row in rows:
        label = row.get("category")
        if label and str(label).strip():
            seen.setdefault(label, None)
    return list(seen)


# ═══════════════════════════════════════════════════════
#  Chart frames (pandas)
# ═══════════════════════════════════════════════════════

def parse_timestamp(value: Any) -> Optional[datetime]:
    """ISO string / date / datetime → naive datetime (None if unparseable)."""
    if value is None or value == "":
        return None
    ts = pd.to_datetime(value, errors="coerce", utc=True)
    if pd.isna(ts):
        return None
    return ts.tz_convert(None).to_pydatetime()


def monthly_trend(
    rows: Iterable[Mapping[str, Any]],
    *,
    months: int = TREND_MONTHS,
    today: Optional[date] = None,
) -> pd.DataFrame:
    """
    Income / expense / net per calendar month, last `months` months

    Months without rows are zero-filled. Rows with no parseable timestamp
    or unknown type are left out.

    Returns:
        DataFrame(month "YYYY-MM", income, expense, net) sorted by month
    """
    today = today or date.today()
    end = pd.Period(today, freq="M")
    index = pd.period_range(end=end, periods=months, freq="M").strftime("%Y-%m")

    income = {m: 0.0 for m in index}
    expense = {m: 0.0 for m in index}
    for row in rows:
        ts = parse_timestamp(row.get("created_at"))
        if ts is None:
            continue
        month = ts.strftime("%Y-%m")
        if month not in income:
            continue
        amount, _ = parse_amount(row.get("amount"))
        tx_type = parse_transaction_type(row.get("type"))
        if tx_type is TransactionType.INCOME:
            income[month] += float(amount)
        elif tx_type is TransactionType.EXPENSE:
            expense[month] += float(amount)

    df = pd.DataFrame({
        "month": list(index),
        "income": [income[m] for m in index],
        "expense": [expense[m] for m in index],
    })
    df["net"] = df["income"] - df["expense"]
    return df


def category_frame(summary: TransactionSummary) -> pd.DataFrame:
    """
    Expense breakdown for pie chart / table

    Returns:
        DataFrame(category, amount, share) sorted by amount desc;
        empty frame with the same columns when there are no expenses
    """
    items = [(k, float(v)) for k, v in summary.expense_by_category.items()]
    df = pd.DataFrame(items, columns=["category", "amount"])
    if df.empty:
        df["share"] = pd.Series(dtype=float)
        return df
    total = df["amount"].sum()
    df["share"] = df["amount"] / total * 100 if total > 0 else 0.0
    return df.sort_values("amount", ascending=False, kind="stable").reset_index(drop=True)
