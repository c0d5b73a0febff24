"""
Credit cards — limit usage + "most used" card

Spend totals (`used_amount`) are maintained by the card feed; this module
only reads them.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence

import db
from services.controller import PageController
from services.summary import ZERO, parse_amount


@dataclass(frozen=True)
class CardUsage:
    """One card with its derived limit figures."""
    id: Any
    name: str
    limit: Decimal
    used: Decimal
    available: Decimal
    utilization: float          # % of limit, 0 when the limit is 0
    closing_day: Optional[int]
    due_day: Optional[int]


def card_usage(row: Mapping[str, Any]) -> CardUsage:
    limit, _ = parse_amount(row.get("limit_amount"))
    used, _ = parse_amount(row.get("used_amount"))
    available = limit - used if limit > used else ZERO
    utilization = float(used / limit * 100) if limit > 0 else 0.0
    return CardUsage(
        id=row.get("id"),
        name=str(row.get("card_name") or "Cartão"),
        limit=limit,
        used=used,
        available=available,
        utilization=utilization,
        closing_day=_day(row.get("closing_day")),
        due_day=_day(row.get("due_day")),
    )


def _day(value: Any) -> Optional[int]:
    try:
        day = int(value)
    except (TypeError, ValueError):
        return None
    return day if 1 <= day <= 31 else None


def most_used_card(cards: Sequence[CardUsage]) -> Optional[CardUsage]:
    """Card with the highest current-cycle spend (first one on ties)."""
    best: Optional[CardUsage] = None
    for card in cards:
        if best is None or card.used > best.used:
            best = card
    return best


@dataclass(frozen=True)
class CardsData:
    user: Dict[str, Any]
    cards: List[CardUsage]
    top_card: Optional[CardUsage]
    total_limit: Decimal
    total_used: Decimal


class CardsController(PageController):
    """Cartões de Crédito page."""

    def fetch(self, user: Dict[str, Any]) -> CardsData:
        cards = [card_usage(r) for r in db.cards.list_for_user(self.store, user["id"])]
        return CardsData(
            user=user,
            cards=cards,
            top_card=most_used_card(cards),
            total_limit=sum((c.limit for c in cards), ZERO),
            total_used=sum((c.used for c in cards), ZERO),
        )
