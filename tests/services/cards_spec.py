"""Credit card usage + most used card."""
from __future__ import annotations

from decimal import Decimal

from services.cards import CardsController, card_usage, most_used_card
from services.state import Ready


def test_card_usage_figures():
    card = card_usage({"id": 1, "card_name": "Nubank", "limit_amount": "5000",
                       "used_amount": "1250,50", "closing_day": 3, "due_day": "10"})
    assert card.limit == Decimal("5000")
    assert card.used == Decimal("1250.50")
    assert card.available == Decimal("3749.50")
    assert round(card.utilization, 2) == 25.01
    assert (card.closing_day, card.due_day) == (3, 10)


def test_over_limit_has_nothing_available():
    card = card_usage({"limit_amount": 100, "used_amount": 150})
    assert card.available == Decimal("0")
    assert card.utilization == 150.0


def test_zero_limit_and_bad_values():
    card = card_usage({"card_name": None, "limit_amount": 0, "used_amount": "x",
                       "closing_day": 40, "due_day": None})
    assert card.name == "Cartão"
    assert card.utilization == 0.0
    assert card.used == Decimal("0")
    assert card.closing_day is None
    assert card.due_day is None


def test_most_used_is_highest_spend_not_first_row():
    cards = [card_usage({"id": i, "used_amount": used, "limit_amount": 1000})
             for i, used in enumerate(["100", "700", "300"])]
    assert most_used_card(cards).id == 1


def test_most_used_first_on_ties():
    cards = [card_usage({"id": i, "used_amount": "50", "limit_amount": 100}) for i in range(3)]
    assert most_used_card(cards).id == 0


def test_most_used_none_without_cards():
    assert most_used_card([]) is None


def test_cards_controller(seeded_store):
    ctrl = CardsController(seeded_store)
    state = ctrl.mount("1001")
    assert isinstance(state, Ready)
    data = ctrl.data
    assert [c.name for c in data.cards] == ["Nubank", "Itaú", "Inter"]
    assert data.top_card.name == "Itaú"
    assert data.total_limit == Decimal("15000")
    assert data.total_used == Decimal("6200")


def test_cards_controller_user_without_cards(seeded_store):
    ctrl = CardsController(seeded_store)
    ctrl.mount("2002")
    assert ctrl.data.cards == []
    assert ctrl.data.top_card is None
