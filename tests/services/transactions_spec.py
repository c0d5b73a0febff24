"""Transactions page: draft validation, submit, reload, filters."""
from __future__ import annotations

from decimal import Decimal

import pytest

from config import TRANSACTIONS_TABLE, TransactionType
from db.store import FetchFailed
from services.errors import UserNotFound, ValidationFailed
from services.state import Ready
from services.transactions import TransactionDraft, TransactionsController, validate_draft


# ═══════════════════════════════════════════════════════
#  Draft + validation
# ═══════════════════════════════════════════════════════

def test_draft_edit_returns_new_value():
    draft = TransactionDraft()
    edited = draft.edit(amount="10")
    assert draft.amount == ""
    assert edited.amount == "10"
    with pytest.raises(Exception):
        edited.amount = "20"


@pytest.mark.parametrize("amount, message", [
    ("", "Informe o valor"),
    ("   ", "Informe o valor"),
    ("dez", "Valor inválido"),
    ("-3", "Valor inválido"),
    ("0", "O valor deve ser maior que zero"),
    ("1e9999999", "Valor inválido"),
    ("1.500", "Use no máximo duas casas decimais"),
])
def test_amount_errors(amount, message):
    result = validate_draft(TransactionDraft(amount=amount, type="expense"))
    assert not result.ok
    assert result.errors == {"amount": message}


@pytest.mark.parametrize("type_, message", [("", "Selecione o tipo"), ("transfer", "Tipo inválido")])
def test_type_errors(type_, message):
    result = validate_draft(TransactionDraft(amount="10", type=type_))
    assert result.errors == {"type": message}


def test_valid_draft_parses_values():
    result = validate_draft(TransactionDraft(amount="1.234,50", type="gasto"))
    assert result.ok
    assert result.amount == Decimal("1234.50")
    assert result.type is TransactionType.EXPENSE


# ═══════════════════════════════════════════════════════
#  Submit
# ═══════════════════════════════════════════════════════

def test_blank_amount_never_reaches_store(recording_store):
    ctrl = TransactionsController(recording_store)
    ctrl.mount("1001")
    ctrl.open_form()
    ctrl.edit_draft(amount="", type="expense")

    outcome = ctrl.submit()

    assert not outcome.saved
    assert isinstance(outcome.error, ValidationFailed)
    assert "amount" in outcome.error.errors
    assert recording_store.ops("insert") == []
    assert ctrl.form_open is True
    assert ctrl.last_submit is outcome


def test_submit_writes_then_reloads(recording_store):
    ctrl = TransactionsController(recording_store)
    ctrl.mount("1001")
    before = ctrl.data.summary.total_expense
    ctrl.open_form()
    ctrl.edit_draft(amount="50,25", type="expense", category="Lazer", description="Cinema")

    outcome = ctrl.submit()

    assert outcome.saved
    assert outcome.row["category"] == "Lazer"
    assert recording_store.ops("insert") == [TRANSACTIONS_TABLE]
    # full fetch cycle re-ran: user lookup + transactions again
    assert recording_store.ops("find_one").count("users") == 2
    assert isinstance(ctrl.state, Ready)
    assert ctrl.data.summary.total_expense == before + Decimal("50.25")
    assert ctrl.form_open is False
    assert ctrl.draft == TransactionDraft()


def test_submit_for_unknown_user(seeded_store):
    ctrl = TransactionsController(seeded_store)
    ctrl.mount("9999")
    ctrl.edit_draft(amount="10", type="income")
    outcome = ctrl.submit()
    assert isinstance(outcome.error, UserNotFound)
    assert outcome.error.matricula == "9999"


def test_submit_before_load_fails(seeded_store):
    ctrl = TransactionsController(seeded_store)
    ctrl.edit_draft(amount="10", type="income")
    assert isinstance(ctrl.submit().error, FetchFailed)


def test_submit_store_error_keeps_draft(recording_store):
    ctrl = TransactionsController(recording_store)
    ctrl.mount("1001")
    ctrl.open_form()
    ctrl.edit_draft(amount="10", type="income")
    recording_store.fail_tables.add(TRANSACTIONS_TABLE)

    outcome = ctrl.submit()

    assert isinstance(outcome.error, FetchFailed)
    assert ctrl.form_open is True
    assert ctrl.draft.amount == "10"
    assert isinstance(ctrl.state, Ready)


# ═══════════════════════════════════════════════════════
#  Filters
# ═══════════════════════════════════════════════════════

def test_filters_do_not_refetch(recording_store):
    ctrl = TransactionsController(recording_store)
    ctrl.mount("1001")
    reads = len(recording_store.calls)

    ctrl.set_filters(category="Alimentação")
    assert len(ctrl.visible()) == 2
    ctrl.set_filters(type_=TransactionType.INCOME)
    assert len(ctrl.visible()) == 2
    ctrl.set_filters()
    assert len(ctrl.visible()) == 5

    assert len(recording_store.calls) == reads


def test_history_newest_first(seeded_store):
    ctrl = TransactionsController(seeded_store)
    ctrl.mount("1001")
    stamps = [r["created_at"] for r in ctrl.visible()]
    assert stamps == sorted(stamps, reverse=True)


def test_category_options(seeded_store):
    ctrl = TransactionsController(seeded_store)
    assert ctrl.category_options() == []
    ctrl.mount("1001")
    assert set(ctrl.category_options()) == {"Salário", "Alimentação", "Freelance"}
