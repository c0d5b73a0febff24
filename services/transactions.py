"""
Transactions page — history, client-side filters, add form

Form state is an immutable draft replaced on every edit. A draft is
validated locally before anything is written; after a successful write the
whole fetch cycle runs again instead of merging the new row by hand.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

import db
from config import TRANSACTIONS_TABLE, TransactionType, parse_transaction_type
from db.store import FetchFailed
from services.controller import PageController
from services.errors import UserNotFound, ValidationFailed
from services.state import NotFound, Ready
from services.summary import (
    TransactionSummary,
    categories,
    filter_transactions,
    parse_amount,
    summarize,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════
#  Draft + validation
# ═══════════════════════════════════════════════════════

@dataclass(frozen=True)
class TransactionDraft:
    """Raw form input, exactly as typed."""
    amount: str = ""
    type: str = ""
    category: str = ""
    description: str = ""

    def edit(self, **changes: Any) -> "TransactionDraft":
        return replace(self, **changes)


@dataclass(frozen=True)
class ValidationResult:
    errors: Dict[str, str] = field(default_factory=dict)
    amount: Optional[Decimal] = None
    type: Optional[TransactionType] = None

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_draft(draft: TransactionDraft) -> ValidationResult:
    """
    Required-field checks for a new transaction

    - amount: present, numeric, greater than zero, at most 2 decimals
    - type:   income or expense
    """
    errors: Dict[str, str] = {}

    amount: Optional[Decimal] = None
    raw_amount = (draft.amount or "").strip()
    if not raw_amount:
        errors["amount"] = "Informe o valor"
    else:
        parsed, ok = parse_amount(raw_amount)
        if not ok:
            errors["amount"] = "Valor inválido"
        elif parsed == 0:
            errors["amount"] = "O valor deve ser maior que zero"
        elif parsed.as_tuple().exponent < -2:
            # "1.500" would otherwise be saved as R$ 1,50
            errors["amount"] = "Use no máximo duas casas decimais"
        else:
            amount = parsed

    tx_type: Optional[TransactionType] = None
    if not (draft.type or "").strip():
        errors["type"] = "Selecione o tipo"
    else:
        tx_type = parse_transaction_type(draft.type)
        if tx_type is None:
            errors["type"] = "Tipo inválido"

    return ValidationResult(errors=errors, amount=amount, type=tx_type)


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of the add-transaction action."""
    row: Optional[Dict[str, Any]] = None
    error: Optional[Exception] = None

    @property
    def saved(self) -> bool:
        return self.error is None


# ═══════════════════════════════════════════════════════
#  Page data + controller
# ═══════════════════════════════════════════════════════

@dataclass(frozen=True)
class TransactionFilters:
    category: Optional[str] = None
    type: Optional[TransactionType] = None


@dataclass(frozen=True)
class TransactionsData:
    user: Dict[str, Any]
    transactions: List[Dict[str, Any]]
    summary: TransactionSummary


class TransactionsController(PageController):
    """
    Transações page

    Transient UI state owned here: filters, add-form open flag, draft and
    the outcome of the last submit.
    """

    def __init__(self, store):
        super().__init__(store)
        self.filters = TransactionFilters()
        self.form_open = False
        self.draft = TransactionDraft()
        self.last_submit: Optional[SubmitOutcome] = None

    def fetch(self, user: Dict[str, Any]) -> TransactionsData:
        rows = db.transactions.list_for_user(self.store, user["id"])
        return TransactionsData(user=user, transactions=rows, summary=summarize(rows))

    # ─── filters (client-side, no re-fetch) ───

    def set_filters(self, *, category: Optional[str] = None,
                    type_: Optional[TransactionType] = None) -> None:
        self.filters = TransactionFilters(category=category or None, type=type_ or None)

    def visible(self) -> List[Mapping[str, Any]]:
        data = self.data
        if data is None:
            return []
        return filter_transactions(
            data.transactions,
            category=self.filters.category,
            type_=self.filters.type,
        )

    def category_options(self) -> List[str]:
        data = self.data
        return categories(data.transactions) if data else []

    # ─── add form ───

    def open_form(self) -> None:
        self.form_open = True

    def close_form(self) -> None:
        self.form_open = False
        self.draft = TransactionDraft()

    def edit_draft(self, **changes: Any) -> TransactionDraft:
        self.draft = self.draft.edit(**changes)
        return self.draft

    def submit(self) -> SubmitOutcome:
        """
        Validate the draft, write it, then re-run the fetch cycle

        Never raises: validation, missing user and store errors come back
        as SubmitOutcome.error (ValidationFailed / UserNotFound / FetchFailed).
        """
        result = validate_draft(self.draft)
        if not result.ok:
            return self._finish(SubmitOutcome(error=ValidationFailed(result.errors)))

        if isinstance(self.state, NotFound):
            return self._finish(SubmitOutcome(error=UserNotFound(self.state.matricula)))
        if not isinstance(self.state, Ready):
            return self._finish(SubmitOutcome(
                error=FetchFailed(TRANSACTIONS_TABLE, "dados da página não carregados")))

        user = self.state.data.user
        try:
            row = db.transactions.add(
                self.store, user["id"], result.amount, result.type,
                category=self.draft.category.strip(),
                description=self.draft.description.strip(),
            )
        except FetchFailed as exc:
            return self._finish(SubmitOutcome(error=exc))

        logger.info("transaction %s added for %s", row.get("id"), self.matricula)
        self.close_form()
        self.reload()
        return self._finish(SubmitOutcome(row=row))

    def _finish(self, outcome: SubmitOutcome) -> SubmitOutcome:
        self.last_submit = outcome
        return outcome
