"""Transactions — filters, add form, history"""
import pandas as pd
import streamlit as st

from config import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    TYPE_LABELS,
    TransactionType,
    parse_transaction_type,
)
from services.errors import ValidationFailed
from services.summary import category_label, parse_amount
from services.transactions import TransactionsController, TransactionsData
from ui import UI
from utils.format import br_date, brl
from views.session import mounted, render_state

_ALL = "Todas"
_TYPE_OPTIONS = {"Todos": None, **{v: k for k, v in TYPE_LABELS.items()}}


def render(matricula: str):
    UI.inject_css()
    ctrl: TransactionsController = mounted("transactions", TransactionsController, matricula)
    UI.header("Transações", "Histórico de receitas e gastos")

    data: TransactionsData = render_state(ctrl, retry_key="transactions_retry")
    if data is None:
        return

    _render_feedback(ctrl)

    # 1. summary
    s = data.summary
    UI.metric_row([
        ("Receitas", brl(s.total_income)),
        ("Gastos", brl(s.total_expense)),
        ("Saldo", brl(s.net_balance)),
    ])

    # 2. add form
    if ctrl.form_open:
        _render_form(ctrl)
    elif st.button("➕ Nova transação", key="tx_open_form"):
        ctrl.open_form()
        st.rerun()

    # 3. filters (client-side)
    f1, f2 = st.columns(2)
    with f1:
        category = st.selectbox("Categoria", [_ALL] + ctrl.category_options(),
                                key="tx_filter_category")
    with f2:
        type_label = st.selectbox("Tipo", list(_TYPE_OPTIONS), key="tx_filter_type")
    ctrl.set_filters(category=None if category == _ALL else category,
                     type_=_TYPE_OPTIONS[type_label])

    # 4. history
    rows = ctrl.visible()
    if not rows:
        UI.empty("Nenhuma transação encontrada")
        return
    UI.table(_history_frame(rows), title=f"{len(rows)} transações", max_height=520)


def _render_form(ctrl: TransactionsController):
    draft = ctrl.draft
    with st.form("tx_add_form"):
        c1, c2 = st.columns(2)
        with c1:
            amount = st.text_input("Valor (R$)", value=draft.amount, placeholder="0,00")
        with c2:
            labels = ["", *TYPE_LABELS.values()]
            current = parse_transaction_type(draft.type)
            type_label = st.selectbox(
                "Tipo", labels,
                index=labels.index(TYPE_LABELS[current]) if current else 0,
            )
        c3, c4 = st.columns(2)
        with c3:
            categories = _category_options(draft.category)
            category = st.selectbox(
                "Categoria", categories, index=categories.index(draft.category or ""))
        with c4:
            description = st.text_input("Descrição", value=draft.description)

        b1, b2 = st.columns(2)
        saved = b1.form_submit_button("Salvar", use_container_width=True)
        cancelled = b2.form_submit_button("Cancelar", use_container_width=True)

    if cancelled:
        ctrl.close_form()
        st.rerun()
    if saved:
        type_value = next((t.value for t, lbl in TYPE_LABELS.items() if lbl == type_label), "")
        ctrl.edit_draft(amount=amount, type=type_value,
                        category=category, description=description)
        with st.spinner("Salvando..."):
            outcome = ctrl.submit()
        if outcome.saved:
            st.rerun()
        _render_feedback(ctrl)


def _render_feedback(ctrl: TransactionsController):
    outcome = ctrl.last_submit
    if outcome is None:
        return
    if outcome.saved:
        st.success("Transação adicionada")
    elif isinstance(outcome.error, ValidationFailed):
        for message in outcome.error.errors.values():
            st.warning(message)
    else:
        st.error(f"Erro ao salvar transação: {outcome.error}")
    ctrl.last_submit = None


def _history_frame(rows) -> pd.DataFrame:
    records = []
    for row in rows:
        amount, _ = parse_amount(row.get("amount"))
        tx_type = parse_transaction_type(row.get("type"))
        sign = "-" if tx_type is TransactionType.EXPENSE else ""
        records.append({
            "Data": br_date(row.get("created_at")),
            "Descrição": row.get("description") or "",
            "Categoria": category_label(row.get("category")),
            "Tipo": TYPE_LABELS.get(tx_type, str(row.get("type") or "?")),
            "Valor": f"{sign}{brl(amount)}",
        })
    return pd.DataFrame(records)


def _category_options(current: str = "") -> list:
    """Suggested categories; a draft value outside them stays selectable."""
    options = ["", *dict.fromkeys(EXPENSE_CATEGORIES + INCOME_CATEGORIES)]
    if current and current not in options:
        options.append(current)
    return options
