"""
Per-session wiring — shared store + one controller per page

The store is built once per process (st.cache_resource); controllers live
in st.session_state so their state and fetch tokens survive reruns.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

import streamlit as st

import db
from db.store import RecordStore
from services.controller import PageController
from services.state import Failed, Idle, Loading, NotFound, PageState, Ready
from ui import UI, go_to

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=PageController)


@st.cache_resource
def get_store() -> RecordStore:
    store = db.get_store()
    logger.info("record store ready: %s", type(store).__name__)
    return store


def controller(key: str, factory: Callable[[RecordStore], C]) -> C:
    """Controller registered under `key` for this session (created on first use)."""
    registry = st.session_state.setdefault("controllers", {})
    if key not in registry:
        registry[key] = factory(get_store())
    return registry[key]


def mounted(key: str, factory: Callable[[RecordStore], C], matricula: str) -> C:
    ctrl = controller(key, factory)
    ctrl.mount(matricula)
    return ctrl


def render_state(ctrl: PageController, *, retry_key: str) -> Optional[object]:
    """
    Render the non-ready states of a page

    Returns:
        the page data when Ready, otherwise None (the caller stops there)
    """
    state: PageState = ctrl.state
    if isinstance(state, Ready):
        return state.data
    if isinstance(state, (Idle, Loading)):
        UI.loading_skeleton()
        return None
    if isinstance(state, NotFound):
        st.warning(f"Usuário não encontrado para a matrícula {state.matricula}.")
        if st.button("Voltar ao login", key=f"{retry_key}_login"):
            go_to("/")
        return None
    if isinstance(state, Failed):
        st.error(f"Erro ao carregar dados: {state.message}")
        if st.button("Tentar novamente", key=retry_key):
            ctrl.reload()
            st.rerun()
        return None
    return None
