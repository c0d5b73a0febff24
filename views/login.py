"""Login — matrícula + active plan check"""
import streamlit as st

from config import APP_BADGE, settings
from services.access import AccessStatus, check_access
from services.navigation import root_path
from ui import UI, go_to
from views.session import get_store


def render():
    UI.inject_css()
    _, center, _ = st.columns([1, 1.4, 1])

    with center:
        UI.badge(APP_BADGE)
        UI.header("Painel Financeiro", "Entre com a matrícula da sua assinatura")

        blocked = st.session_state.get("login_blocked")
        if blocked:
            _render_blocked(blocked)
            return

        with st.form("login_form"):
            matricula = st.text_input("Matrícula", placeholder="Ex.: 1001")
            submitted = st.form_submit_button("Entrar", use_container_width=True)

        if not submitted:
            return

        with st.spinner("Validando matrícula..."):
            result = check_access(get_store(), matricula)

        if result.granted:
            go_to(root_path(result.matricula))
        elif result.status is AccessStatus.BLOCKED:
            st.session_state["login_blocked"] = result.matricula
            st.rerun()
        elif result.status is AccessStatus.BLANK:
            st.warning(result.message)
        else:
            st.error(result.message)


def _render_blocked(matricula: str):
    st.error("Acesso negado")
    st.write(f"A matrícula **{matricula}** não possui um plano ativo. "
             "Para usar a ISA 2.0, você precisa ter um plano ativo.")
    st.link_button("Assinar agora", settings.get_subscribe_url(),
                   use_container_width=True)
    if st.button("Voltar", use_container_width=True):
        st.session_state.pop("login_blocked", None)
        st.rerun()
