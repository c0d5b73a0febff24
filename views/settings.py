"""Settings — profile and record store info"""
import streamlit as st

from config import settings
from services.access import ProfileController, ProfileData
from ui import UI
from utils.format import br_date
from views.session import mounted, render_state


def render(matricula: str):
    UI.inject_css()
    ctrl = mounted("profile", ProfileController, matricula)
    UI.header("Configurações", "Perfil e dados")

    data: ProfileData = render_state(ctrl, retry_key="profile_retry")
    if data is None:
        return

    user = data.user
    UI.sub_heading("Perfil")
    c1, c2 = st.columns(2)
    c1.text_input("Nome", value=user.get("name") or "", disabled=True)
    c2.text_input("Matrícula", value=str(user.get("matricula") or ""), disabled=True)
    c3, c4 = st.columns(2)
    c3.text_input("E-mail", value=user.get("email") or "", disabled=True)
    c4.text_input("Telefone", value=user.get("phone") or "", disabled=True)

    UI.sub_heading("Plano")
    if user.get("active_plan"):
        expires = user.get("plan_expires_at")
        st.success("Plano ativo" + (f" até {br_date(expires)}" if expires else ""))
    else:
        st.warning("Plano inativo")
        st.link_button("Assinar agora", settings.get_subscribe_url())

    UI.sub_heading("Dados")
    kind = settings.get_store_kind()
    if kind == "sqlite":
        db_path = settings.get_db_path()
        if db_path.exists():
            st.info(f"Banco local: `{db_path}`\n\nTamanho: {db_path.stat().st_size / 1024:.1f} KB")
        else:
            st.warning("Arquivo do banco não encontrado")
    else:
        st.info(f"Banco remoto: `{settings.get_rest_url()}`")
