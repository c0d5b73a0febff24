"""Credit cards — limit usage per card"""
import streamlit as st

from services.cards import CardsController, CardsData
from ui import UI
from utils.format import brl, percent
from views.session import mounted, render_state


def render(matricula: str):
    UI.inject_css()
    ctrl = mounted("cards", CardsController, matricula)
    UI.header("Cartões de Crédito", "Limites e uso do ciclo atual")

    data: CardsData = render_state(ctrl, retry_key="cards_retry")
    if data is None:
        return
    if not data.cards:
        UI.empty("Nenhum cartão cadastrado")
        return

    UI.metric_row([
        ("Limite total", brl(data.total_limit)),
        ("Usado", brl(data.total_used)),
        ("Disponível", brl(max(data.total_limit - data.total_used, 0))),
    ])

    for card in data.cards:
        star = " ⭐" if data.top_card is not None and card.id == data.top_card.id else ""
        with UI.panel(key=f"card_{card.id}"):
            st.markdown(f"**💳 {card.name}{star}**")
            c1, c2, c3 = st.columns(3)
            c1.caption(f"Limite: {brl(card.limit)}")
            c2.caption(f"Usado: {brl(card.used)}")
            c3.caption(f"Disponível: {brl(card.available)}")
            UI.progress_bar(float(card.used), float(card.limit),
                            label=f"Uso do limite ({percent(card.utilization)})")
            days = []
            if card.closing_day:
                days.append(f"Fecha dia {card.closing_day}")
            if card.due_day:
                days.append(f"Vence dia {card.due_day}")
            if days:
                st.caption(" · ".join(days))
