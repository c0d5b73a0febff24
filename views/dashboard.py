"""Dashboard — summary cards, upcoming reminders, charts"""
import streamlit as st

from services.dashboard import DashboardController, DashboardData
from services.navigation import section, section_path
from services.summary import category_frame, parse_amount
from ui import UI, category_pie, color_for_value, go_to, render_chart, trend_lines
from utils.format import br_date, brl, percent
from views.session import mounted, render_state


def render(matricula: str):
    UI.inject_css()
    ctrl = mounted("dashboard", DashboardController, matricula)
    data: DashboardData = render_state(ctrl, retry_key="dashboard_retry")
    if data is None:
        return

    name = data.user.get("name") or matricula
    UI.header(f"Olá, {name}", "Seu resumo financeiro")

    # 1. metric cards
    s = data.summary
    top = data.top_card
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        UI.card("Saldo Atual", brl(s.net_balance),
                subtext=f"{s.transaction_count} transações")
    with c2:
        UI.card("Receitas", brl(s.total_income))
    with c3:
        UI.card("Gastos", brl(s.total_expense))
    with c4:
        if top is None:
            UI.card("Cartão mais usado", "—", subtext="Nenhum cartão cadastrado")
        else:
            UI.card("Cartão mais usado", top.name,
                    subtext=f"{brl(top.used)} · {percent(top.utilization)} do limite")

    if s.invalid_amount_count or s.unrecognized_type_count:
        st.caption(
            f"⚠️ {s.invalid_amount_count} valor(es) inválido(s) e "
            f"{s.unrecognized_type_count} tipo(s) desconhecido(s) foram ignorados."
        )

    # 2. reminders + quick actions
    col_rem, col_actions = st.columns([1.6, 1])
    with col_rem:
        UI.sub_heading("Próximos lembretes")
        if not data.reminders:
            UI.empty("Nenhum lembrete pendente")
        for row in data.reminders:
            amount, _ = parse_amount(row.get("amount"))
            UI.list_item(
                row.get("title") or "Lembrete",
                subtitle=f"Vence em {br_date(row.get('due_date'))}",
                value=brl(amount) if amount else "",
            )

    with col_actions:
        UI.sub_heading("Ações rápidas")
        for key, label in (("transacoes", "➕ Nova transação"),
                           ("lembretes", "🔔 Ver lembretes"),
                           ("cartoes", "💳 Ver cartões")):
            if st.button(label, key=f"quick_{key}", use_container_width=True):
                go_to(section_path(section(key), matricula))

    # 3. charts
    col_pie, col_trend = st.columns([1, 1.3])
    with col_pie:
        UI.sub_heading("Gastos por categoria")
        fig = category_pie(category_frame(s))
        if fig is None:
            UI.empty("Nenhum gasto registrado")
        else:
            render_chart(fig, key="dashboard_pie")

    with col_trend:
        UI.sub_heading("Receitas x Gastos (6 meses)")
        fig = trend_lines(data.trend)
        if fig is None:
            UI.empty()
        else:
            render_chart(fig, key="dashboard_trend")
        net = float(data.trend["net"].sum()) if not data.trend.empty else 0.0
        st.markdown(
            f'<span style="color:{color_for_value(net)}">'
            f'Saldo do período: {brl(net, signed=True)}</span>',
            unsafe_allow_html=True,
        )
