"""Reports — month by month + category breakdown"""
import streamlit as st

from services.dashboard import ReportsController, ReportsData
from services.summary import category_frame
from ui import UI, render_chart, trend_bars
from utils.format import brl, percent
from views.session import mounted, render_state


def render(matricula: str):
    UI.inject_css()
    ctrl: ReportsController = mounted("reports", ReportsController, matricula)
    UI.header("Relatórios", "Receitas e gastos por mês")

    months = st.select_slider("Período (meses)", options=[3, 6, 12, 24],
                              value=ctrl.months, key="reports_months")
    if months != ctrl.months:
        ctrl.months = months
        ctrl.reload()

    data: ReportsData = render_state(ctrl, retry_key="reports_retry")
    if data is None:
        return

    trend = data.trend
    fig = trend_bars(trend)
    if fig is not None:
        render_chart(fig, key="reports_trend")

    col_month, col_cat = st.columns(2)
    with col_month:
        table = trend.rename(columns={"month": "Mês", "income": "Receitas",
                                      "expense": "Gastos", "net": "Saldo"})
        for column in ("Receitas", "Gastos", "Saldo"):
            table[column] = table[column].map(brl)
        UI.table(table, title="Por mês")

    with col_cat:
        cats = category_frame(data.summary)
        if cats.empty:
            UI.empty("Nenhum gasto registrado")
        else:
            cats = cats.rename(columns={"category": "Categoria", "amount": "Valor",
                                        "share": "Participação"})
            cats["Valor"] = cats["Valor"].map(brl)
            cats["Participação"] = cats["Participação"].map(percent)
            UI.table(cats, title="Gastos por categoria")
