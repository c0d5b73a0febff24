"""Support page: FAQ + contact"""
import streamlit as st

from ui import UI

_FAQ = (
    ("Como adiciono uma transação?",
     "Abra Transações e use o botão “Nova transação”."),
    ("Os gastos do cartão aparecem sozinhos?",
     "Sim. O valor usado de cada cartão é atualizado pela integração do cartão."),
    ("Meu acesso foi bloqueado",
     "O painel exige um plano ativo. Renove a assinatura para voltar a acessar."),
)


def render(matricula: str):
    UI.inject_css()
    UI.header("Suporte", "Ajuda e contato")
    for i, (question, answer) in enumerate(_FAQ):
        with UI.expander(question, key=f"faq_{i}"):
            st.write(answer)
    st.caption("Não encontrou sua resposta? Fale com a ISA pelo WhatsApp.")
