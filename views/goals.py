"""Financial goals placeholder"""
from ui import UI


def render(matricula: str):
    UI.inject_css()
    UI.header("Metas Financeiras", "Planeje seus objetivos")
    UI.empty("Em breve você poderá criar metas de economia por aqui.")
