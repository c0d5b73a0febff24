"""
Navigation — sections under /painel/<matrícula>

Pure path logic, no Streamlit. The dashboard root is active only on an
exact match; every other section is active on an exact match or on a
sub-path of it. Without that rule the root link would light up on every
page, since all sections live under it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote, unquote

PAINEL_PREFIX = "/painel"


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    icon: str
    slug: str          # "" for the dashboard root

    @property
    def is_root(self) -> bool:
        return self.slug == ""


SECTIONS: Tuple[Section, ...] = (
    Section("dashboard",     "Dashboard",          "🏠", ""),
    Section("transacoes",    "Transações",         "↕️", "transacoes"),
    Section("cartoes",       "Cartões de Crédito", "💳", "cartoes"),
    Section("lembretes",     "Lembretes",          "🔔", "lembretes"),
    Section("metas",         "Metas Financeiras",  "🎯", "metas"),
    Section("relatorios",    "Relatórios",         "📊", "relatorios"),
    Section("configuracoes", "Configurações",      "⚙️", "configuracoes"),
    Section("suporte",       "Suporte",            "❓", "suporte"),
)

_BY_SLUG: Dict[str, Section] = {s.slug: s for s in SECTIONS}
_BY_KEY: Dict[str, Section] = {s.key: s for s in SECTIONS}


def section(key: str) -> Section:
    """Section by key (KeyError when unknown)."""
    return _BY_KEY[key]


def normalize_path(path: Optional[str]) -> str:
    """Leading slash, no trailing slash, no query string."""
    path = (path or "").split("?", 1)[0].strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def root_path(matricula: str) -> str:
    return f"{PAINEL_PREFIX}/{quote(str(matricula), safe='')}"


def section_path(sec: Section, matricula: str) -> str:
    root = root_path(matricula)
    return root if sec.is_root else f"{root}/{sec.slug}"


def is_active(sec: Section, current_path: str, matricula: str) -> bool:
    target = section_path(sec, matricula)
    current = normalize_path(current_path)
    if current == target:
        return True
    if sec.is_root:
        return False
    return current.startswith(target + "/")


def active_section(current_path: str, matricula: str) -> Optional[Section]:
    for sec in SECTIONS:
        if is_active(sec, current_path, matricula):
            return sec
    return None


@dataclass(frozen=True)
class NavItem:
    section: Section
    path: str
    active: bool
    badge: Optional[str] = None


def nav_items(
    current_path: str,
    matricula: str,
    badges: Optional[Dict[str, str]] = None,
) -> List[NavItem]:
    """Sidebar entries in fixed order, with active flag and optional badge."""
    badges = badges or {}
    return [
        NavItem(
            section=sec,
            path=section_path(sec, matricula),
            active=is_active(sec, current_path, matricula),
            badge=badges.get(sec.key),
        )
        for sec in SECTIONS
    ]


@dataclass(frozen=True)
class Route:
    """Parsed location: matrícula + section (None when the slug is unknown)."""
    matricula: Optional[str] = None
    section: Optional[Section] = None


def parse_path(path: Optional[str]) -> Route:
    """
    "/painel/42/transacoes" → Route("42", <Transações>)

    Anything outside /painel/<matrícula> is Route() (the login page).
    """
    parts = [p for p in normalize_path(path).split("/") if p]
    if len(parts) < 2 or "/" + parts[0] != PAINEL_PREFIX:
        return Route()
    matricula = unquote(parts[1])
    slug = parts[2] if len(parts) > 2 else ""
    return Route(matricula=matricula, section=_BY_SLUG.get(slug))
