"""
Access check for the login page + profile page data

Identity and billing live elsewhere; this only reads the user row and its
`active_plan` flag.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import db
from db.store import FetchFailed, RecordStore
from services.controller import PageController

logger = logging.getLogger(__name__)


class AccessStatus(str, Enum):
    BLANK   = "blank"      # nothing typed
    UNKNOWN = "unknown"    # no user with this matrícula
    BLOCKED = "blocked"    # user exists, plan inactive
    FAILED  = "failed"     # store error
    GRANTED = "granted"


@dataclass(frozen=True)
class AccessResult:
    status: AccessStatus
    matricula: str = ""
    user: Optional[Dict[str, Any]] = None
    message: str = ""

    @property
    def granted(self) -> bool:
        return self.status is AccessStatus.GRANTED


def check_access(store: RecordStore, matricula: str) -> AccessResult:
    """
    Resolve a typed matrícula into a login outcome

    Returns:
        AccessResult; store failures become AccessStatus.FAILED
    """
    matricula = (matricula or "").strip()
    if not matricula:
        return AccessResult(AccessStatus.BLANK, message="Digite sua matrícula")

    try:
        user = db.users.get_by_matricula(store, matricula)
    except FetchFailed as exc:
        logger.warning("login lookup for %s failed: %s", matricula, exc)
        return AccessResult(AccessStatus.FAILED, matricula,
                            message="Erro ao validar matrícula. Tente novamente.")

    if user is None:
        return AccessResult(AccessStatus.UNKNOWN, matricula,
                            message="Matrícula inválida. Verifique seus dados.")
    if not user.get("active_plan"):
        return AccessResult(AccessStatus.BLOCKED, matricula, user,
                            message="Para usar a ISA 2.0, você precisa ter um plano ativo.")
    return AccessResult(AccessStatus.GRANTED, matricula, user)


@dataclass(frozen=True)
class ProfileData:
    user: Dict[str, Any]


class ProfileController(PageController):
    """Configurações page: the user row only."""

    def fetch(self, user: Dict[str, Any]) -> ProfileData:
        return ProfileData(user=user)
