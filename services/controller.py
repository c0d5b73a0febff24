"""
Page controller — one fetch cycle per page mount / matrícula change

A cycle is: resolve the user by matrícula, then run the page's dependent
reads scoped to that user id, then aggregate. Each cycle carries a token;
only the latest token may write the page state, so a slow cycle started for
an old matrícula can never overwrite the state of the new one.

Subclasses implement `fetch(user)` only.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import db
from db.store import FetchFailed, RecordStore
from services.state import Failed, Idle, Loading, NotFound, Outcome, PageState, Ready

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchCycle:
    token: int
    matricula: str


class PageController(ABC):
    """
    Base page controller

    Usage::
        ctrl = DashboardController(store)
        ctrl.mount("1001")            # Idle → Loading → Ready/Failed/NotFound
        if isinstance(ctrl.state, Ready):
            render(ctrl.state.data)
    """

    def __init__(self, store: RecordStore):
        self.store = store
        self.state: PageState = Idle()
        self._token = 0

    # ─── page specific ───

    @abstractmethod
    def fetch(self, user: Dict[str, Any]) -> Any:
        """Dependent reads + aggregation for a resolved user."""
        ...

    # ─── cycle ───

    @property
    def matricula(self) -> Optional[str]:
        return getattr(self.state, "matricula", None)

    @property
    def data(self) -> Any:
        return self.state.data if isinstance(self.state, Ready) else None

    def begin(self, matricula: str) -> FetchCycle:
        """Issue a new token and enter Loading."""
        self._token += 1
        cycle = FetchCycle(token=self._token, matricula=matricula)
        self.state = Loading(token=cycle.token, matricula=matricula)
        return cycle

    def run(self, cycle: FetchCycle) -> Outcome:
        """
        Perform the reads of a cycle without touching the page state

        Returns:
            Ready, NotFound or Failed; never raises FetchFailed
        """
        try:
            user = db.users.get_by_matricula(self.store, cycle.matricula)
            if user is None:
                return NotFound(matricula=cycle.matricula)
            data = self.fetch(user)
        except FetchFailed as exc:
            logger.warning("fetch cycle %d for %s failed: %s",
                           cycle.token, cycle.matricula, exc)
            return Failed(matricula=cycle.matricula, message=exc.message)
        return Ready(matricula=cycle.matricula, data=data)

    def commit(self, cycle: FetchCycle, outcome: Outcome) -> bool:
        """Apply an outcome if its cycle is still the latest one."""
        if cycle.token != self._token:
            logger.debug("discarding stale cycle %d (%s), latest is %d",
                         cycle.token, cycle.matricula, self._token)
            return False
        self.state = outcome
        return True

    def load(self, matricula: str) -> PageState:
        cycle = self.begin(matricula)
        self.commit(cycle, self.run(cycle))
        return self.state

    def mount(self, matricula: str, *, fresh: bool = False) -> PageState:
        """Load on first mount, on a new matrícula, or when `fresh`."""
        # Loading seen here belongs to a script run Streamlit interrupted
        if fresh or isinstance(self.state, (Idle, Loading)) or self.matricula != matricula:
            return self.load(matricula)
        return self.state

    def reload(self) -> PageState:
        """Retry / refresh the current matrícula."""
        if self.matricula is None:
            return self.state
        return self.load(self.matricula)
