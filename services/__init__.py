"""
Business layer — grouped by page

- services/summary.py       transaction aggregation (pure)
- services/controller.py    fetch-cycle base controller
- services/dashboard.py     dashboard + reports
- services/transactions.py  history, filters, add form
- services/cards.py         credit cards
- services/reminders.py     reminders
- services/access.py        login check + profile
- services/navigation.py    sidebar sections / routing

Rules:
- services/ → db/ + config/ (allowed)
- never: services/ → ui/, services/ → views/
"""
from services.access import AccessResult, AccessStatus, ProfileController, check_access
from services.cards import CardsController, card_usage, most_used_card
from services.controller import FetchCycle, PageController
from services.dashboard import DashboardController, ReportsController
from services.reminders import RemindersController
from services.summary import TransactionSummary, summarize
from services.transactions import (
    TransactionDraft,
    TransactionsController,
    validate_draft,
)

__all__ = [
    "AccessResult",
    "AccessStatus",
    "CardsController",
    "DashboardController",
    "FetchCycle",
    "PageController",
    "ProfileController",
    "RemindersController",
    "ReportsController",
    "TransactionDraft",
    "TransactionSummary",
    "TransactionsController",
    "card_usage",
    "check_access",
    "most_used_card",
    "summarize",
    "validate_draft",
]
