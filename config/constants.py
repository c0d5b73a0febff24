"""
Transaction / reminder vocabulary — Single Source of Truth

Every place that needs to know which `type` or `status` values exist reads
them from here. Add new labels in this file only.
"""
from enum import Enum
from typing import Dict, FrozenSet, List, Optional

# ═══════════════════════════════════════════════════════
#  Streamlit page config
# ═══════════════════════════════════════════════════════

PAGE_CONFIG: Dict = dict(
    page_title="ISA 2.0 · Painel Financeiro",
    page_icon="💳",
    layout="wide",
    initial_sidebar_state="expanded",
)

APP_BADGE = "ISA 2.0"

# ═══════════════════════════════════════════════════════
#  Table names (shared by every record store client)
# ═══════════════════════════════════════════════════════

USERS_TABLE = "users"
TRANSACTIONS_TABLE = "transactions"
CARDS_TABLE = "credit_cards"
REMINDERS_TABLE = "reminders"

# Columns each table exposes; store clients refuse anything else.
TABLE_COLUMNS: Dict[str, FrozenSet[str]] = {
    USERS_TABLE: frozenset({
        "id", "matricula", "name", "email", "phone",
        "active_plan", "plan_expires_at", "created_at",
    }),
    TRANSACTIONS_TABLE: frozenset({
        "id", "user_id", "amount", "type", "category",
        "description", "created_at",
    }),
    CARDS_TABLE: frozenset({
        "id", "user_id", "card_name", "limit_amount", "used_amount",
        "closing_day", "due_day", "created_at",
    }),
    REMINDERS_TABLE: frozenset({
        "id", "user_id", "title", "due_date", "amount", "status", "created_at",
    }),
}

# ═══════════════════════════════════════════════════════
#  Transaction type — mutually exclusive
# ═══════════════════════════════════════════════════════

class TransactionType(str, Enum):
    """
    Transaction direction

    - INCOME:  money in (salary, freelance, refunds)
    - EXPENSE: money out
    """
    INCOME  = "income"
    EXPENSE = "expense"


# Labels written by older versions of the dashboard
_TYPE_ALIASES: Dict[str, TransactionType] = {
    "income":  TransactionType.INCOME,
    "receita": TransactionType.INCOME,
    "expense": TransactionType.EXPENSE,
    "gasto":   TransactionType.EXPENSE,
    "despesa": TransactionType.EXPENSE,
}

TYPE_LABELS: Dict[TransactionType, str] = {
    TransactionType.INCOME:  "Receita",
    TransactionType.EXPENSE: "Gasto",
}

# Category used when a row has no category
OTHER_CATEGORY = "Outros"

# Suggestions for the add-transaction form (free text is still accepted)
EXPENSE_CATEGORIES: List[str] = [
    "Alimentação", "Moradia", "Transporte", "Saúde", "Educação",
    "Lazer", "Assinaturas", "Compras", OTHER_CATEGORY,
]

INCOME_CATEGORIES: List[str] = [
    "Salário", "Freelance", "Investimentos", "Reembolso", OTHER_CATEGORY,
]


def parse_transaction_type(value) -> Optional[TransactionType]:
    """
    Normalise a persisted `type` value

    Returns:
        TransactionType, or None when the value is not a known label
    """
    if isinstance(value, TransactionType):
        return value
    if not isinstance(value, str):
        return None
    return _TYPE_ALIASES.get(value.strip().lower())


# ═══════════════════════════════════════════════════════
#  Reminder status
# ═══════════════════════════════════════════════════════

class ReminderStatus(str, Enum):
    PENDING = "pending"
    DONE    = "done"
    OVERDUE = "overdue"


_STATUS_ALIASES: Dict[str, ReminderStatus] = {
    "pending":   ReminderStatus.PENDING,
    "pendente":  ReminderStatus.PENDING,
    "done":      ReminderStatus.DONE,
    "concluido": ReminderStatus.DONE,
    "concluído": ReminderStatus.DONE,
    "feito":     ReminderStatus.DONE,
    "overdue":   ReminderStatus.OVERDUE,
    "atrasado":  ReminderStatus.OVERDUE,
    "vencido":   ReminderStatus.OVERDUE,
}

STATUS_LABELS: Dict[ReminderStatus, str] = {
    ReminderStatus.PENDING: "Pendente",
    ReminderStatus.DONE:    "Concluído",
    ReminderStatus.OVERDUE: "Atrasado",
}


def parse_reminder_status(value) -> Optional[ReminderStatus]:
    """Normalise a persisted reminder `status` (None when unknown)."""
    if isinstance(value, ReminderStatus):
        return value
    if not isinstance(value, str):
        return None
    return _STATUS_ALIASES.get(value.strip().lower())


# Dashboard shows at most this many upcoming reminders
DASHBOARD_REMINDER_LIMIT = 3

# Months shown on the income vs expense chart
TREND_MONTHS = 6
