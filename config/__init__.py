"""
Configuration — unified exports

    from config import TransactionType, OTHER_CATEGORY
    from config.theme import COLORS
    from config import settings
"""
from config import settings
from config.constants import (
    APP_BADGE,
    CARDS_TABLE,
    DASHBOARD_REMINDER_LIMIT,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    OTHER_CATEGORY,
    PAGE_CONFIG,
    REMINDERS_TABLE,
    STATUS_LABELS,
    TABLE_COLUMNS,
    TRANSACTIONS_TABLE,
    TREND_MONTHS,
    TYPE_LABELS,
    USERS_TABLE,
    ReminderStatus,
    TransactionType,
    parse_reminder_status,
    parse_transaction_type,
)

__all__ = [
    "settings",
    "APP_BADGE",
    "CARDS_TABLE",
    "DASHBOARD_REMINDER_LIMIT",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "OTHER_CATEGORY",
    "PAGE_CONFIG",
    "REMINDERS_TABLE",
    "STATUS_LABELS",
    "TABLE_COLUMNS",
    "TRANSACTIONS_TABLE",
    "TREND_MONTHS",
    "TYPE_LABELS",
    "USERS_TABLE",
    "ReminderStatus",
    "TransactionType",
    "parse_reminder_status",
    "parse_transaction_type",
]
