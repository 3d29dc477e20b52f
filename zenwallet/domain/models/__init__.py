"""Domain models package."""

from .ledger import Category, Frequency, Transaction, TransactionType, Wallet
from .schedules import Schedule, ScheduleAdvance, ScheduleRunOutcome
from .state import (
    AppState,
    DisplayPreferences,
    default_app_state,
    unreadable_record_ids,
)
from .views import (
    CategorySpending,
    DailyTrendPoint,
    DashboardView,
    SpendingAnalytics,
    TransactionLine,
    WalletBalance,
)

__all__ = [
    "AppState",
    "Category",
    "CategorySpending",
    "DailyTrendPoint",
    "DashboardView",
    "DisplayPreferences",
    "Frequency",
    "Schedule",
    "ScheduleAdvance",
    "ScheduleRunOutcome",
    "SpendingAnalytics",
    "Transaction",
    "TransactionLine",
    "TransactionType",
    "Wallet",
    "WalletBalance",
    "default_app_state",
    "unreadable_record_ids",
]
