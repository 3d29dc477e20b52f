"""Read models consumed by the dashboard and analytics views."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from .ledger import TransactionType


@dataclass(frozen=True)
class WalletBalance:
    """Wallet with its derived current balance."""

    wallet_id: str
    name: str
    wallet_type: str
    color: str
    baseline: Decimal
    balance: Decimal


@dataclass(frozen=True)
class TransactionLine:
    """Transaction with its references resolved to display labels."""

    transaction_id: str
    date: datetime
    type: TransactionType
    amount: Decimal
    label: str
    wallet_name: str
    to_wallet_name: str | None
    note: str


@dataclass(frozen=True)
class DashboardView:
    """Balances and recent activity for the home screen."""

    wallets: list[WalletBalance]
    total_balance: Decimal
    recent_transactions: list[TransactionLine]


@dataclass(frozen=True)
class CategorySpending:
    """Expense total for one category."""

    category_id: str
    name: str
    color: str
    icon_name: str
    amount: Decimal


@dataclass(frozen=True)
class DailyTrendPoint:
    """Income and expense totals for a single calendar day."""

    day: date
    income: Decimal
    expense: Decimal
    top_category: str | None = None


@dataclass(frozen=True)
class SpendingAnalytics:
    """Category breakdown and recent daily trend."""

    by_category: list[CategorySpending]
    trend: list[DailyTrendPoint]

    @property
    def total_expense(self) -> Decimal:
        """Return the sum of every category total."""
        return sum((item.amount for item in self.by_category), Decimal("0"))


__all__ = [
    "WalletBalance",
    "TransactionLine",
    "DashboardView",
    "CategorySpending",
    "DailyTrendPoint",
    "SpendingAnalytics",
]
