"""Domain models for wallets, categories and transactions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Kind of money movement; the sign of an amount follows from it."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"


class Frequency(str, Enum):
    """Recurrence period of a schedule."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


@dataclass(frozen=True)
class Wallet:
    """A place money is held.

    Attributes:
        id: Stable identifier.
        name: Display name.
        balance: Baseline balance; the current balance is derived from it.
        type: Free-form label from the wallet-type catalog.
        color: Display color.
    """

    id: str
    name: str
    balance: Decimal
    type: str
    color: str


@dataclass(frozen=True)
class Category:
    """Income or expense category."""

    id: str
    name: str
    icon_name: str
    color: str
    type: TransactionType


@dataclass(frozen=True)
class Transaction:
    """A single money movement.

    ``to_wallet_id`` is set only for transfers and ``category_id`` only for
    income and expense. ``amount`` is always a positive magnitude.
    """

    id: str
    wallet_id: str
    amount: Decimal
    type: TransactionType
    date: datetime
    note: str = ""
    category_id: str | None = None
    to_wallet_id: str | None = None

    @property
    def is_transfer(self) -> bool:
        return self.type == TransactionType.TRANSFER


__all__ = [
    "TransactionType",
    "Frequency",
    "Wallet",
    "Category",
    "Transaction",
]
