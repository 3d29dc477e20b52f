"""Builders for domain objects used across the test suite."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from zenwallet.domain.models import (
    AppState,
    Category,
    Frequency,
    Schedule,
    Transaction,
    TransactionType,
    Wallet,
    default_app_state,
)


class InMemoryStateStore:
    """StateStorePort stand-in keeping the state in memory."""

    def __init__(self, state: AppState | None = None) -> None:
        self.state = state or default_app_state()
        self.saves: list[AppState] = []

    def load(self) -> AppState:
        return self.state

    def save(self, state: AppState) -> None:
        self.state = state
        self.saves.append(state)


class FixedClock:
    """ClockPort stand-in returning a fixed instant."""

    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


def make_schedule(**overrides) -> Schedule:
    defaults = dict(
        id="s-1",
        name="Rent",
        amount=Decimal("500"),
        type=TransactionType.EXPENSE,
        category_id="cat-bills",
        wallet_id="w-1",
        frequency=Frequency.DAILY,
        next_run=datetime(2024, 1, 1, 9, 0),
        is_active=True,
    )
    defaults.update(overrides)
    return Schedule(**defaults)


def make_transaction(**overrides) -> Transaction:
    defaults = dict(
        id="tx-1",
        wallet_id="w-1",
        amount=Decimal("10"),
        type=TransactionType.EXPENSE,
        date=datetime(2024, 1, 1, 12, 0),
        note="",
        category_id="cat-food",
    )
    defaults.update(overrides)
    return Transaction(**defaults)


def make_wallet(**overrides) -> Wallet:
    defaults = dict(
        id="w-1",
        name="Main Savings",
        balance=Decimal("0"),
        type="Bank Account",
        color="#3b82f6",
    )
    defaults.update(overrides)
    return Wallet(**defaults)


def make_category(**overrides) -> Category:
    defaults = dict(
        id="cat-food",
        name="Food & Dining",
        icon_name="Utensils",
        color="#f97316",
        type=TransactionType.EXPENSE,
    )
    defaults.update(overrides)
    return Category(**defaults)


def make_state(**overrides) -> AppState:
    return replace(default_app_state(), **overrides)
