"""Aggregate root holding the whole persisted application state."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from zenwallet.domain.constants import (
    DEFAULT_CATEGORY_ROWS,
    DEFAULT_WALLET_ROW,
    DEFAULT_WALLET_TYPES,
)

from .ledger import Category, Transaction, TransactionType, Wallet
from .schedules import Schedule


@dataclass(frozen=True)
class DisplayPreferences:
    """User interface preferences persisted with the state."""

    is_dark_mode: bool = False


@dataclass(frozen=True)
class AppState:
    """Everything ZenWallet persists, saved and loaded as one document.

    The transaction log is kept newest first. ``unreadable`` holds stored
    records, keyed by collection name, that could not be read; they are
    written back unchanged on save.
    """

    wallets: list[Wallet] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    schedules: list[Schedule] = field(default_factory=list)
    wallet_types: list[str] = field(default_factory=list)
    preferences: DisplayPreferences = field(default_factory=DisplayPreferences)
    unreadable: dict[str, list[Any]] = field(default_factory=dict)


def unreadable_record_ids(state: AppState, collection: str) -> list[str]:
    """Return the ids of unreadable records in a collection.

    Records without a usable id are reported as ``"<unknown>"``.
    """
    ids = []
    for raw in state.unreadable.get(collection, []):
        record_id = raw.get("id") if isinstance(raw, dict) else None
        ids.append(str(record_id) if record_id not in (None, "") else "<unknown>")
    return ids


def default_categories() -> list[Category]:
    return [
        Category(
            id=category_id,
            name=name,
            icon_name=icon_name,
            color=color,
            type=TransactionType(category_type),
        )
        for category_id, name, icon_name, color, category_type in DEFAULT_CATEGORY_ROWS
    ]


def default_wallets() -> list[Wallet]:
    wallet_id, name, balance, wallet_type, color = DEFAULT_WALLET_ROW
    return [
        Wallet(
            id=wallet_id,
            name=name,
            balance=Decimal(balance),
            type=wallet_type,
            color=color,
        )
    ]


def default_app_state() -> AppState:
    """Return the state used on first launch or when storage is unusable."""
    return AppState(
        wallets=default_wallets(),
        transactions=[],
        categories=default_categories(),
        schedules=[],
        wallet_types=list(DEFAULT_WALLET_TYPES),
        preferences=DisplayPreferences(),
    )


__all__ = [
    "DisplayPreferences",
    "AppState",
    "default_app_state",
    "default_categories",
    "default_wallets",
    "unreadable_record_ids",
]
