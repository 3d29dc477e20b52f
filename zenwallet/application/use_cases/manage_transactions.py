"""Use cases for recording, editing and deleting transactions.

Balances are never stored per transaction: they are derived from wallet
baselines and the log, so these use cases only edit the log. The effect
deltas are still computed and logged so balance changes are traceable.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from zenwallet.application.ports.clock import ClockPort
from zenwallet.application.ports.state_store import StateStorePort
from zenwallet.application.use_cases.lookup import (
    find_by_id,
    remove_by_id,
    replace_by_id,
)
from zenwallet.domain.models import Transaction, TransactionType
from zenwallet.domain.services.balances import (
    replace_transaction_effect,
    reverse_transaction_effect,
    transaction_effects,
)
from zenwallet.domain.services.validation import validate_transaction
from zenwallet.infrastructure.clock import SystemClock
from zenwallet.infrastructure.logging.logger import get_app_logger
from zenwallet.utils.decimal_utils import coerce_decimal
from zenwallet.utils.ids import new_id


@dataclass(frozen=True)
class TransactionDraft:
    """User-entered transaction fields."""

    wallet_id: str
    amount: Decimal
    type: TransactionType
    note: str = ""
    category_id: str | None = None
    to_wallet_id: str | None = None
    date: datetime | None = None


def _build_transaction(
    draft: TransactionDraft,
    transaction_id: str,
    when: datetime,
) -> Transaction:
    kind = TransactionType(draft.type)
    is_transfer = kind == TransactionType.TRANSFER
    return Transaction(
        id=transaction_id,
        wallet_id=draft.wallet_id,
        amount=coerce_decimal(draft.amount),
        type=kind,
        date=when,
        note=draft.note.strip(),
        category_id=None if is_transfer else draft.category_id,
        to_wallet_id=draft.to_wallet_id if is_transfer else None,
    )


def _describe(effects: dict[str, Decimal]) -> str:
    return ", ".join(f"{wallet_id}:{delta:+}" for wallet_id, delta in effects.items())


class AddTransactionUseCase:
    """Record a new transaction at the head of the log."""

    def __init__(
        self,
        state_store: StateStorePort,
        clock: ClockPort | None = None,
        logger=None,
    ) -> None:
        self._state_store = state_store
        self._clock = clock or SystemClock()
        self._logger = logger or get_app_logger()

    def execute(self, draft: TransactionDraft) -> Transaction:
        """Validate and store the transaction.

        Args:
            draft: Transaction fields; ``date`` defaults to now.

        Returns:
            Transaction: Stored transaction with its generated id.

        Raises:
            InvalidTransactionError: If the draft breaks a shape rule.
        """
        state = self._state_store.load()
        transaction = _build_transaction(
            draft,
            new_id("tx"),
            draft.date or self._clock.now(),
        )
        validate_transaction(transaction, state.categories)
        self._state_store.save(
            replace(state, transactions=[transaction] + state.transactions)
        )
        self._logger.info(
            f"Added {transaction.type.value} {transaction.id} "
            f"({_describe(transaction_effects(transaction))})"
        )
        return transaction


class UpdateTransactionUseCase:
    """Replace an existing transaction with edited values."""

    def __init__(self, state_store: StateStorePort, logger=None) -> None:
        self._state_store = state_store
        self._logger = logger or get_app_logger()

    def execute(self, transaction_id: str, draft: TransactionDraft) -> Transaction:
        """Store the edited transaction under the same id.

        The original date is kept unless the draft carries one.

        Raises:
            EntityNotFoundError: If ``transaction_id`` is unknown.
            InvalidTransactionError: If the edit breaks a shape rule.
        """
        state = self._state_store.load()
        previous = find_by_id(state.transactions, transaction_id, "transaction")
        updated = _build_transaction(
            draft,
            transaction_id,
            draft.date or previous.date,
        )
        validate_transaction(updated, state.categories)
        delta = replace_transaction_effect({}, previous, updated)
        self._state_store.save(
            replace(
                state,
                transactions=replace_by_id(state.transactions, updated),
            )
        )
        self._logger.info(
            f"Updated transaction {transaction_id} ({_describe(delta)})"
        )
        return updated


class DeleteTransactionUseCase:
    """Remove a transaction from the log."""

    def __init__(self, state_store: StateStorePort, logger=None) -> None:
        self._state_store = state_store
        self._logger = logger or get_app_logger()

    def execute(self, transaction_id: str) -> None:
        state = self._state_store.load()
        previous = find_by_id(state.transactions, transaction_id, "transaction")
        self._state_store.save(
            replace(
                state,
                transactions=remove_by_id(state.transactions, transaction_id),
            )
        )
        self._logger.info(
            f"Deleted transaction {transaction_id} "
            f"({_describe(reverse_transaction_effect({}, previous))})"
        )


__all__ = [
    "TransactionDraft",
    "AddTransactionUseCase",
    "UpdateTransactionUseCase",
    "DeleteTransactionUseCase",
]
