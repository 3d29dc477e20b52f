"""Tests for adding, editing and deleting transactions."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from factories import FixedClock, InMemoryStateStore, make_state, make_transaction, make_wallet
from zenwallet.application.use_cases.manage_transactions import (
    AddTransactionUseCase,
    DeleteTransactionUseCase,
    TransactionDraft,
    UpdateTransactionUseCase,
)
from zenwallet.domain.errors import EntityNotFoundError, InvalidTransactionError
from zenwallet.domain.models import TransactionType
from zenwallet.domain.services.balances import derive_balances


NOW = datetime(2024, 5, 1, 18, 30)


def _state():
    return make_state(
        wallets=[
            make_wallet(id="w-1", balance=Decimal("100")),
            make_wallet(id="w-2", name="Cash", balance=Decimal("0")),
        ]
    )


def test_add_prepends_and_defaults_date_to_now() -> None:
    store = InMemoryStateStore(
        make_state(transactions=[make_transaction(id="older")])
    )

    transaction = AddTransactionUseCase(
        store, clock=FixedClock(NOW), logger=MagicMock()
    ).execute(
        TransactionDraft(
            wallet_id="w-1",
            amount=Decimal("12.40"),
            type=TransactionType.EXPENSE,
            note="  Coffee ",
            category_id="cat-food",
        )
    )

    assert transaction.date == NOW
    assert transaction.note == "Coffee"
    assert transaction.id.startswith("tx-")
    assert [tx.id for tx in store.state.transactions] == [transaction.id, "older"]


def test_add_transfer_drops_category() -> None:
    store = InMemoryStateStore(_state())

    transfer = AddTransactionUseCase(
        store, clock=FixedClock(NOW), logger=MagicMock()
    ).execute(
        TransactionDraft(
            wallet_id="w-1",
            amount=Decimal("30"),
            type=TransactionType.TRANSFER,
            category_id="cat-food",
            to_wallet_id="w-2",
        )
    )

    assert transfer.category_id is None
    balances = derive_balances(store.state.wallets, store.state.transactions)
    assert balances == {"w-1": Decimal("70"), "w-2": Decimal("30")}


def test_add_rejects_invalid_draft_without_saving() -> None:
    store = InMemoryStateStore()

    with pytest.raises(InvalidTransactionError):
        AddTransactionUseCase(store, clock=FixedClock(NOW), logger=MagicMock()).execute(
            TransactionDraft(
                wallet_id="w-1",
                amount=Decimal("-1"),
                type=TransactionType.EXPENSE,
                category_id="cat-food",
            )
        )

    assert store.saves == []


def test_update_then_revert_restores_balances() -> None:
    original = make_transaction(id="t1", amount=Decimal("10"))
    store = InMemoryStateStore(
        make_state(wallets=_state().wallets, transactions=[original])
    )
    before = derive_balances(store.state.wallets, store.state.transactions)
    use_case = UpdateTransactionUseCase(store, logger=MagicMock())

    edited = use_case.execute(
        "t1",
        TransactionDraft(
            wallet_id="w-1",
            amount=Decimal("25"),
            type=TransactionType.TRANSFER,
            to_wallet_id="w-2",
        ),
    )
    assert derive_balances(store.state.wallets, store.state.transactions) == {
        "w-1": Decimal("75"),
        "w-2": Decimal("25"),
    }
    assert edited.date == original.date

    use_case.execute(
        "t1",
        TransactionDraft(
            wallet_id="w-1",
            amount=Decimal("10"),
            type=TransactionType.EXPENSE,
            category_id="cat-food",
        ),
    )

    assert derive_balances(store.state.wallets, store.state.transactions) == before


def test_update_unknown_transaction_raises() -> None:
    with pytest.raises(EntityNotFoundError):
        UpdateTransactionUseCase(InMemoryStateStore(), logger=MagicMock()).execute(
            "missing",
            TransactionDraft(
                wallet_id="w-1",
                amount=Decimal("1"),
                type=TransactionType.EXPENSE,
                category_id="cat-food",
            ),
        )


def test_delete_removes_effect() -> None:
    logger = MagicMock()
    store = InMemoryStateStore(
        make_state(
            wallets=_state().wallets,
            transactions=[make_transaction(id="t1", amount=Decimal("10"))],
        )
    )

    DeleteTransactionUseCase(store, logger=logger).execute("t1")

    assert store.state.transactions == []
    assert derive_balances(store.state.wallets, [])["w-1"] == Decimal("100")
    logger.info.assert_called_once_with("Deleted transaction t1 (w-1:+10)")
