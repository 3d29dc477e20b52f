"""Use cases for wallets, the wallet-type catalog and categories."""

from dataclasses import dataclass, replace
from decimal import Decimal

from zenwallet.application.ports.state_store import StateStorePort
from zenwallet.application.use_cases.lookup import (
    find_by_id,
    remove_by_id,
    replace_by_id,
)
from zenwallet.domain.models import AppState, Category, TransactionType, Wallet
from zenwallet.domain.services.validation import validate_category_type
from zenwallet.infrastructure.logging.logger import get_app_logger
from zenwallet.utils.decimal_utils import coerce_decimal
from zenwallet.utils.ids import new_id


@dataclass(frozen=True)
class WalletDraft:
    """User-editable wallet fields; ``balance`` is the baseline."""

    name: str
    balance: Decimal
    type: str
    color: str


def register_wallet_type(state: AppState, wallet_type: str) -> AppState:
    """Add a new wallet type to the sorted catalog.

    Args:
        state: Current state.
        wallet_type: Type label entered for a wallet.

    Returns:
        AppState: State with the catalog extended, or unchanged.
    """
    label = wallet_type.strip()
    if not label or label in state.wallet_types:
        return state
    return replace(state, wallet_types=sorted(state.wallet_types + [label]))


class AddWalletUseCase:
    """Create a wallet with its baseline balance."""

    def __init__(self, state_store: StateStorePort, logger=None) -> None:
        self._state_store = state_store
        self._logger = logger or get_app_logger()

    def execute(self, draft: WalletDraft) -> Wallet:
        state = register_wallet_type(self._state_store.load(), draft.type)
        wallet = Wallet(
            id=new_id("w"),
            name=draft.name.strip(),
            balance=coerce_decimal(draft.balance),
            type=draft.type.strip(),
            color=draft.color,
        )
        self._state_store.save(replace(state, wallets=state.wallets + [wallet]))
        self._logger.info(f"Added wallet {wallet.id} with baseline {wallet.balance}")
        return wallet


class UpdateWalletUseCase:
    """Edit a wallet; a new balance replaces the stored baseline."""

    def __init__(self, state_store: StateStorePort, logger=None) -> None:
        self._state_store = state_store
        self._logger = logger or get_app_logger()

    def execute(self, wallet_id: str, draft: WalletDraft) -> Wallet:
        state = self._state_store.load()
        find_by_id(state.wallets, wallet_id, "wallet")
        state = register_wallet_type(state, draft.type)
        wallet = Wallet(
            id=wallet_id,
            name=draft.name.strip(),
            balance=coerce_decimal(draft.balance),
            type=draft.type.strip(),
            color=draft.color,
        )
        self._state_store.save(
            replace(state, wallets=replace_by_id(state.wallets, wallet))
        )
        self._logger.info(f"Updated wallet {wallet_id}")
        return wallet


class DeleteWalletUseCase:
    """Remove a wallet; its transactions and schedules keep their ids."""

    def __init__(self, state_store: StateStorePort, logger=None) -> None:
        self._state_store = state_store
        self._logger = logger or get_app_logger()

    def execute(self, wallet_id: str) -> None:
        state = self._state_store.load()
        find_by_id(state.wallets, wallet_id, "wallet")
        self._state_store.save(
            replace(state, wallets=remove_by_id(state.wallets, wallet_id))
        )
        self._logger.info(f"Deleted wallet {wallet_id}")


class AddCategoryUseCase:
    """Create an income or expense category."""

    def __init__(self, state_store: StateStorePort, logger=None) -> None:
        self._state_store = state_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        icon_name: str,
        color: str,
        category_type: TransactionType,
    ) -> Category:
        """Store a new category.

        Raises:
            InvalidTransactionError: If ``category_type`` is TRANSFER.
        """
        category = Category(
            id=new_id("cat"),
            name=name.strip(),
            icon_name=icon_name,
            color=color,
            type=TransactionType(category_type),
        )
        validate_category_type(category)
        state = self._state_store.load()
        self._state_store.save(
            replace(state, categories=state.categories + [category])
        )
        self._logger.info(f"Added category {category.id} ({category.type.value})")
        return category


__all__ = [
    "WalletDraft",
    "register_wallet_type",
    "AddWalletUseCase",
    "UpdateWalletUseCase",
    "DeleteWalletUseCase",
    "AddCategoryUseCase",
]
