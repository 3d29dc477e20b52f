"""Domain package for business rules and core models."""

from .errors import (
    EntityNotFoundError,
    InvalidBackupFileError,
    InvalidScheduleError,
    InvalidTransactionError,
    ScheduleAdvanceError,
    ZenWalletError,
)
from .models import (
    AppState,
    Category,
    Frequency,
    Schedule,
    Transaction,
    TransactionType,
    Wallet,
    default_app_state,
)

__all__ = [
    "AppState",
    "Category",
    "EntityNotFoundError",
    "Frequency",
    "InvalidBackupFileError",
    "InvalidScheduleError",
    "InvalidTransactionError",
    "Schedule",
    "ScheduleAdvanceError",
    "Transaction",
    "TransactionType",
    "Wallet",
    "ZenWalletError",
    "default_app_state",
]
