"""Application use cases package."""

from .backup import ExportBackupUseCase, ImportBackupUseCase
from .get_dashboard import (
    GetDashboardUseCase,
    GetSpendingAnalyticsUseCase,
    SearchTransactionsUseCase,
)
from .manage_schedules import (
    DeleteScheduleUseCase,
    RunScheduleNowUseCase,
    SaveScheduleUseCase,
    ScheduleDraft,
    ToggleScheduleUseCase,
)
from .manage_transactions import (
    AddTransactionUseCase,
    DeleteTransactionUseCase,
    TransactionDraft,
    UpdateTransactionUseCase,
)
from .manage_wallets import (
    AddCategoryUseCase,
    AddWalletUseCase,
    DeleteWalletUseCase,
    UpdateWalletUseCase,
    WalletDraft,
)
from .reconcile_schedules import ReconcileResult, ReconcileSchedulesUseCase

__all__ = [
    "AddCategoryUseCase",
    "AddTransactionUseCase",
    "AddWalletUseCase",
    "DeleteScheduleUseCase",
    "DeleteTransactionUseCase",
    "DeleteWalletUseCase",
    "ExportBackupUseCase",
    "GetDashboardUseCase",
    "GetSpendingAnalyticsUseCase",
    "ImportBackupUseCase",
    "ReconcileResult",
    "ReconcileSchedulesUseCase",
    "RunScheduleNowUseCase",
    "SaveScheduleUseCase",
    "ScheduleDraft",
    "SearchTransactionsUseCase",
    "ToggleScheduleUseCase",
    "TransactionDraft",
    "UpdateTransactionUseCase",
    "UpdateWalletUseCase",
    "WalletDraft",
]
