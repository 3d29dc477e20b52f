"""Use cases producing read models for the dashboard views."""

from datetime import date
from decimal import Decimal

from zenwallet.application.ports.clock import ClockPort
from zenwallet.application.ports.state_store import StateStorePort
from zenwallet.domain.models import (
    AppState,
    DashboardView,
    SpendingAnalytics,
    TransactionLine,
    WalletBalance,
)
from zenwallet.domain.services.balances import derive_balances
from zenwallet.domain.services.reporting import (
    build_transaction_line,
    compute_daily_trend,
    compute_spending_by_category,
    newest_first,
    search_transactions,
)
from zenwallet.infrastructure.clock import SystemClock
from zenwallet.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Derive wallet balances and recent activity."""

    def __init__(
        self,
        state_store: StateStorePort,
        logger=None,
        recent_limit: int = 5,
    ) -> None:
        """Initialize the use case.

        Args:
            state_store: Port loading the application state.
            logger: Optional logger compatible with logging.Logger-like API.
            recent_limit: Number of recent transactions to include.
        """
        self._state_store = state_store
        self._logger = logger or get_app_logger()
        self._recent_limit = recent_limit

    def execute(self, state: AppState | None = None) -> DashboardView:
        """Return balances derived from baselines and the log.

        Args:
            state: Already loaded state; loaded from the store when omitted.

        Returns:
            DashboardView: Wallet balances, total and recent transactions.
        """
        state = state or self._state_store.load()
        balances = derive_balances(state.wallets, state.transactions)
        wallets = [
            WalletBalance(
                wallet_id=wallet.id,
                name=wallet.name,
                wallet_type=wallet.type,
                color=wallet.color,
                baseline=wallet.balance,
                balance=balances[wallet.id],
            )
            for wallet in state.wallets
        ]
        total = sum((row.balance for row in wallets), Decimal("0"))
        recent = [
            build_transaction_line(transaction, state)
            for transaction in newest_first(state.transactions)[: self._recent_limit]
        ]
        self._logger.debug(
            f"Dashboard computed over {len(state.transactions)} transactions"
        )
        return DashboardView(
            wallets=wallets,
            total_balance=total,
            recent_transactions=recent,
        )


class SearchTransactionsUseCase:
    """History view: search the log by note or category name."""

    def __init__(self, state_store: StateStorePort) -> None:
        self._state_store = state_store

    def execute(self, query: str = "") -> list[TransactionLine]:
        state = self._state_store.load()
        return [
            build_transaction_line(transaction, state)
            for transaction in search_transactions(state, query)
        ]


class GetSpendingAnalyticsUseCase:
    """Spending per category and the recent daily trend."""

    def __init__(
        self,
        state_store: StateStorePort,
        clock: ClockPort | None = None,
        logger=None,
    ) -> None:
        self._state_store = state_store
        self._clock = clock or SystemClock()
        self._logger = logger or get_app_logger()

    def execute(
        self,
        days: int = 7,
        today: date | None = None,
    ) -> SpendingAnalytics:
        """Return the analytics read model.

        Args:
            days: Length of the daily trend window.
            today: Last day of the window; defaults to the clock's date.

        Returns:
            SpendingAnalytics: Category totals and daily trend.
        """
        state = self._state_store.load()
        end_day = today or self._clock.now().date()
        analytics = SpendingAnalytics(
            by_category=compute_spending_by_category(
                state.transactions,
                state.categories,
            ),
            trend=compute_daily_trend(
                state.transactions,
                state.categories,
                today=end_day,
                days=days,
            ),
        )
        self._logger.debug(
            f"Analytics computed: expense total={analytics.total_expense}"
        )
        return analytics


__all__ = [
    "GetDashboardUseCase",
    "SearchTransactionsUseCase",
    "GetSpendingAnalyticsUseCase",
]
