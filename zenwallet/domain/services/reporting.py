"""Read-side services: label resolution, dashboard lines and analytics."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import Decimal

from zenwallet.domain.constants import (
    DELETED_CATEGORY_LABEL,
    DELETED_WALLET_LABEL,
    TRANSFER_LABEL,
    UNCATEGORIZED_LABEL,
)
from zenwallet.domain.models import (
    AppState,
    Category,
    CategorySpending,
    DailyTrendPoint,
    Transaction,
    TransactionLine,
    TransactionType,
    Wallet,
)


def resolve_wallet_name(wallets: Iterable[Wallet], wallet_id: str | None) -> str:
    """Return the wallet name, or a placeholder when it was deleted."""
    for wallet in wallets:
        if wallet.id == wallet_id:
            return wallet.name
    return DELETED_WALLET_LABEL


def resolve_category_name(
    categories: Iterable[Category],
    category_id: str | None,
) -> str:
    """Return the category name, or a placeholder for missing references."""
    if not category_id:
        return UNCATEGORIZED_LABEL
    for category in categories:
        if category.id == category_id:
            return category.name
    return DELETED_CATEGORY_LABEL


def build_transaction_line(
    transaction: Transaction,
    state: AppState,
) -> TransactionLine:
    """Resolve the references of a transaction for display."""
    if transaction.is_transfer:
        label = TRANSFER_LABEL
        to_wallet_name = resolve_wallet_name(state.wallets, transaction.to_wallet_id)
    else:
        label = resolve_category_name(state.categories, transaction.category_id)
        to_wallet_name = None
    return TransactionLine(
        transaction_id=transaction.id,
        date=transaction.date,
        type=transaction.type,
        amount=transaction.amount,
        label=label,
        wallet_name=resolve_wallet_name(state.wallets, transaction.wallet_id),
        to_wallet_name=to_wallet_name,
        note=transaction.note,
    )


def newest_first(transactions: Iterable[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=lambda transaction: transaction.date, reverse=True)


def search_transactions(state: AppState, query: str) -> list[Transaction]:
    """Filter the log by note or category name, newest first.

    Args:
        state: Application state.
        query: Case-insensitive text; an empty query matches everything.

    Returns:
        list[Transaction]: Matching transactions sorted by date descending.
    """
    needle = query.strip().lower()
    names = {category.id: category.name.lower() for category in state.categories}
    matches = [
        transaction
        for transaction in state.transactions
        if needle in transaction.note.lower()
        or needle in names.get(transaction.category_id or "", "")
    ]
    return newest_first(matches)


def compute_spending_by_category(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
) -> list[CategorySpending]:
    """Total expenses per expense category, largest first.

    Categories without spending are omitted.
    """
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.type != TransactionType.EXPENSE or not transaction.category_id:
            continue
        totals[transaction.category_id] = (
            totals.get(transaction.category_id, Decimal("0")) + transaction.amount
        )

    rows = [
        CategorySpending(
            category_id=category.id,
            name=category.name,
            color=category.color,
            icon_name=category.icon_name,
            amount=totals[category.id],
        )
        for category in categories
        if category.type == TransactionType.EXPENSE
        and totals.get(category.id, Decimal("0")) > 0
    ]
    return sorted(rows, key=lambda row: row.amount, reverse=True)


def compute_daily_trend(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    *,
    today: date,
    days: int = 7,
) -> list[DailyTrendPoint]:
    """Income and expense per day for the last ``days`` days, oldest first.

    Args:
        transactions: Transaction log.
        categories: Categories used to name the top spending category.
        today: Last day of the window.
        days: Window length.

    Returns:
        list[DailyTrendPoint]: One point per calendar day.
    """
    start = today - timedelta(days=days - 1)
    income: dict[date, Decimal] = {}
    expense: dict[date, Decimal] = {}
    by_category: dict[date, dict[str, Decimal]] = {}

    for transaction in transactions:
        day = _day_of(transaction.date)
        if day < start or day > today:
            continue
        if transaction.type == TransactionType.INCOME:
            income[day] = income.get(day, Decimal("0")) + transaction.amount
        elif transaction.type == TransactionType.EXPENSE:
            expense[day] = expense.get(day, Decimal("0")) + transaction.amount
            spent = by_category.setdefault(day, {})
            key = transaction.category_id or ""
            spent[key] = spent.get(key, Decimal("0")) + transaction.amount

    categories = list(categories)
    points = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        top_category = None
        spent = by_category.get(day)
        if spent:
            top_id = max(spent, key=spent.get)
            top_category = resolve_category_name(categories, top_id or None)
        points.append(
            DailyTrendPoint(
                day=day,
                income=income.get(day, Decimal("0")),
                expense=expense.get(day, Decimal("0")),
                top_category=top_category,
            )
        )
    return points


def _day_of(instant: datetime) -> date:
    return instant.date()


__all__ = [
    "resolve_wallet_name",
    "resolve_category_name",
    "build_transaction_line",
    "newest_first",
    "search_transactions",
    "compute_spending_by_category",
    "compute_daily_trend",
]
