"""Domain services package."""

from .balances import (
    apply_transaction_effect,
    derive_balance,
    derive_balances,
    replace_transaction_effect,
    reverse_transaction_effect,
    total_balance,
    transaction_effects,
)
from .dates import (
    add_days,
    add_month_clamped,
    add_weeks,
    initial_next_run,
    last_day_of_month,
)
from .reporting import (
    build_transaction_line,
    compute_daily_trend,
    compute_spending_by_category,
    resolve_category_name,
    resolve_wallet_name,
    search_transactions,
)
from .schedules import (
    advance_schedule,
    next_occurrence,
    process_due_schedules,
    run_schedule_now,
    validate_schedule,
)
from .validation import validate_category_type, validate_transaction

__all__ = [
    "add_days",
    "add_month_clamped",
    "add_weeks",
    "advance_schedule",
    "apply_transaction_effect",
    "build_transaction_line",
    "compute_daily_trend",
    "compute_spending_by_category",
    "derive_balance",
    "derive_balances",
    "initial_next_run",
    "last_day_of_month",
    "next_occurrence",
    "process_due_schedules",
    "replace_transaction_effect",
    "resolve_category_name",
    "resolve_wallet_name",
    "reverse_transaction_effect",
    "run_schedule_now",
    "search_transactions",
    "total_balance",
    "transaction_effects",
    "validate_category_type",
    "validate_schedule",
    "validate_transaction",
]
