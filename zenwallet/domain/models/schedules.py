"""Domain models for recurring schedules."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from .ledger import Frequency, Transaction, TransactionType


@dataclass(frozen=True)
class Schedule:
    """Recurring income or expense definition.

    Attributes:
        id: Stable identifier.
        name: Display name, copied into generated transaction notes.
        amount: Positive amount of each occurrence.
        type: INCOME or EXPENSE.
        category_id: Category of generated transactions.
        wallet_id: Wallet debited or credited by generated transactions.
        frequency: DAILY, WEEKLY or MONTHLY.
        next_run: Instant of the next due occurrence.
        is_active: Inactive schedules never fire.
        day_of_month: Target day (1-31), used by MONTHLY only.
        day_of_week: Target weekday (0=Sunday..6=Saturday), WEEKLY only.
    """

    id: str
    name: str
    amount: Decimal
    type: TransactionType
    category_id: str
    wallet_id: str
    frequency: Frequency
    next_run: datetime
    is_active: bool = True
    day_of_month: int | None = None
    day_of_week: int | None = None


@dataclass(frozen=True)
class ScheduleAdvance:
    """Outcome of advancing one schedule.

    Attributes:
        schedule: Schedule with its updated next_run.
        generated: Synthetic transactions, oldest first.
    """

    schedule: Schedule
    generated: list[Transaction] = field(default_factory=list)


@dataclass(frozen=True)
class ScheduleRunOutcome:
    """Outcome of a catch-up pass over every schedule.

    Attributes:
        schedules: Schedules after advancing, in their original order.
        transactions: Transaction log with generated entries prepended.
        generated: Transactions created by this pass, newest first.
        failed_schedule_ids: Schedules left unadvanced because of bad data.
    """

    schedules: list[Schedule]
    transactions: list[Transaction]
    generated: list[Transaction]
    failed_schedule_ids: list[str] = field(default_factory=list)


__all__ = ["Schedule", "ScheduleAdvance", "ScheduleRunOutcome"]
