"""Schedule advancer and catch-up runner.

A schedule is Idle while ``next_run > now`` or while inactive, and Due when
active with ``next_run <= now``. Advancing emits one synthetic transaction
per missed occurrence, dated at the occurrence itself, and rolls
``next_run`` forward from the previous scheduled instant so the cadence
never drifts towards ``now``.
"""

from dataclasses import replace
from datetime import datetime

from zenwallet.domain.constants import (
    AUTO_NOTE_PREFIX,
    MAX_CATCH_UP_OCCURRENCES,
    RUN_NOW_NOTE_PREFIX,
)
from zenwallet.domain.errors import ScheduleAdvanceError
from zenwallet.domain.models import (
    Frequency,
    Schedule,
    ScheduleAdvance,
    ScheduleRunOutcome,
    Transaction,
    TransactionType,
)
from zenwallet.domain.services.dates import add_days, add_month_clamped, add_weeks


def validate_schedule(schedule: Schedule) -> None:
    """Check the fields the advancer relies on.

    Args:
        schedule: Schedule about to be advanced.

    Raises:
        ScheduleAdvanceError: If a field makes the next occurrence undefined.
    """
    if schedule.amount <= 0:
        raise ScheduleAdvanceError(schedule.id, "amount must be positive")
    if schedule.type not in (TransactionType.INCOME, TransactionType.EXPENSE):
        raise ScheduleAdvanceError(
            schedule.id,
            f"type {schedule.type} cannot be scheduled",
        )
    if schedule.frequency == Frequency.MONTHLY:
        day = schedule.day_of_month
        if day is None or not 1 <= day <= 31:
            raise ScheduleAdvanceError(
                schedule.id,
                f"day_of_month must be between 1 and 31, got {day}",
            )
    elif schedule.frequency == Frequency.WEEKLY:
        day = schedule.day_of_week
        if day is not None and not 0 <= day <= 6:
            raise ScheduleAdvanceError(
                schedule.id,
                f"day_of_week must be between 0 and 6, got {day}",
            )
    elif schedule.frequency != Frequency.DAILY:
        raise ScheduleAdvanceError(
            schedule.id,
            f"unknown frequency {schedule.frequency!r}",
        )


def next_occurrence(schedule: Schedule, current: datetime) -> datetime:
    """Return the occurrence one period after ``current``."""
    if schedule.frequency == Frequency.DAILY:
        return add_days(current, 1)
    if schedule.frequency == Frequency.WEEKLY:
        return add_weeks(current, 1)
    if schedule.frequency == Frequency.MONTHLY:
        return add_month_clamped(current, 1, schedule.day_of_month)
    raise ScheduleAdvanceError(
        schedule.id,
        f"unknown frequency {schedule.frequency!r}",
    )


def synthetic_transaction_id(schedule_id: str, due: datetime) -> str:
    """Return the deterministic id of the occurrence of a schedule at ``due``."""
    return f"tx-{schedule_id}-{due:%Y%m%dT%H%M%S}"


def build_synthetic_transaction(
    schedule: Schedule,
    *,
    transaction_id: str,
    when: datetime,
    note_prefix: str = AUTO_NOTE_PREFIX,
) -> Transaction:
    """Materialize one occurrence of a schedule as a transaction."""
    return Transaction(
        id=transaction_id,
        wallet_id=schedule.wallet_id,
        amount=schedule.amount,
        type=schedule.type,
        date=when,
        note=f"{note_prefix} {schedule.name}",
        category_id=schedule.category_id,
    )


def advance_schedule(schedule: Schedule, now: datetime) -> ScheduleAdvance:
    """Catch a schedule up to ``now``.

    Args:
        schedule: Schedule to evaluate.
        now: Reference instant.

    Returns:
        ScheduleAdvance: Updated schedule and generated transactions, oldest
        first. Inactive or not-yet-due schedules come back unchanged.

    Raises:
        ScheduleAdvanceError: If the schedule data is unusable or the number
            of missed occurrences exceeds MAX_CATCH_UP_OCCURRENCES.
    """
    if not schedule.is_active or schedule.next_run > now:
        return ScheduleAdvance(schedule=schedule, generated=[])

    validate_schedule(schedule)

    generated: list[Transaction] = []
    due = schedule.next_run
    while due <= now:
        if len(generated) >= MAX_CATCH_UP_OCCURRENCES:
            raise ScheduleAdvanceError(
                schedule.id,
                f"more than {MAX_CATCH_UP_OCCURRENCES} missed occurrences",
            )
        generated.append(
            build_synthetic_transaction(
                schedule,
                transaction_id=synthetic_transaction_id(schedule.id, due),
                when=due,
            )
        )
        following = next_occurrence(schedule, due)
        if following <= due:
            raise ScheduleAdvanceError(schedule.id, "next run did not move forward")
        due = following

    return ScheduleAdvance(
        schedule=replace(schedule, next_run=due),
        generated=generated,
    )


def run_schedule_now(schedule: Schedule, now: datetime) -> ScheduleAdvance:
    """Fire a schedule once, on demand.

    The transaction is dated at ``now`` and ``next_run`` moves exactly one
    period past its previous value, whether or not the schedule was due.
    Inactive schedules are returned unchanged.

    Raises:
        ScheduleAdvanceError: If the schedule data is unusable.
    """
    if not schedule.is_active:
        return ScheduleAdvance(schedule=schedule, generated=[])

    validate_schedule(schedule)
    transaction = build_synthetic_transaction(
        schedule,
        transaction_id=f"tx-{schedule.id}-now-{now:%Y%m%dT%H%M%S%f}",
        when=now,
        note_prefix=RUN_NOW_NOTE_PREFIX,
    )
    return ScheduleAdvance(
        schedule=replace(
            schedule,
            next_run=next_occurrence(schedule, schedule.next_run),
        ),
        generated=[transaction],
    )


def process_due_schedules(
    schedules: list[Schedule],
    transactions: list[Transaction],
    now: datetime,
    logger=None,
) -> ScheduleRunOutcome:
    """Advance every schedule and merge the generated transactions.

    Each schedule is advanced in isolation: a schedule whose data cannot be
    advanced is kept as it was and reported in ``failed_schedule_ids``.
    Occurrences whose id is already in the log are not added again.

    Args:
        schedules: Current schedules.
        transactions: Current transaction log, newest first.
        now: Reference instant.
        logger: Optional logger for failed schedules.

    Returns:
        ScheduleRunOutcome: Updated schedules and log for a single save.
    """
    known_ids = {transaction.id for transaction in transactions}
    updated: list[Schedule] = []
    generated: list[Transaction] = []
    failed: list[str] = []

    for schedule in schedules:
        try:
            advance = advance_schedule(schedule, now)
        except ScheduleAdvanceError as exc:
            if logger is not None:
                logger.warning(str(exc))
            failed.append(schedule.id)
            updated.append(schedule)
            continue
        updated.append(advance.schedule)
        for transaction in advance.generated:
            if transaction.id in known_ids:
                continue
            known_ids.add(transaction.id)
            generated.append(transaction)

    generated.sort(key=lambda transaction: transaction.date, reverse=True)
    return ScheduleRunOutcome(
        schedules=updated,
        transactions=generated + list(transactions),
        generated=generated,
        failed_schedule_ids=failed,
    )


__all__ = [
    "validate_schedule",
    "next_occurrence",
    "synthetic_transaction_id",
    "build_synthetic_transaction",
    "advance_schedule",
    "run_schedule_now",
    "process_due_schedules",
]
