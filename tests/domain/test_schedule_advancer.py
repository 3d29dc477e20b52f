"""Tests for advancing a single schedule."""

from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from factories import make_schedule
from zenwallet.domain.constants import AUTO_NOTE_PREFIX, RUN_NOW_NOTE_PREFIX
from zenwallet.domain.errors import ScheduleAdvanceError
from zenwallet.domain.models import Frequency, TransactionType
from zenwallet.domain.services.schedules import (
    advance_schedule,
    next_occurrence,
    run_schedule_now,
    synthetic_transaction_id,
    validate_schedule,
)


def test_daily_catch_up_emits_one_transaction_per_missed_day() -> None:
    schedule = make_schedule(next_run=datetime(2024, 1, 1, 9, 0))
    now = datetime(2024, 1, 5, 10, 0)

    advance = advance_schedule(schedule, now)

    assert [tx.date for tx in advance.generated] == [
        datetime(2024, 1, day, 9, 0) for day in range(1, 6)
    ]
    assert advance.schedule.next_run == datetime(2024, 1, 6, 9, 0)
    assert advance.schedule.next_run > now


def test_monthly_catch_up_keeps_cadence() -> None:
    """Missed months are each recorded at their own scheduled instant."""
    schedule = make_schedule(
        frequency=Frequency.MONTHLY,
        day_of_month=1,
        amount=Decimal("500"),
        next_run=datetime(2024, 1, 1, 9, 0),
    )

    advance = advance_schedule(schedule, datetime(2024, 4, 15, 12, 0))

    assert [tx.date for tx in advance.generated] == [
        datetime(2024, 1, 1, 9, 0),
        datetime(2024, 2, 1, 9, 0),
        datetime(2024, 3, 1, 9, 0),
        datetime(2024, 4, 1, 9, 0),
    ]
    assert all(tx.amount == Decimal("500") for tx in advance.generated)
    assert all(tx.type == TransactionType.EXPENSE for tx in advance.generated)
    assert advance.schedule.next_run == datetime(2024, 5, 1, 9, 0)


def test_monthly_day_31_returns_to_31_after_short_months() -> None:
    schedule = make_schedule(
        frequency=Frequency.MONTHLY,
        day_of_month=31,
        next_run=datetime(2023, 1, 31, 9, 0),
    )

    advance = advance_schedule(schedule, datetime(2023, 5, 31, 9, 0))

    assert [tx.date.date().isoformat() for tx in advance.generated] == [
        "2023-01-31",
        "2023-02-28",
        "2023-03-31",
        "2023-04-30",
        "2023-05-31",
    ]
    assert advance.schedule.next_run == datetime(2023, 6, 30, 9, 0)


def test_weekly_catch_up_steps_seven_days() -> None:
    schedule = make_schedule(
        frequency=Frequency.WEEKLY,
        day_of_week=1,
        next_run=datetime(2024, 3, 4, 9, 0),
    )

    advance = advance_schedule(schedule, datetime(2024, 3, 20, 9, 0))

    assert [tx.date.day for tx in advance.generated] == [4, 11, 18]
    assert advance.schedule.next_run == datetime(2024, 3, 25, 9, 0)


def test_generated_transactions_copy_schedule_fields() -> None:
    schedule = make_schedule(
        name="Salary",
        type=TransactionType.INCOME,
        category_id="cat-salary",
        wallet_id="w-2",
        amount=Decimal("3200.50"),
    )

    advance = advance_schedule(schedule, datetime(2024, 1, 1, 9, 0))

    (transaction,) = advance.generated
    assert transaction.id == synthetic_transaction_id("s-1", datetime(2024, 1, 1, 9))
    assert transaction.wallet_id == "w-2"
    assert transaction.category_id == "cat-salary"
    assert transaction.amount == Decimal("3200.50")
    assert transaction.type == TransactionType.INCOME
    assert transaction.note == f"{AUTO_NOTE_PREFIX} Salary"
    assert transaction.to_wallet_id is None


def test_not_due_schedule_is_unchanged() -> None:
    schedule = make_schedule(next_run=datetime(2024, 1, 2, 9, 0))

    advance = advance_schedule(schedule, datetime(2024, 1, 1, 9, 0))

    assert advance.schedule is schedule
    assert advance.generated == []


def test_inactive_schedule_never_fires() -> None:
    schedule = make_schedule(is_active=False, next_run=datetime(2020, 1, 1, 9, 0))

    advance = advance_schedule(schedule, datetime(2024, 1, 1, 9, 0))

    assert advance.schedule is schedule
    assert advance.generated == []


def test_due_exactly_now_fires_once() -> None:
    now = datetime(2024, 1, 1, 9, 0)

    advance = advance_schedule(make_schedule(next_run=now), now)

    assert len(advance.generated) == 1
    assert advance.schedule.next_run == now + timedelta(days=1)


def test_synthetic_ids_are_deterministic() -> None:
    schedule = make_schedule()
    now = datetime(2024, 1, 3, 10, 0)

    first = advance_schedule(schedule, now)
    second = advance_schedule(schedule, now)

    assert [tx.id for tx in first.generated] == [tx.id for tx in second.generated]
    assert len({tx.id for tx in first.generated}) == 3


def test_corrupt_day_of_month_raises_advance_error() -> None:
    schedule = make_schedule(frequency=Frequency.MONTHLY, day_of_month=0)

    with pytest.raises(ScheduleAdvanceError) as excinfo:
        advance_schedule(schedule, datetime(2024, 2, 1, 9, 0))

    assert excinfo.value.schedule_id == "s-1"


def test_catch_up_is_bounded(monkeypatch) -> None:
    import zenwallet.domain.services.schedules as schedules_module

    monkeypatch.setattr(schedules_module, "MAX_CATCH_UP_OCCURRENCES", 3)
    schedule = make_schedule(next_run=datetime(2024, 1, 1, 9, 0))

    with pytest.raises(ScheduleAdvanceError):
        advance_schedule(schedule, datetime(2024, 1, 10, 9, 0))


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": Decimal("0")},
        {"amount": Decimal("-5")},
        {"type": TransactionType.TRANSFER},
        {"frequency": Frequency.MONTHLY, "day_of_month": None},
        {"frequency": Frequency.MONTHLY, "day_of_month": 32},
        {"frequency": Frequency.WEEKLY, "day_of_week": 7},
    ],
)
def test_validate_schedule_rejects_unusable_fields(overrides) -> None:
    with pytest.raises(ScheduleAdvanceError):
        validate_schedule(make_schedule(**overrides))


def test_validate_schedule_accepts_weekly_without_weekday() -> None:
    validate_schedule(make_schedule(frequency=Frequency.WEEKLY, day_of_week=None))


def test_next_occurrence_per_frequency() -> None:
    current = datetime(2024, 1, 31, 9, 0)

    assert next_occurrence(make_schedule(), current) == datetime(2024, 2, 1, 9, 0)
    assert next_occurrence(
        make_schedule(frequency=Frequency.WEEKLY), current
    ) == datetime(2024, 2, 7, 9, 0)
    assert next_occurrence(
        make_schedule(frequency=Frequency.MONTHLY, day_of_month=31), current
    ) == datetime(2024, 2, 29, 9, 0)


def test_run_now_fires_early_and_moves_one_period() -> None:
    """Running ahead of time records one transaction and skips that occurrence."""
    now = datetime(2024, 1, 1, 15, 30)
    schedule = make_schedule(name="Gym", next_run=now + timedelta(days=10))

    advance = run_schedule_now(schedule, now)

    (transaction,) = advance.generated
    assert transaction.date == now
    assert transaction.note == f"{RUN_NOW_NOTE_PREFIX} Gym"
    assert advance.schedule.next_run == schedule.next_run + timedelta(days=1)


def test_run_now_monthly_moves_from_previous_next_run() -> None:
    schedule = make_schedule(
        frequency=Frequency.MONTHLY,
        day_of_month=31,
        next_run=datetime(2024, 1, 31, 9, 0),
    )

    advance = run_schedule_now(schedule, datetime(2024, 1, 20, 12, 0))

    assert advance.schedule.next_run == datetime(2024, 2, 29, 9, 0)


def test_run_now_ids_differ_from_catch_up_ids() -> None:
    schedule = make_schedule(next_run=datetime(2024, 1, 1, 9, 0))
    now = datetime(2024, 1, 1, 9, 0)

    manual = run_schedule_now(schedule, now).generated[0]
    automatic = advance_schedule(schedule, now).generated[0]

    assert manual.id != automatic.id


def test_run_now_on_inactive_schedule_is_noop() -> None:
    schedule = make_schedule(is_active=False)

    advance = run_schedule_now(schedule, datetime(2024, 1, 1, 9, 0))

    assert advance.schedule is schedule
    assert advance.generated == []


def test_advance_does_not_mutate_input() -> None:
    schedule = make_schedule()
    snapshot = replace(schedule)

    advance_schedule(schedule, datetime(2024, 1, 3, 9, 0))

    assert schedule == snapshot
