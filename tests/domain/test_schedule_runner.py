"""Tests for processing every due schedule at once."""

from datetime import datetime
from unittest.mock import MagicMock

from factories import make_schedule, make_transaction
from zenwallet.domain.models import Frequency
from zenwallet.domain.services.schedules import (
    process_due_schedules,
    synthetic_transaction_id,
)


NOW = datetime(2024, 1, 3, 12, 0)


def test_generated_transactions_are_prepended_newest_first() -> None:
    existing = make_transaction(id="tx-manual", date=datetime(2023, 12, 31, 8, 0))
    schedules = [
        make_schedule(id="s-1", next_run=datetime(2024, 1, 2, 9, 0)),
        make_schedule(id="s-2", next_run=datetime(2024, 1, 3, 7, 0)),
    ]

    outcome = process_due_schedules(schedules, [existing], NOW)

    assert [tx.id for tx in outcome.transactions] == [
        synthetic_transaction_id("s-1", datetime(2024, 1, 3, 9, 0)),
        synthetic_transaction_id("s-2", datetime(2024, 1, 3, 7, 0)),
        synthetic_transaction_id("s-1", datetime(2024, 1, 2, 9, 0)),
        "tx-manual",
    ]
    assert len(outcome.generated) == 3
    assert outcome.failed_schedule_ids == []


def test_every_schedule_ends_in_the_future_or_inactive() -> None:
    schedules = [
        make_schedule(id="s-1", next_run=datetime(2023, 6, 1, 9, 0)),
        make_schedule(id="s-2", is_active=False, next_run=datetime(2023, 6, 1, 9, 0)),
        make_schedule(id="s-3", next_run=datetime(2025, 1, 1, 9, 0)),
    ]

    outcome = process_due_schedules(schedules, [], NOW)

    for schedule in outcome.schedules:
        assert schedule.next_run > NOW or not schedule.is_active
    assert outcome.schedules[1] is schedules[1]
    assert outcome.schedules[2] is schedules[2]


def test_failing_schedule_is_isolated() -> None:
    logger = MagicMock()
    broken = make_schedule(
        id="s-broken",
        frequency=Frequency.MONTHLY,
        day_of_month=0,
        next_run=datetime(2024, 1, 1, 9, 0),
    )
    healthy = make_schedule(id="s-ok", next_run=datetime(2024, 1, 3, 9, 0))

    outcome = process_due_schedules([broken, healthy], [], NOW, logger=logger)

    assert outcome.failed_schedule_ids == ["s-broken"]
    assert outcome.schedules[0] is broken
    assert outcome.schedules[1].next_run == datetime(2024, 1, 4, 9, 0)
    assert len(outcome.generated) == 1
    logger.warning.assert_called_once()


def test_occurrences_already_in_the_log_are_not_duplicated() -> None:
    """Re-running after a save that missed the schedule update adds nothing."""
    schedule = make_schedule(next_run=datetime(2024, 1, 2, 9, 0))
    first = process_due_schedules([schedule], [], NOW)

    second = process_due_schedules([schedule], first.transactions, NOW)

    assert second.generated == []
    assert [tx.id for tx in second.transactions] == [
        tx.id for tx in first.transactions
    ]
    assert second.schedules[0].next_run == first.schedules[0].next_run


def test_nothing_due_returns_inputs_unchanged() -> None:
    schedules = [make_schedule(next_run=datetime(2024, 2, 1, 9, 0))]
    transactions = [make_transaction()]

    outcome = process_due_schedules(schedules, transactions, NOW)

    assert outcome.generated == []
    assert outcome.schedules == schedules
    assert outcome.transactions == transactions
