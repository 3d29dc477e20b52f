"""Tests for calendar arithmetic."""

from datetime import datetime

import pytest

from zenwallet.domain.models import Frequency
from zenwallet.domain.services.dates import (
    add_days,
    add_month_clamped,
    add_weeks,
    initial_next_run,
    last_day_of_month,
    sunday_based_weekday,
)


def test_last_day_of_month_handles_leap_years() -> None:
    assert last_day_of_month(2024, 2) == 29
    assert last_day_of_month(2023, 2) == 28
    assert last_day_of_month(2023, 4) == 30
    assert last_day_of_month(2023, 12) == 31


def test_add_days_crosses_month_and_year_boundaries() -> None:
    assert add_days(datetime(2023, 12, 31, 9), 1) == datetime(2024, 1, 1, 9)
    assert add_weeks(datetime(2024, 2, 26, 9, 30), 1) == datetime(2024, 3, 4, 9, 30)


def test_add_month_clamped_clamps_each_month_independently() -> None:
    """A day-31 target should return to 31 after passing through short months."""
    instant = datetime(2023, 1, 31, 9, 0)
    visited = []
    for _ in range(4):
        instant = add_month_clamped(instant, 1, 31)
        visited.append(instant)

    assert visited == [
        datetime(2023, 2, 28, 9, 0),
        datetime(2023, 3, 31, 9, 0),
        datetime(2023, 4, 30, 9, 0),
        datetime(2023, 5, 31, 9, 0),
    ]


def test_add_month_clamped_uses_leap_day() -> None:
    assert add_month_clamped(datetime(2024, 1, 31, 9), 1, 31) == datetime(
        2024, 2, 29, 9
    )


def test_add_month_clamped_rolls_year_and_goes_backwards() -> None:
    assert add_month_clamped(datetime(2023, 12, 15, 8), 1, 15) == datetime(
        2024, 1, 15, 8
    )
    assert add_month_clamped(datetime(2024, 3, 31, 8), -1, 31) == datetime(
        2024, 2, 29, 8
    )


@pytest.mark.parametrize("target", [0, 32, -1])
def test_add_month_clamped_rejects_out_of_range_days(target: int) -> None:
    with pytest.raises(ValueError):
        add_month_clamped(datetime(2024, 1, 1), 1, target)


def test_sunday_based_weekday() -> None:
    assert sunday_based_weekday(datetime(2024, 3, 10)) == 0
    assert sunday_based_weekday(datetime(2024, 3, 11)) == 1
    assert sunday_based_weekday(datetime(2024, 3, 16)) == 6


def test_initial_next_run_daily_before_and_after_run_hour() -> None:
    assert initial_next_run(Frequency.DAILY, datetime(2024, 3, 10, 8, 0)) == datetime(
        2024, 3, 10, 9, 0
    )
    assert initial_next_run(Frequency.DAILY, datetime(2024, 3, 10, 10, 0)) == datetime(
        2024, 3, 11, 9, 0
    )


def test_initial_next_run_equal_to_now_is_due_immediately() -> None:
    now = datetime(2024, 3, 10, 9, 0)

    assert initial_next_run(Frequency.DAILY, now) == now


def test_initial_next_run_weekly_targets_the_requested_weekday() -> None:
    sunday_morning = datetime(2024, 3, 10, 10, 0)

    assert initial_next_run(
        Frequency.WEEKLY, sunday_morning, day_of_week=1
    ) == datetime(2024, 3, 11, 9, 0)
    assert initial_next_run(
        Frequency.WEEKLY, sunday_morning, day_of_week=0
    ) == datetime(2024, 3, 17, 9, 0)


def test_initial_next_run_monthly_clamps_to_short_month() -> None:
    assert initial_next_run(
        Frequency.MONTHLY, datetime(2024, 2, 10, 10, 0), day_of_month=31
    ) == datetime(2024, 2, 29, 9, 0)


def test_initial_next_run_monthly_rolls_to_next_month_when_day_passed() -> None:
    assert initial_next_run(
        Frequency.MONTHLY, datetime(2024, 2, 10, 10, 0), day_of_month=5
    ) == datetime(2024, 3, 5, 9, 0)
    assert initial_next_run(
        Frequency.MONTHLY, datetime(2024, 1, 31, 10, 0), day_of_month=31
    ) == datetime(2024, 2, 29, 9, 0)


def test_initial_next_run_honours_run_hour() -> None:
    assert initial_next_run(
        Frequency.DAILY, datetime(2024, 3, 10, 6, 0), run_hour=7
    ) == datetime(2024, 3, 10, 7, 0)
