"""Pure calendar arithmetic for schedule occurrences.

All helpers operate on naive local datetimes and preserve the time of day.
"""

import calendar
from datetime import datetime, timedelta

from zenwallet.domain.constants import DEFAULT_RUN_HOUR
from zenwallet.domain.models import Frequency


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def add_days(instant: datetime, n: int) -> datetime:
    """Shift an instant by ``n`` calendar days."""
    return instant + timedelta(days=n)


def add_weeks(instant: datetime, n: int) -> datetime:
    """Shift an instant by ``n`` weeks."""
    return add_days(instant, 7 * n)


def add_month_clamped(
    instant: datetime,
    n: int,
    target_day_of_month: int,
) -> datetime:
    """Advance ``n`` months and land on the target day, clamped.

    The day is set to ``min(target_day_of_month, last day of the resulting
    month)``, so a day-31 target gives Feb 28/29, Mar 31, Apr 30, ...
    independently for every month.

    Args:
        instant: Starting instant; its time of day is kept.
        n: Number of months to advance (may be negative).
        target_day_of_month: Desired day, 1 to 31.

    Returns:
        datetime: The shifted instant.

    Raises:
        ValueError: If the target day is outside 1..31.
    """
    if not 1 <= target_day_of_month <= 31:
        raise ValueError(
            f"day_of_month must be between 1 and 31, got {target_day_of_month}"
        )
    month_index = instant.year * 12 + (instant.month - 1) + n
    year, month = divmod(month_index, 12)
    month += 1
    day = min(target_day_of_month, last_day_of_month(year, month))
    return instant.replace(year=year, month=month, day=day)


def initial_next_run(
    frequency: Frequency,
    now: datetime,
    *,
    day_of_month: int | None = None,
    day_of_week: int | None = None,
    run_hour: int = DEFAULT_RUN_HOUR,
) -> datetime:
    """Return the first due instant of a newly created or re-patterned schedule.

    The candidate is today at ``run_hour``:00 moved onto the day pattern.
    A candidate strictly earlier than ``now`` rolls forward one period; a
    candidate equal to ``now`` is due immediately.

    Args:
        frequency: Schedule frequency.
        now: Creation (or edit) instant.
        day_of_month: Target day for MONTHLY schedules.
        day_of_week: Target weekday for WEEKLY schedules (0=Sunday).
        run_hour: Hour of day at which occurrences are anchored.

    Returns:
        datetime: First occurrence at or after ``now``.
    """
    anchor = now.replace(hour=run_hour, minute=0, second=0, microsecond=0)

    if frequency == Frequency.MONTHLY:
        target = day_of_month if day_of_month is not None else now.day
        candidate = add_month_clamped(anchor, 0, target)
        if candidate < now:
            candidate = add_month_clamped(anchor, 1, target)
        return candidate

    if frequency == Frequency.WEEKLY:
        target = day_of_week if day_of_week is not None else sunday_based_weekday(now)
        diff = (target - sunday_based_weekday(now)) % 7
        candidate = add_days(anchor, diff)
        if candidate < now:
            candidate = add_weeks(candidate, 1)
        return candidate

    candidate = anchor
    if candidate < now:
        candidate = add_days(candidate, 1)
    return candidate


def sunday_based_weekday(instant: datetime) -> int:
    """Return the weekday with Sunday as 0 and Saturday as 6."""
    return (instant.weekday() + 1) % 7


__all__ = [
    "last_day_of_month",
    "add_days",
    "add_weeks",
    "add_month_clamped",
    "initial_next_run",
    "sunday_based_weekday",
]
