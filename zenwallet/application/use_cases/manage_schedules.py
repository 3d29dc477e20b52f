"""Use cases for creating, editing and operating recurring schedules."""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from zenwallet.application.ports.clock import ClockPort
from zenwallet.application.ports.state_store import StateStorePort
from zenwallet.application.use_cases.lookup import (
    find_by_id,
    remove_by_id,
    replace_by_id,
)
from zenwallet.domain.constants import DEFAULT_RUN_HOUR
from zenwallet.domain.errors import InvalidScheduleError, ScheduleAdvanceError
from zenwallet.domain.models import Frequency, Schedule, Transaction, TransactionType
from zenwallet.domain.services.dates import initial_next_run
from zenwallet.domain.services.schedules import run_schedule_now, validate_schedule
from zenwallet.infrastructure.clock import SystemClock
from zenwallet.infrastructure.logging.logger import get_app_logger
from zenwallet.utils.decimal_utils import coerce_decimal
from zenwallet.utils.ids import new_id


@dataclass(frozen=True)
class ScheduleDraft:
    """User-editable fields of a schedule."""

    name: str
    amount: Decimal
    type: TransactionType
    category_id: str
    wallet_id: str
    frequency: Frequency
    day_of_month: int | None = None
    day_of_week: int | None = None


class SaveScheduleUseCase:
    """Create a schedule or edit an existing one."""

    def __init__(
        self,
        state_store: StateStorePort,
        clock: ClockPort | None = None,
        logger=None,
        run_hour: int = DEFAULT_RUN_HOUR,
    ) -> None:
        """Initialize the use case.

        Args:
            state_store: Port loading and saving the application state.
            clock: Optional clock; defaults to the system clock.
            logger: Optional logger compatible with logging.Logger-like API.
            run_hour: Hour of day at which new occurrences are anchored.
        """
        self._state_store = state_store
        self._clock = clock or SystemClock()
        self._logger = logger or get_app_logger()
        self._run_hour = run_hour

    def execute(
        self,
        draft: ScheduleDraft,
        schedule_id: str | None = None,
    ) -> Schedule:
        """Persist the draft as a new or updated schedule.

        A new schedule starts at the first occurrence of its day pattern at
        or after now. An edit keeps ``next_run`` unless the frequency or the
        day pattern changed, in which case it is recomputed from now.
        ``is_active`` is preserved on edit.

        Args:
            draft: Schedule fields entered by the user.
            schedule_id: Id of the schedule to edit, or None to create one.

        Returns:
            Schedule: The stored schedule.

        Raises:
            InvalidScheduleError: If the draft fields are unusable.
            EntityNotFoundError: If ``schedule_id`` is unknown.
        """
        now = self._clock.now()
        state = self._state_store.load()
        day_of_month = (
            draft.day_of_month if draft.frequency == Frequency.MONTHLY else None
        )
        day_of_week = (
            draft.day_of_week if draft.frequency == Frequency.WEEKLY else None
        )

        existing = None
        if schedule_id is not None:
            existing = find_by_id(state.schedules, schedule_id, "schedule")

        candidate = Schedule(
            id=schedule_id or new_id("sched"),
            name=draft.name.strip(),
            amount=coerce_decimal(draft.amount),
            type=TransactionType(draft.type),
            category_id=draft.category_id,
            wallet_id=draft.wallet_id,
            frequency=Frequency(draft.frequency),
            next_run=existing.next_run if existing else now,
            is_active=existing.is_active if existing else True,
            day_of_month=day_of_month,
            day_of_week=day_of_week,
        )
        if not candidate.name:
            raise InvalidScheduleError("A schedule needs a name")
        try:
            validate_schedule(candidate)
        except ScheduleAdvanceError as exc:
            raise InvalidScheduleError(exc.reason) from exc

        pattern_changed = existing is None or (
            existing.frequency != candidate.frequency
            or existing.day_of_month != candidate.day_of_month
            or existing.day_of_week != candidate.day_of_week
        )
        if pattern_changed:
            candidate = replace(
                candidate,
                next_run=initial_next_run(
                    candidate.frequency,
                    now,
                    day_of_month=candidate.day_of_month,
                    day_of_week=candidate.day_of_week,
                    run_hour=self._run_hour,
                ),
            )

        if existing is None:
            schedules = state.schedules + [candidate]
            self._logger.info(
                f"Created schedule {candidate.id}, next run {candidate.next_run}"
            )
        else:
            schedules = replace_by_id(state.schedules, candidate)
            self._logger.info(
                f"Updated schedule {candidate.id}, next run {candidate.next_run}"
            )
        self._state_store.save(replace(state, schedules=schedules))
        return candidate


class ToggleScheduleUseCase:
    """Flip a schedule between active and inactive."""

    def __init__(self, state_store: StateStorePort, logger=None) -> None:
        self._state_store = state_store
        self._logger = logger or get_app_logger()

    def execute(self, schedule_id: str) -> Schedule:
        state = self._state_store.load()
        schedule = find_by_id(state.schedules, schedule_id, "schedule")
        toggled = replace(schedule, is_active=not schedule.is_active)
        self._state_store.save(
            replace(state, schedules=replace_by_id(state.schedules, toggled))
        )
        self._logger.info(
            f"Schedule {schedule_id} is now "
            f"{'active' if toggled.is_active else 'paused'}"
        )
        return toggled


class DeleteScheduleUseCase:
    """Remove a schedule; transactions it generated stay in the log."""

    def __init__(self, state_store: StateStorePort, logger=None) -> None:
        self._state_store = state_store
        self._logger = logger or get_app_logger()

    def execute(self, schedule_id: str) -> None:
        state = self._state_store.load()
        find_by_id(state.schedules, schedule_id, "schedule")
        self._state_store.save(
            replace(state, schedules=remove_by_id(state.schedules, schedule_id))
        )
        self._logger.info(f"Deleted schedule {schedule_id}")


class RunScheduleNowUseCase:
    """Fire one occurrence of a schedule immediately."""

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
        schedule_id: str,
        now: datetime | None = None,
    ) -> Transaction | None:
        """Record one transaction dated now and push next_run one period.

        Args:
            schedule_id: Schedule to fire.
            now: Reference instant; defaults to the clock.

        Returns:
            Transaction | None: The generated transaction, or None when the
            schedule is inactive (nothing is saved in that case).

        Raises:
            EntityNotFoundError: If ``schedule_id`` is unknown.
            ScheduleAdvanceError: If the schedule data is unusable.
        """
        reference = now or self._clock.now()
        state = self._state_store.load()
        schedule = find_by_id(state.schedules, schedule_id, "schedule")
        if not schedule.is_active:
            self._logger.info(f"Ignored run-now for paused schedule {schedule_id}")
            return None

        advance = run_schedule_now(schedule, reference)
        self._state_store.save(
            replace(
                state,
                schedules=replace_by_id(state.schedules, advance.schedule),
                transactions=advance.generated + state.transactions,
            )
        )
        self._logger.info(
            f"Ran schedule {schedule_id} now, next run {advance.schedule.next_run}"
        )
        return advance.generated[0]


__all__ = [
    "ScheduleDraft",
    "SaveScheduleUseCase",
    "ToggleScheduleUseCase",
    "DeleteScheduleUseCase",
    "RunScheduleNowUseCase",
]
