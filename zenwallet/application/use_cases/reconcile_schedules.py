"""Use case that catches every schedule up on application start.

This is the only place where schedules fire without a user action. It is
not a timer: it runs once when the application boots (or when called
explicitly) and fills in every occurrence missed while the app was closed.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime

from zenwallet.application.ports.clock import ClockPort
from zenwallet.application.ports.state_store import StateStorePort
from zenwallet.domain.models import AppState, unreadable_record_ids
from zenwallet.domain.services.schedules import process_due_schedules
from zenwallet.infrastructure.clock import SystemClock
from zenwallet.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReconcileResult:
    """Result of a reconciliation pass.

    Attributes:
        generated_count: Number of transactions added to the log.
        failed_schedule_ids: Schedules left unadvanced because of bad data,
            including stored schedules that could not be read.
        state: State after reconciliation.
    """

    generated_count: int
    state: AppState
    failed_schedule_ids: list[str] = field(default_factory=list)


class ReconcileSchedulesUseCase:
    """Run the schedule catch-up pass and persist the result."""

    def __init__(
        self,
        state_store: StateStorePort,
        clock: ClockPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            state_store: Port loading and saving the application state.
            clock: Optional clock; defaults to the system clock.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._state_store = state_store
        self._clock = clock or SystemClock()
        self._logger = logger or get_app_logger()

    def run(self, now: datetime | None = None) -> ReconcileResult:
        """Advance every due schedule and save once.

        Args:
            now: Reference instant; defaults to the clock.

        Returns:
            ReconcileResult: Summary of generated and failed schedules.
        """
        reference = now or self._clock.now()
        state = self._state_store.load()
        outcome = process_due_schedules(
            state.schedules,
            state.transactions,
            reference,
            logger=self._logger,
        )

        failed = outcome.failed_schedule_ids + unreadable_record_ids(
            state, "schedules"
        )
        if failed:
            self._logger.warning(
                f"Left {len(failed)} schedules unadvanced: {', '.join(failed)}"
            )

        if not outcome.generated and outcome.schedules == state.schedules:
            self._logger.info("No schedules due")
            return ReconcileResult(
                generated_count=0,
                state=state,
                failed_schedule_ids=failed,
            )

        new_state = replace(
            state,
            schedules=outcome.schedules,
            transactions=outcome.transactions,
        )
        self._state_store.save(new_state)
        self._logger.info(
            f"Generated {len(outcome.generated)} scheduled transactions "
            f"as of {reference.isoformat()}"
        )
        return ReconcileResult(
            generated_count=len(outcome.generated),
            state=new_state,
            failed_schedule_ids=failed,
        )


__all__ = ["ReconcileSchedulesUseCase", "ReconcileResult"]
