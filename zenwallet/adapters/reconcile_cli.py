"""CLI adapter running the startup schedule reconciliation.

This is the explicit ``reconcile on startup`` entry point: run it once when
the application boots to catch up every schedule missed while it was
closed.
"""

import sys

from zenwallet.application.use_cases.reconcile_schedules import (
    ReconcileSchedulesUseCase,
)
from zenwallet.infrastructure.container import build_clock, build_state_store
from zenwallet.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Run the reconciliation use case and print a summary.

    Returns:
        int: Process exit status; 1 when some schedules could not advance.
    """
    logger = get_app_logger()
    use_case = ReconcileSchedulesUseCase(
        state_store=build_state_store(),
        clock=build_clock(),
        logger=logger,
    )

    result = use_case.run()

    print(f"Generated {result.generated_count} scheduled transactions.")
    if result.failed_schedule_ids:
        print(
            "Schedules left unadvanced: "
            f"{', '.join(result.failed_schedule_ids)}"
        )
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
