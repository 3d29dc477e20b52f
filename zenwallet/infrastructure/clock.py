"""System clock adapter."""

from datetime import datetime

from zenwallet.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """ClockPort implementation returning local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


__all__ = ["SystemClock"]
