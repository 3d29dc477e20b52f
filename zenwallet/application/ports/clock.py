"""Port for reading the current instant."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing "now" so use cases stay deterministic under test."""

    def now(self) -> datetime:
        """Return the current local instant."""


__all__ = ["ClockPort"]
