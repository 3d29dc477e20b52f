"""Application ports package."""

from .backup import BackupFilePort
from .clock import ClockPort
from .state_store import StateStorePort

__all__ = [
    "BackupFilePort",
    "ClockPort",
    "StateStorePort",
]
