"""Composition root for wiring infrastructure adapters."""

from zenwallet.application.ports.backup import BackupFilePort
from zenwallet.application.ports.clock import ClockPort
from zenwallet.application.ports.state_store import StateStorePort
from zenwallet.application.use_cases.manage_schedules import SaveScheduleUseCase
from zenwallet.infrastructure.backup_file import JsonBackupFile
from zenwallet.infrastructure.clock import SystemClock
from zenwallet.infrastructure.db import get_state_engine
from zenwallet.infrastructure.logging.logger import get_app_logger
from zenwallet.infrastructure.settings import ZenWalletSettings
from zenwallet.infrastructure.state_store import SqlAlchemyStateStore


def build_settings() -> ZenWalletSettings:
    """Return settings read from the environment."""
    return ZenWalletSettings.from_env()


def build_state_store(
    settings: ZenWalletSettings | None = None,
) -> StateStorePort:
    """Return the configured state store."""
    return SqlAlchemyStateStore(
        get_state_engine(settings),
        logger=get_app_logger(),
    )


def build_backup_file() -> BackupFilePort:
    """Return the backup file adapter."""
    return JsonBackupFile(logger=get_app_logger())


def build_clock() -> ClockPort:
    """Return the system clock."""
    return SystemClock()


def build_save_schedule_use_case(
    settings: ZenWalletSettings | None = None,
) -> SaveScheduleUseCase:
    """Return the schedule editor using the configured run hour."""
    settings = settings or build_settings()
    return SaveScheduleUseCase(
        build_state_store(settings),
        clock=build_clock(),
        run_hour=settings.run_hour,
    )


__all__ = [
    "build_settings",
    "build_state_store",
    "build_backup_file",
    "build_clock",
    "build_save_schedule_use_case",
]
