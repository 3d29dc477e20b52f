"""Use cases for the backup export/import round-trip."""

from pathlib import Path

from zenwallet.application.ports.backup import BackupFilePort
from zenwallet.application.ports.state_store import StateStorePort
from zenwallet.domain.models import AppState
from zenwallet.infrastructure.logging.logger import get_app_logger


class ExportBackupUseCase:
    """Write the current state to a backup file."""

    def __init__(
        self,
        state_store: StateStorePort,
        backup_file: BackupFilePort,
        logger=None,
    ) -> None:
        self._state_store = state_store
        self._backup_file = backup_file
        self._logger = logger or get_app_logger()

    def execute(self, directory: Path) -> Path:
        state = self._state_store.load()
        path = self._backup_file.export_data(state, directory)
        self._logger.info(
            f"Exported {len(state.transactions)} transactions to {path}"
        )
        return path


class ImportBackupUseCase:
    """Merge a backup file into the stored state."""

    def __init__(
        self,
        state_store: StateStorePort,
        backup_file: BackupFilePort,
        logger=None,
    ) -> None:
        self._state_store = state_store
        self._backup_file = backup_file
        self._logger = logger or get_app_logger()

    def execute(self, path: Path) -> AppState:
        """Import a backup.

        Collections missing from the file keep their current values. The
        store is only written when the file was accepted.

        Raises:
            InvalidBackupFileError: If the file is not a ZenWallet backup.
        """
        current = self._state_store.load()
        merged = self._backup_file.import_data(path, current)
        self._state_store.save(merged)
        self._logger.info(
            f"Imported backup {path}: {len(merged.wallets)} wallets, "
            f"{len(merged.transactions)} transactions"
        )
        return merged


__all__ = ["ExportBackupUseCase", "ImportBackupUseCase"]
