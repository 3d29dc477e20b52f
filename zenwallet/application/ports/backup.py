"""Port for exporting and importing backup files."""

from pathlib import Path
from typing import Protocol

from zenwallet.domain.models import AppState


class BackupFilePort(Protocol):
    """Port exposing the backup round-trip."""

    def export_data(self, state: AppState, directory: Path) -> Path:
        """Write a backup of ``state`` and return the file path."""

    def import_data(self, path: Path, current: AppState) -> AppState:
        """Read a backup and merge it over ``current``.

        Raises:
            InvalidBackupFileError: If the file is not a ZenWallet backup.
        """


__all__ = ["BackupFilePort"]
