"""JSON backup files for the export/import round-trip."""

from datetime import date
import json
from pathlib import Path

from zenwallet.application.ports.backup import BackupFilePort
from zenwallet.domain.errors import InvalidBackupFileError
from zenwallet.domain.models import AppState
from zenwallet.infrastructure.logging.logger import get_app_logger
from zenwallet.infrastructure.serialization import (
    state_from_document,
    state_to_document,
)


class JsonBackupFile(BackupFilePort):
    """BackupFilePort implementation writing pretty-printed JSON files."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    @staticmethod
    def backup_name(day: date) -> str:
        """Return the file name used for a backup taken on ``day``."""
        return f"zenwallet_backup_{day.isoformat()}.json"

    def export_data(self, state: AppState, directory: Path) -> Path:
        """Write ``state`` to ``directory`` and return the file path.

        Args:
            state: State to export.
            directory: Target directory, created if needed.

        Returns:
            Path: Written backup file.
        """
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.backup_name(date.today())
        path.write_text(
            json.dumps(state_to_document(state), indent=2),
            encoding="utf-8",
        )
        return path

    def import_data(self, path: Path, current: AppState) -> AppState:
        """Read a backup and merge it over ``current``.

        Every top-level collection present in the file replaces the current
        one; missing collections keep their current values.

        Args:
            path: Backup file to read.
            current: State the backup is merged over.

        Returns:
            AppState: Merged state.

        Raises:
            InvalidBackupFileError: If the file cannot be read, is empty, is
                not JSON, or has neither wallets nor transactions.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidBackupFileError(
                f"Could not read the file {path}: {exc}"
            ) from exc

        if not content.strip():
            raise InvalidBackupFileError("The selected file is empty.")

        try:
            payload = json.loads(content)
        except ValueError as exc:
            raise InvalidBackupFileError(
                f"Failed to parse backup file: {exc}"
            ) from exc

        if not isinstance(payload, dict) or (
            "wallets" not in payload and "transactions" not in payload
        ):
            raise InvalidBackupFileError(
                "This file does not appear to be a ZenWallet backup."
            )

        return state_from_document(payload, current, self._logger)


__all__ = ["JsonBackupFile"]
