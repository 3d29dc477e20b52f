"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from zenwallet.domain.constants import DEFAULT_RUN_HOUR
from zenwallet.infrastructure.logging.logger import get_app_logger
from zenwallet.utils.utils import get_project_root


@dataclass(frozen=True)
class ZenWalletSettings:
    """Runtime settings.

    Attributes:
        db_url: SQLAlchemy URL of the database holding the state document.
        backup_dir: Default directory for exported backups.
        run_hour: Hour of day at which new schedules are anchored.
    """

    db_url: str
    backup_dir: Path
    run_hour: int = DEFAULT_RUN_HOUR

    @classmethod
    def from_env(cls) -> "ZenWalletSettings":
        """Build settings from environment variables and an optional .env.

        Returns:
            ZenWalletSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("ZENWALLET_DB_URL", "").strip() or cls._default_db_url()
        raw_backup_dir = os.getenv("ZENWALLET_BACKUP_DIR", "").strip()
        backup_dir = (
            Path(raw_backup_dir).expanduser().resolve()
            if raw_backup_dir
            else get_project_root() / "backups"
        )
        run_hour = cls._parse_run_hour(os.getenv("ZENWALLET_RUN_HOUR"), logger)
        return cls(db_url=db_url, backup_dir=backup_dir, run_hour=run_hour)

    @staticmethod
    def _default_db_url() -> str:
        """Return the SQLite file used when no URL is configured."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'zenwallet.db'}"

    @staticmethod
    def _parse_run_hour(raw_value: str | None, logger) -> int:
        """Parse the anchor hour, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Hour between 0 and 23.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_RUN_HOUR
        try:
            hour = int(raw_value)
        except ValueError:
            hour = -1
        if not 0 <= hour <= 23:
            logger.warning(
                f"Invalid ZENWALLET_RUN_HOUR '{raw_value}', "
                f"using {DEFAULT_RUN_HOUR}"
            )
            return DEFAULT_RUN_HOUR
        return hour


__all__ = ["ZenWalletSettings"]
