"""SQLAlchemy-backed persistence of the whole application state.

The state is stored as a single JSON document in a one-row ``app_state``
table. Every save replaces that row inside one transaction, so readers
never observe a partial write.
"""

from datetime import datetime
import json

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from zenwallet.application.ports.state_store import StateStorePort
from zenwallet.domain.models import AppState, default_app_state
from zenwallet.infrastructure.logging.logger import get_app_logger
from zenwallet.infrastructure.serialization import (
    state_from_document,
    state_to_document,
)


STATE_ROW_ID = 1

CREATE_APP_STATE_SQL = """
CREATE TABLE IF NOT EXISTS app_state (
    id INTEGER PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

SELECT_STATE_SQL = text("SELECT payload FROM app_state WHERE id = :id")

UPSERT_STATE_SQL = text(
    """
    INSERT INTO app_state (id, payload, updated_at)
    VALUES (:id, :payload, :updated_at)
    ON CONFLICT (id) DO UPDATE
    SET payload = excluded.payload,
        updated_at = excluded.updated_at
    """
)


class SqlAlchemyStateStore(StateStorePort):
    """StateStorePort implementation storing one JSON document per database."""

    def __init__(self, engine: Engine, logger=None) -> None:
        """Initialize the store.

        Args:
            engine: SQLAlchemy engine for the state database.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._engine = engine
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def load(self) -> AppState:
        """Return the stored state, or the default state.

        Never raises: a missing row, a database error, invalid JSON or a
        partially shaped document fall back to defaults field by field.

        Returns:
            AppState: Loaded state.
        """
        defaults = default_app_state()
        try:
            self._ensure_table()
            with self._engine.connect() as conn:
                raw = conn.execute(SELECT_STATE_SQL, {"id": STATE_ROW_ID}).scalar()
        except SQLAlchemyError as exc:
            self._logger.warning(f"Could not read stored state: {exc}")
            return defaults

        if raw is None:
            self._logger.info("No stored state found; starting with defaults")
            return defaults

        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            self._logger.warning(f"Stored state is not valid JSON: {exc}")
            return defaults
        return state_from_document(payload, defaults, self._logger)

    def save(self, state: AppState) -> None:
        """Replace the stored document in a single transaction.

        Args:
            state: State to persist.
        """
        payload = json.dumps(state_to_document(state))
        self._ensure_table()
        with self._engine.begin() as conn:
            conn.execute(
                UPSERT_STATE_SQL,
                {
                    "id": STATE_ROW_ID,
                    "payload": payload,
                    "updated_at": datetime.now().isoformat(),
                },
            )
        self._logger.debug(
            f"Saved state: {len(state.transactions)} transactions, "
            f"{len(state.schedules)} schedules"
        )

    def _ensure_table(self) -> None:
        """Create the app_state table if it does not exist."""
        if self._table_ready:
            return
        with self._engine.begin() as conn:
            conn.exec_driver_sql(CREATE_APP_STATE_SQL)
        self._table_ready = True


__all__ = ["SqlAlchemyStateStore", "CREATE_APP_STATE_SQL", "UPSERT_STATE_SQL"]
