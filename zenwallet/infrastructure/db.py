"""Database infrastructure for the state store.

This module creates and reuses the SQLAlchemy engine holding the persisted
application state. SQLite is the default; any SQLAlchemy URL works.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from zenwallet.infrastructure.settings import ZenWalletSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: SQLAlchemy engine with connection health checks enabled.
    """
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )


_state_engine: Optional[Engine] = None


def get_state_engine(settings: ZenWalletSettings | None = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the state database.

    Args:
        settings: Optional settings; read from the environment when omitted.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _state_engine
    if _state_engine is None:
        resolved = settings or ZenWalletSettings.from_env()
        _state_engine = _create_engine(resolved.db_url)
    return _state_engine


def reset_state_engine() -> None:
    """Dispose of the cached engine."""
    global _state_engine
    if _state_engine is not None:
        _state_engine.dispose()
    _state_engine = None


__all__ = ["get_state_engine", "reset_state_engine"]
