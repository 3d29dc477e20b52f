"""Port for loading and saving the whole application state."""

from typing import Protocol

from zenwallet.domain.models import AppState


class StateStorePort(Protocol):
    """Port exposing whole-document persistence of AppState.

    ``load`` never fails: implementations return a default state when
    nothing is stored or the stored data is unusable. ``save`` replaces the
    stored document atomically.
    """

    def load(self) -> AppState:
        """Return the persisted state, or the default state."""

    def save(self, state: AppState) -> None:
        """Persist the entire state."""


__all__ = ["StateStorePort"]
