"""Lookup helpers shared by the mutating use cases."""

from collections.abc import Iterable
from typing import TypeVar

from zenwallet.domain.errors import EntityNotFoundError


T = TypeVar("T")


def find_by_id(items: Iterable[T], entity_id: str, kind: str) -> T:
    """Return the item with the given id.

    Raises:
        EntityNotFoundError: If no item has that id.
    """
    for item in items:
        if item.id == entity_id:
            return item
    raise EntityNotFoundError(kind, entity_id)


def replace_by_id(items: Iterable[T], updated: T) -> list[T]:
    """Return a copy of ``items`` with the matching entry swapped in place."""
    return [updated if item.id == updated.id else item for item in items]


def remove_by_id(items: Iterable[T], entity_id: str) -> list[T]:
    return [item for item in items if item.id != entity_id]


__all__ = ["find_by_id", "replace_by_id", "remove_by_id"]
