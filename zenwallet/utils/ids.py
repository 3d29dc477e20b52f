"""Identifier helpers."""

from uuid import uuid4


def new_id(prefix: str) -> str:
    """Return a fresh identifier such as ``tx-1f0c2a9b3d4e``."""
    return f"{prefix}-{uuid4().hex[:12]}"


__all__ = ["new_id"]
