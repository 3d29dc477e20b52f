"""Domain exceptions."""


class ZenWalletError(Exception):
    """Base class for errors raised by ZenWallet."""


class InvalidBackupFileError(ZenWalletError):
    """Raised when a backup file does not look like a ZenWallet export."""


class ScheduleAdvanceError(ZenWalletError):
    """Raised when a schedule cannot be advanced from its stored fields."""

    def __init__(self, schedule_id: str, reason: str) -> None:
        super().__init__(f"Schedule {schedule_id} cannot be advanced: {reason}")
        self.schedule_id = schedule_id
        self.reason = reason


class InvalidTransactionError(ZenWalletError):
    """Raised when a transaction violates the shape rules of its type."""


class InvalidScheduleError(ZenWalletError):
    """Raised when a schedule being saved has unusable fields."""


class EntityNotFoundError(ZenWalletError):
    """Raised when a use case targets an id missing from the state."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"Unknown {kind}: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


__all__ = [
    "ZenWalletError",
    "InvalidBackupFileError",
    "ScheduleAdvanceError",
    "InvalidTransactionError",
    "InvalidScheduleError",
    "EntityNotFoundError",
]
