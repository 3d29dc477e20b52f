"""Domain validation helpers."""

from collections.abc import Iterable

from zenwallet.domain.errors import InvalidTransactionError
from zenwallet.domain.models import Category, Transaction, TransactionType


def validate_transaction(
    transaction: Transaction,
    categories: Iterable[Category] = (),
) -> None:
    """Check the shape rules of a transaction.

    Args:
        transaction: Transaction about to be stored.
        categories: Known categories; a referenced category that still
            exists must have the same type as the transaction.

    Raises:
        InvalidTransactionError: If a rule is violated.
    """
    if transaction.amount <= 0:
        raise InvalidTransactionError(
            f"Amount must be positive, got {transaction.amount}"
        )
    if not transaction.wallet_id:
        raise InvalidTransactionError("A source wallet is required")

    if transaction.type == TransactionType.TRANSFER:
        if not transaction.to_wallet_id:
            raise InvalidTransactionError("Transfers need a destination wallet")
        if transaction.category_id:
            raise InvalidTransactionError("Transfers cannot have a category")
        return

    if transaction.to_wallet_id:
        raise InvalidTransactionError(
            f"{transaction.type.value} transactions cannot have a destination wallet"
        )
    if not transaction.category_id:
        raise InvalidTransactionError(
            f"{transaction.type.value} transactions need a category"
        )
    for category in categories:
        if category.id == transaction.category_id and category.type != transaction.type:
            raise InvalidTransactionError(
                f"Category {category.name} is {category.type.value}, "
                f"not {transaction.type.value}"
            )


def validate_category_type(category: Category) -> None:
    """Reject transfer categories.

    Raises:
        InvalidTransactionError: If the category type is TRANSFER.
    """
    if category.type == TransactionType.TRANSFER:
        raise InvalidTransactionError("Categories are either INCOME or EXPENSE")


__all__ = ["validate_transaction", "validate_category_type"]
