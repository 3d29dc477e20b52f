"""Balance derivation from baselines and the transaction log.

A wallet's current balance is its stored baseline plus the effect of every
transaction touching it. Effects are summed, so the result does not depend
on the order of the log.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from zenwallet.domain.models import Transaction, TransactionType, Wallet


def transaction_effects(transaction: Transaction) -> dict[str, Decimal]:
    """Return the signed balance change per wallet id.

    Args:
        transaction: Transaction to evaluate.

    Returns:
        dict[str, Decimal]: Wallet id to signed amount.
    """
    amount = transaction.amount
    if transaction.type == TransactionType.INCOME:
        return {transaction.wallet_id: amount}
    if transaction.type == TransactionType.EXPENSE:
        return {transaction.wallet_id: -amount}

    effects = {transaction.wallet_id: -amount}
    if transaction.to_wallet_id:
        effects[transaction.to_wallet_id] = (
            effects.get(transaction.to_wallet_id, Decimal("0")) + amount
        )
    return effects


def apply_transaction_effect(
    balances: Mapping[str, Decimal],
    transaction: Transaction,
) -> dict[str, Decimal]:
    """Return a copy of ``balances`` with the transaction applied."""
    return _shift(balances, transaction, Decimal("1"))


def reverse_transaction_effect(
    balances: Mapping[str, Decimal],
    transaction: Transaction,
) -> dict[str, Decimal]:
    """Return a copy of ``balances`` with the transaction undone."""
    return _shift(balances, transaction, Decimal("-1"))


def replace_transaction_effect(
    balances: Mapping[str, Decimal],
    old: Transaction,
    new: Transaction,
) -> dict[str, Decimal]:
    """Swap one transaction for its edited version.

    The previous effect is reversed from the pre-edit values before the new
    effect is applied.
    """
    return apply_transaction_effect(
        reverse_transaction_effect(balances, old),
        new,
    )


def derive_balances(
    wallets: Iterable[Wallet],
    transactions: Iterable[Transaction],
) -> dict[str, Decimal]:
    """Compute current balances for every known wallet.

    Transactions pointing at wallets that no longer exist contribute nothing
    to the remaining wallets' balances.

    Args:
        wallets: Wallets with their baselines.
        transactions: Full transaction log.

    Returns:
        dict[str, Decimal]: Wallet id to derived balance.
    """
    balances = {wallet.id: wallet.balance for wallet in wallets}
    for transaction in transactions:
        for wallet_id, delta in transaction_effects(transaction).items():
            if wallet_id in balances:
                balances[wallet_id] += delta
    return balances


def derive_balance(
    wallet: Wallet,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Compute the current balance of a single wallet."""
    return derive_balances([wallet], transactions)[wallet.id]


def total_balance(
    wallets: Iterable[Wallet],
    transactions: Iterable[Transaction],
) -> Decimal:
    """Sum the derived balances of all wallets."""
    return sum(derive_balances(wallets, transactions).values(), Decimal("0"))


def _shift(
    balances: Mapping[str, Decimal],
    transaction: Transaction,
    sign: Decimal,
) -> dict[str, Decimal]:
    shifted = dict(balances)
    for wallet_id, delta in transaction_effects(transaction).items():
        shifted[wallet_id] = shifted.get(wallet_id, Decimal("0")) + sign * delta
    return shifted


__all__ = [
    "transaction_effects",
    "apply_transaction_effect",
    "reverse_transaction_effect",
    "replace_transaction_effect",
    "derive_balances",
    "derive_balance",
    "total_balance",
]
