"""JSON document mapping for AppState.

The document keeps the camelCase keys used by ZenWallet backups
(``walletId``, ``nextRun``, ``isDarkMode``...). Reading is tolerant: a
top-level collection that is missing or not a list falls back to the base
state. Individual records that cannot be read are logged and kept raw in
``AppState.unreadable``; writing the document puts them back in place, so
a load and save cycle never drops stored records.
"""

from datetime import datetime
from typing import Any, Callable, TypeVar

from zenwallet.domain.models import (
    AppState,
    Category,
    DisplayPreferences,
    Frequency,
    Schedule,
    Transaction,
    TransactionType,
    Wallet,
)
from zenwallet.utils.decimal_utils import coerce_decimal


T = TypeVar("T")

SCHEMA_VERSION = 1


def parse_instant(value: Any) -> datetime:
    """Read an instant stored as ISO-8601 text or epoch milliseconds.

    Offset-aware values are converted to naive local time.

    Raises:
        ValueError: If the value is neither.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not an instant: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"Timestamp out of range: {value!r}") from exc
    if isinstance(value, str) and value.strip():
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    raise ValueError(f"Not an instant: {value!r}")


def format_instant(value: datetime) -> str:
    return value.isoformat()


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def wallet_to_dict(wallet: Wallet) -> dict[str, Any]:
    return {
        "id": wallet.id,
        "name": wallet.name,
        "balance": str(wallet.balance),
        "type": wallet.type,
        "color": wallet.color,
    }


def wallet_from_dict(data: dict[str, Any]) -> Wallet:
    return Wallet(
        id=str(data["id"]),
        name=str(data.get("name", "")),
        balance=coerce_decimal(data.get("balance", 0)),
        type=str(data.get("type", "")),
        color=str(data.get("color", "")),
    )


def category_to_dict(category: Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "iconName": category.icon_name,
        "color": category.color,
        "type": category.type.value,
    }


def category_from_dict(data: dict[str, Any]) -> Category:
    return Category(
        id=str(data["id"]),
        name=str(data.get("name", "")),
        icon_name=str(data.get("iconName", "")),
        color=str(data.get("color", "")),
        type=TransactionType(data["type"]),
    )


def transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": transaction.id,
        "walletId": transaction.wallet_id,
        "amount": str(transaction.amount),
        "type": transaction.type.value,
        "date": format_instant(transaction.date),
        "note": transaction.note,
    }
    if transaction.to_wallet_id is not None:
        payload["toWalletId"] = transaction.to_wallet_id
    if transaction.category_id is not None:
        payload["categoryId"] = transaction.category_id
    return payload


def transaction_from_dict(data: dict[str, Any]) -> Transaction:
    return Transaction(
        id=str(data["id"]),
        wallet_id=str(data["walletId"]),
        amount=coerce_decimal(data["amount"]),
        type=TransactionType(data["type"]),
        date=parse_instant(data["date"]),
        note=str(data.get("note") or ""),
        category_id=_optional_str(data.get("categoryId")),
        to_wallet_id=_optional_str(data.get("toWalletId")),
    )


def schedule_to_dict(schedule: Schedule) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": schedule.id,
        "name": schedule.name,
        "amount": str(schedule.amount),
        "type": schedule.type.value,
        "categoryId": schedule.category_id,
        "walletId": schedule.wallet_id,
        "frequency": schedule.frequency.value,
        "nextRun": format_instant(schedule.next_run),
        "isActive": schedule.is_active,
    }
    if schedule.day_of_month is not None:
        payload["dayOfMonth"] = schedule.day_of_month
    if schedule.day_of_week is not None:
        payload["dayOfWeek"] = schedule.day_of_week
    return payload


def schedule_from_dict(data: dict[str, Any]) -> Schedule:
    return Schedule(
        id=str(data["id"]),
        name=str(data.get("name", "")),
        amount=coerce_decimal(data["amount"]),
        type=TransactionType(data["type"]),
        category_id=str(data.get("categoryId") or ""),
        wallet_id=str(data["walletId"]),
        frequency=Frequency(data["frequency"]),
        next_run=parse_instant(data["nextRun"]),
        is_active=bool(data.get("isActive", True)),
        day_of_month=_optional_int(data.get("dayOfMonth")),
        day_of_week=_optional_int(data.get("dayOfWeek")),
    )


def state_to_document(state: AppState) -> dict[str, Any]:
    """Map the state to a JSON-compatible document.

    Unreadable records are appended to their collection unchanged.
    """
    kept = state.unreadable
    return {
        "version": SCHEMA_VERSION,
        "wallets": [wallet_to_dict(wallet) for wallet in state.wallets]
        + list(kept.get("wallets", [])),
        "transactions": [
            transaction_to_dict(transaction) for transaction in state.transactions
        ]
        + list(kept.get("transactions", [])),
        "categories": [category_to_dict(category) for category in state.categories]
        + list(kept.get("categories", [])),
        "schedules": [schedule_to_dict(schedule) for schedule in state.schedules]
        + list(kept.get("schedules", [])),
        "walletTypes": list(state.wallet_types),
        "isDarkMode": state.preferences.is_dark_mode,
    }


def state_from_document(
    payload: Any,
    base: AppState,
    logger=None,
) -> AppState:
    """Build a state from a document, field by field over ``base``.

    Args:
        payload: Parsed JSON document.
        base: State supplying every field the document lacks.
        logger: Optional logger for unreadable records.

    Returns:
        AppState: State read from the document. Records that could not be
        read are kept in ``unreadable`` under their collection name.
    """
    if not isinstance(payload, dict):
        if logger is not None:
            logger.warning("Stored state is not a JSON object; using defaults")
        return base

    wallet_types = payload.get("walletTypes")
    if not (
        isinstance(wallet_types, list)
        and all(isinstance(item, str) for item in wallet_types)
    ):
        wallet_types = list(base.wallet_types)

    dark_mode = payload.get("isDarkMode")
    preferences = (
        DisplayPreferences(is_dark_mode=dark_mode)
        if isinstance(dark_mode, bool)
        else base.preferences
    )

    unreadable: dict[str, list[Any]] = {}
    collections: dict[str, list[Any]] = {}
    for key, parse, fallback in (
        ("wallets", wallet_from_dict, base.wallets),
        ("transactions", transaction_from_dict, base.transactions),
        ("categories", category_from_dict, base.categories),
        ("schedules", schedule_from_dict, base.schedules),
    ):
        items, rejected = _read_collection(payload, key, parse, logger)
        if items is None:
            collections[key] = list(fallback)
            rejected = base.unreadable.get(key, [])
        else:
            collections[key] = items
        if rejected:
            unreadable[key] = list(rejected)

    return AppState(
        wallets=collections["wallets"],
        transactions=collections["transactions"],
        categories=collections["categories"],
        schedules=collections["schedules"],
        wallet_types=list(wallet_types),
        preferences=preferences,
        unreadable=unreadable,
    )


def _read_collection(
    payload: dict[str, Any],
    key: str,
    parse: Callable[[dict[str, Any]], T],
    logger,
) -> tuple[list[T] | None, list[Any]]:
    """Parse one top-level collection.

    Returns:
        tuple: Parsed records (None when the collection is missing or not a
        list) and the raw records that could not be parsed.
    """
    raw_items = payload.get(key)
    if not isinstance(raw_items, list):
        if raw_items is not None and logger is not None:
            logger.warning(f"Ignoring '{key}': expected a list")
        return None, []

    items: list[T] = []
    rejected: list[Any] = []
    for raw in raw_items:
        try:
            if not isinstance(raw, dict):
                raise TypeError(f"expected an object, got {type(raw).__name__}")
            items.append(parse(raw))
        except (KeyError, TypeError, ValueError) as exc:
            rejected.append(raw)
            if logger is not None:
                logger.warning(f"Keeping unreadable entry in '{key}' as is: {exc}")
    return items, rejected


__all__ = [
    "SCHEMA_VERSION",
    "parse_instant",
    "format_instant",
    "state_to_document",
    "state_from_document",
    "wallet_from_dict",
    "transaction_from_dict",
    "schedule_from_dict",
    "category_from_dict",
]
