"""Tests for the JSON document mapping."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from factories import make_schedule, make_state, make_transaction
from zenwallet.domain.models import Frequency, TransactionType, default_app_state
from zenwallet.infrastructure.serialization import (
    SCHEMA_VERSION,
    parse_instant,
    schedule_from_dict,
    state_from_document,
    state_to_document,
    transaction_from_dict,
)


def test_parse_instant_accepts_iso_and_epoch_millis() -> None:
    assert parse_instant("2024-03-01T09:00:00") == datetime(2024, 3, 1, 9, 0)
    epoch = datetime(2024, 3, 1, 9, 0)

    assert parse_instant(epoch.timestamp() * 1000) == epoch


def test_parse_instant_converts_aware_values_to_local_naive() -> None:
    aware = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)

    parsed = parse_instant(aware.isoformat())

    assert parsed.tzinfo is None
    assert parsed == aware.astimezone().replace(tzinfo=None)


@pytest.mark.parametrize("value", [None, "", True, "yesterday", [], 1e30])
def test_parse_instant_rejects_garbage(value) -> None:
    with pytest.raises(ValueError):
        parse_instant(value)


def test_document_uses_camel_case_and_string_amounts() -> None:
    state = make_state(
        transactions=[
            make_transaction(
                amount=Decimal("12.50"),
                type=TransactionType.TRANSFER,
                category_id=None,
                to_wallet_id="w-2",
            )
        ],
        schedules=[make_schedule(frequency=Frequency.MONTHLY, day_of_month=31)],
    )

    document = state_to_document(state)

    assert document["version"] == SCHEMA_VERSION
    assert document["transactions"][0] == {
        "id": "tx-1",
        "walletId": "w-1",
        "amount": "12.50",
        "type": "TRANSFER",
        "date": "2024-01-01T12:00:00",
        "note": "",
        "toWalletId": "w-2",
    }
    schedule = document["schedules"][0]
    assert schedule["nextRun"] == "2024-01-01T09:00:00"
    assert schedule["dayOfMonth"] == 31
    assert "dayOfWeek" not in schedule
    assert document["walletTypes"] == list(state.wallet_types)
    assert document["isDarkMode"] is False


def test_state_survives_document_round_trip() -> None:
    state = make_state(
        transactions=[make_transaction()],
        schedules=[make_schedule(frequency=Frequency.WEEKLY, day_of_week=0)],
    )

    assert state_from_document(state_to_document(state), default_app_state()) == state


def test_records_from_the_browser_format_are_read() -> None:
    """Numeric amounts and epoch-millisecond dates are accepted."""
    transaction = transaction_from_dict(
        {
            "id": "t",
            "walletId": "w-1",
            "amount": 42.5,
            "type": "INCOME",
            "date": datetime(2024, 1, 2, 3, 4).timestamp() * 1000,
            "categoryId": "cat-gift",
        }
    )
    schedule = schedule_from_dict(
        {
            "id": "s",
            "name": "Netflix",
            "amount": 55,
            "type": "EXPENSE",
            "categoryId": "cat-entertainment",
            "walletId": "w-1",
            "frequency": "MONTHLY",
            "nextRun": "2024-02-01T09:00:00",
            "isActive": True,
            "dayOfMonth": "1",
        }
    )

    assert transaction.amount == Decimal("42.5")
    assert transaction.date == datetime(2024, 1, 2, 3, 4)
    assert transaction.note == ""
    assert schedule.day_of_month == 1
    assert schedule.day_of_week is None


def test_partial_document_falls_back_per_field() -> None:
    logger = MagicMock()
    base = default_app_state()

    state = state_from_document(
        {
            "transactions": [
                {"id": "ok", "walletId": "w-1", "amount": "5", "type": "EXPENSE",
                 "date": "2024-01-01T00:00:00", "categoryId": "cat-food"},
                {"id": "bad", "walletId": "w-1", "amount": "lots", "type": "EXPENSE",
                 "date": "2024-01-01T00:00:00"},
                "not an object",
            ],
            "schedules": "oops",
            "walletTypes": ["Cash", 3],
            "isDarkMode": True,
        },
        base,
        logger,
    )

    assert [tx.id for tx in state.transactions] == ["ok"]
    assert state.wallets == base.wallets
    assert state.categories == base.categories
    assert state.schedules == []
    assert state.wallet_types == base.wallet_types
    assert state.preferences.is_dark_mode is True
    assert [raw if isinstance(raw, str) else raw["id"]
            for raw in state.unreadable["transactions"]] == ["bad", "not an object"]
    assert "schedules" not in state.unreadable
    assert logger.warning.call_count == 3


def test_non_object_document_returns_base() -> None:
    base = default_app_state()

    assert state_from_document([1, 2], base) is base


def test_unreadable_records_are_written_back_unchanged() -> None:
    broken_schedule = {
        "id": "s-broken",
        "name": "Rent",
        "amount": "500",
        "type": "EXPENSE",
        "walletId": "w-1",
        "frequency": "MONTHLY",
        "nextRun": "soon",
    }
    document = state_to_document(
        make_state(schedules=[make_schedule(id="s-ok")])
    )
    document["schedules"].append(broken_schedule)

    state = state_from_document(document, default_app_state(), MagicMock())
    rewritten = state_to_document(state)

    assert [schedule.id for schedule in state.schedules] == ["s-ok"]
    assert state.unreadable == {"schedules": [broken_schedule]}
    assert rewritten["schedules"][-1] == broken_schedule
    assert len(rewritten["schedules"]) == 2


def test_missing_collection_keeps_unreadable_records_of_base() -> None:
    base = make_state(unreadable={"transactions": [{"id": "t-old", "date": "?"}]})

    state = state_from_document({"wallets": []}, base)

    assert state.unreadable == {"transactions": [{"id": "t-old", "date": "?"}]}
