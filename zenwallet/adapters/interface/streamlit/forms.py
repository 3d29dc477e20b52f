"""Entry forms for wallets, categories, transactions and schedules.

The ``*_draft_from_form`` helpers turn raw widget values into use-case drafts
and hold no Streamlit calls. The ``render_*`` functions draw one form each,
run the matching use case on submit and rerun the script.

Type and frequency pickers sit outside their ``st.form`` so the dependent
fields (category list, day pickers) follow the selection immediately.
"""

from collections.abc import Sequence
from datetime import date, datetime, time
from decimal import Decimal

import streamlit as st

from zenwallet.application.use_cases.manage_schedules import ScheduleDraft
from zenwallet.application.use_cases.manage_transactions import (
    AddTransactionUseCase,
    DeleteTransactionUseCase,
    TransactionDraft,
    UpdateTransactionUseCase,
)
from zenwallet.application.use_cases.manage_wallets import (
    AddCategoryUseCase,
    AddWalletUseCase,
    DeleteWalletUseCase,
    UpdateWalletUseCase,
    WalletDraft,
)
from zenwallet.domain.errors import ZenWalletError
from zenwallet.domain.models import (
    AppState,
    Category,
    Frequency,
    Schedule,
    Transaction,
    TransactionType,
    Wallet,
)
from zenwallet.infrastructure.container import (
    build_clock,
    build_save_schedule_use_case,
    build_state_store,
)
from zenwallet.infrastructure.logging.logger import get_usage_logger
from zenwallet.utils.decimal_utils import format_amount


# Index 0 is Sunday, matching Schedule.day_of_week.
WEEKDAY_LABELS = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]
SCHEDULABLE_TYPES = [TransactionType.EXPENSE, TransactionType.INCOME]
DEFAULT_COLOR = "#3b82f6"


def _names(items: Sequence[Wallet | Category]) -> dict[str, str]:
    return {item.id: item.name for item in items}


def _index_of(options: Sequence, selected) -> int:
    """Return the position of ``selected`` in ``options``, or 0."""
    return list(options).index(selected) if selected in options else 0


def _to_decimal(value: float | int | str) -> Decimal:
    # number_input hands back floats; go through str to keep 12.3 as 12.3.
    return Decimal(str(value))


def categories_for(state: AppState, kind: TransactionType) -> list[Category]:
    """Return the categories usable for a transaction type."""
    return [category for category in state.categories if category.type == kind]


def transaction_choice_labels(
    transactions: Sequence[Transaction],
) -> dict[str, str]:
    """Label transactions for the edit picker."""
    labels: dict[str, str] = {}
    for transaction in transactions:
        label = (
            f"{transaction.date:%d %b %Y %H:%M} · "
            f"{transaction.type.value.title()} · "
            f"{format_amount(transaction.amount)}"
        )
        if transaction.note:
            label += f" · {transaction.note}"
        labels[transaction.id] = label
    return labels


def transaction_draft_from_form(
    *,
    kind: TransactionType,
    wallet_id: str,
    amount: float | int | str,
    note: str,
    category_id: str | None,
    to_wallet_id: str | None,
    day: date,
    at: time,
) -> TransactionDraft:
    """Build a transaction draft; fields foreign to the type are dropped."""
    kind = TransactionType(kind)
    is_transfer = kind == TransactionType.TRANSFER
    return TransactionDraft(
        wallet_id=wallet_id,
        amount=_to_decimal(amount),
        type=kind,
        note=note,
        category_id=None if is_transfer else category_id,
        to_wallet_id=to_wallet_id if is_transfer else None,
        date=datetime.combine(day, at),
    )


def schedule_draft_from_form(
    *,
    name: str,
    amount: float | int | str,
    kind: TransactionType,
    category_id: str | None,
    wallet_id: str,
    frequency: Frequency,
    day_of_month: int | None,
    day_of_week: int | None,
) -> ScheduleDraft:
    """Build a schedule draft keeping only the day field of its frequency."""
    frequency = Frequency(frequency)
    return ScheduleDraft(
        name=name,
        amount=_to_decimal(amount),
        type=TransactionType(kind),
        category_id=category_id or "",
        wallet_id=wallet_id,
        frequency=frequency,
        day_of_month=(
            int(day_of_month)
            if frequency == Frequency.MONTHLY and day_of_month is not None
            else None
        ),
        day_of_week=day_of_week if frequency == Frequency.WEEKLY else None,
    )


def wallet_draft_from_form(
    *,
    name: str,
    balance: float | int | str,
    wallet_type: str,
    new_type: str,
    color: str,
) -> WalletDraft:
    """Build a wallet draft; a typed-in type wins over the picked one."""
    return WalletDraft(
        name=name,
        balance=_to_decimal(balance),
        type=new_type.strip() or wallet_type,
        color=color,
    )


def render_transaction_form(
    state: AppState,
    editing: Transaction | None = None,
) -> None:
    """Draw the add (or edit) transaction form."""
    if not state.wallets:
        st.info("Add a wallet before recording transactions.")
        return
    key = editing.id if editing else "new"
    kinds = list(TransactionType)
    kind = st.selectbox(
        "Type",
        kinds,
        index=_index_of(kinds, editing.type if editing else None),
        format_func=lambda item: item.value.title(),
        key=f"tx-type-{key}",
    )
    wallets = _names(state.wallets)
    wallet_ids = list(wallets)
    when = editing.date if editing else build_clock().now()

    with st.form(f"tx-form-{key}", clear_on_submit=editing is None):
        wallet_id = st.selectbox(
            "Wallet",
            wallet_ids,
            index=_index_of(wallet_ids, editing.wallet_id if editing else None),
            format_func=wallets.get,
        )
        category_id = None
        to_wallet_id = None
        if kind == TransactionType.TRANSFER:
            to_wallet_id = st.selectbox(
                "To wallet",
                wallet_ids,
                index=_index_of(
                    wallet_ids, editing.to_wallet_id if editing else None
                ),
                format_func=wallets.get,
            )
        else:
            categories = _names(categories_for(state, kind))
            category_ids = list(categories)
            category_id = st.selectbox(
                "Category",
                category_ids,
                index=_index_of(
                    category_ids, editing.category_id if editing else None
                ),
                format_func=categories.get,
            )
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            step=1.0,
            format="%.2f",
            value=float(editing.amount) if editing else 0.0,
        )
        note = st.text_input("Note", value=editing.note if editing else "")
        day = st.date_input("Date", value=when.date())
        at = st.time_input("Time", value=when.time().replace(microsecond=0))
        submitted = st.form_submit_button(
            "Save changes" if editing else "Add transaction"
        )

    if not submitted:
        return
    draft = transaction_draft_from_form(
        kind=kind,
        wallet_id=wallet_id,
        amount=amount,
        note=note,
        category_id=category_id,
        to_wallet_id=to_wallet_id,
        day=day,
        at=at,
    )
    state_store = build_state_store()
    try:
        if editing is None:
            saved = AddTransactionUseCase(state_store, clock=build_clock()).execute(
                draft
            )
        else:
            saved = UpdateTransactionUseCase(state_store).execute(editing.id, draft)
    except ZenWalletError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(f"save transaction {saved.id}")
    st.rerun()


def render_transaction_editor(state: AppState) -> None:
    """Pick a transaction to edit or delete."""
    if not state.transactions:
        return
    st.subheader("Edit Transaction")
    labels = transaction_choice_labels(state.transactions)
    transaction_id = st.selectbox(
        "Transaction",
        list(labels),
        format_func=labels.get,
        key="tx-edit-pick",
    )
    editing = next(
        transaction
        for transaction in state.transactions
        if transaction.id == transaction_id
    )
    render_transaction_form(state, editing=editing)
    if st.button("Delete transaction", key=f"tx-delete-{transaction_id}"):
        DeleteTransactionUseCase(build_state_store()).execute(transaction_id)
        get_usage_logger().info(f"delete transaction {transaction_id}")
        st.rerun()


def render_schedule_form(
    state: AppState,
    editing: Schedule | None = None,
) -> None:
    """Draw the create (or edit) schedule form."""
    if not state.wallets:
        st.info("Add a wallet before scheduling transactions.")
        return
    key = editing.id if editing else "new"
    kind = st.selectbox(
        "Type",
        SCHEDULABLE_TYPES,
        index=_index_of(SCHEDULABLE_TYPES, editing.type if editing else None),
        format_func=lambda item: item.value.title(),
        key=f"schedule-type-{key}",
    )
    frequencies = list(Frequency)
    frequency = st.selectbox(
        "Repeats",
        frequencies,
        index=_index_of(frequencies, editing.frequency if editing else None),
        format_func=lambda item: item.value.title(),
        key=f"schedule-frequency-{key}",
    )
    wallets = _names(state.wallets)
    wallet_ids = list(wallets)
    categories = _names(categories_for(state, kind))
    category_ids = list(categories)

    with st.form(f"schedule-form-{key}", clear_on_submit=editing is None):
        name = st.text_input("Name", value=editing.name if editing else "")
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            step=1.0,
            format="%.2f",
            value=float(editing.amount) if editing else 0.0,
        )
        wallet_id = st.selectbox(
            "Wallet",
            wallet_ids,
            index=_index_of(wallet_ids, editing.wallet_id if editing else None),
            format_func=wallets.get,
        )
        category_id = st.selectbox(
            "Category",
            category_ids,
            index=_index_of(category_ids, editing.category_id if editing else None),
            format_func=categories.get,
        )
        day_of_month = None
        day_of_week = None
        if frequency == Frequency.MONTHLY:
            day_of_month = st.number_input(
                "Day of month",
                min_value=1,
                max_value=31,
                step=1,
                value=(editing.day_of_month if editing else None) or 1,
            )
        elif frequency == Frequency.WEEKLY:
            day_of_week = st.selectbox(
                "Day of week",
                list(range(len(WEEKDAY_LABELS))),
                index=(editing.day_of_week if editing else None) or 0,
                format_func=WEEKDAY_LABELS.__getitem__,
            )
        submitted = st.form_submit_button(
            "Save changes" if editing else "Create schedule"
        )

    if not submitted:
        return
    draft = schedule_draft_from_form(
        name=name,
        amount=amount,
        kind=kind,
        category_id=category_id,
        wallet_id=wallet_id,
        frequency=frequency,
        day_of_month=day_of_month,
        day_of_week=day_of_week,
    )
    try:
        saved = build_save_schedule_use_case().execute(
            draft, schedule_id=editing.id if editing else None
        )
    except ZenWalletError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(f"save schedule {saved.id}")
    st.rerun()


def render_wallet_form(state: AppState, editing: Wallet | None = None) -> None:
    """Draw the add (or edit) wallet form."""
    key = editing.id if editing else "new"
    with st.form(f"wallet-form-{key}", clear_on_submit=editing is None):
        name = st.text_input("Name", value=editing.name if editing else "")
        balance = st.number_input(
            "Starting balance",
            step=1.0,
            format="%.2f",
            value=float(editing.balance) if editing else 0.0,
        )
        wallet_type = st.selectbox(
            "Type",
            state.wallet_types,
            index=_index_of(state.wallet_types, editing.type if editing else None),
        )
        new_type = st.text_input("Or a new type", value="")
        color = st.color_picker(
            "Color", value=editing.color if editing else DEFAULT_COLOR
        )
        submitted = st.form_submit_button(
            "Save changes" if editing else "Add wallet"
        )

    if not submitted:
        return
    draft = wallet_draft_from_form(
        name=name,
        balance=balance,
        wallet_type=wallet_type or "",
        new_type=new_type,
        color=color,
    )
    if not draft.name.strip() or not draft.type.strip():
        st.error("A wallet needs a name and a type.")
        return
    state_store = build_state_store()
    if editing is None:
        saved = AddWalletUseCase(state_store).execute(draft)
    else:
        saved = UpdateWalletUseCase(state_store).execute(editing.id, draft)
    get_usage_logger().info(f"save wallet {saved.id}")
    st.rerun()


def render_category_form() -> None:
    """Draw the add category form."""
    with st.form("category-form-new", clear_on_submit=True):
        name = st.text_input("Name", value="")
        category_type = st.selectbox(
            "Type",
            SCHEDULABLE_TYPES,
            format_func=lambda item: item.value.title(),
        )
        icon_name = st.text_input("Icon", value="Tag")
        color = st.color_picker("Color", value=DEFAULT_COLOR)
        submitted = st.form_submit_button("Add category")

    if not submitted:
        return
    if not name.strip():
        st.error("A category needs a name.")
        return
    try:
        category = AddCategoryUseCase(build_state_store()).execute(
            name, icon_name, color, category_type
        )
    except ZenWalletError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(f"add category {category.id}")
    st.rerun()


def render_wallet_delete(wallet: Wallet) -> None:
    """Draw the delete button of a wallet."""
    if st.button("Delete wallet", key=f"wallet-delete-{wallet.id}"):
        DeleteWalletUseCase(build_state_store()).execute(wallet.id)
        get_usage_logger().info(f"delete wallet {wallet.id}")
        st.rerun()


__all__ = [
    "WEEKDAY_LABELS",
    "categories_for",
    "transaction_choice_labels",
    "transaction_draft_from_form",
    "schedule_draft_from_form",
    "wallet_draft_from_form",
    "render_transaction_form",
    "render_transaction_editor",
    "render_schedule_form",
    "render_wallet_form",
    "render_category_form",
    "render_wallet_delete",
]
