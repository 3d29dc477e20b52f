"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from zenwallet.adapters.interface.streamlit.forms import (
    render_category_form,
    render_schedule_form,
    render_transaction_editor,
    render_transaction_form,
    render_wallet_delete,
    render_wallet_form,
)
from zenwallet.application.use_cases.get_dashboard import (
    GetDashboardUseCase,
    GetSpendingAnalyticsUseCase,
    SearchTransactionsUseCase,
)
from zenwallet.application.use_cases.manage_schedules import (
    DeleteScheduleUseCase,
    RunScheduleNowUseCase,
    ToggleScheduleUseCase,
)
from zenwallet.application.use_cases.reconcile_schedules import (
    ReconcileResult,
    ReconcileSchedulesUseCase,
)
from zenwallet.domain.models import (
    CategorySpending,
    DailyTrendPoint,
    TransactionLine,
    TransactionType,
)
from zenwallet.domain.services.reporting import (
    resolve_category_name,
    resolve_wallet_name,
)
from zenwallet.infrastructure.container import build_clock, build_state_store
from zenwallet.infrastructure.logging.logger import get_usage_logger
from zenwallet.utils.decimal_utils import format_amount


CURRENCY_SYMBOL = "RM"


@st.cache_resource(show_spinner=False)
def _reconcile_on_startup() -> ReconcileResult:
    """Run the schedule catch-up once per server process."""
    use_case = ReconcileSchedulesUseCase(
        state_store=build_state_store(),
        clock=build_clock(),
    )
    return use_case.run()


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"{CURRENCY_SYMBOL} {value:,.2f}"


def _format_signed(line: TransactionLine) -> str:
    """Prefix expenses with - and income with +."""
    if line.type == TransactionType.EXPENSE:
        return f"-{CURRENCY_SYMBOL} {format_amount(line.amount)}"
    if line.type == TransactionType.INCOME:
        return f"+{CURRENCY_SYMBOL} {format_amount(line.amount)}"
    return f"{CURRENCY_SYMBOL} {format_amount(line.amount)}"


def _transaction_rows(lines: Sequence[TransactionLine]) -> list[dict[str, str]]:
    """Shape transaction lines for st.dataframe."""
    return [
        {
            "Date": line.date.strftime("%d %b %Y %H:%M"),
            "Label": line.label,
            "Wallet": (
                f"{line.wallet_name} → {line.to_wallet_name}"
                if line.to_wallet_name
                else line.wallet_name
            ),
            "Amount": _format_signed(line),
            "Note": line.note,
        }
        for line in lines
    ]


def _render_home() -> None:
    """Render balances and recent transactions."""
    state_store = build_state_store()
    dashboard = GetDashboardUseCase(state_store).execute()
    st.metric("Total Balance", _format_currency(dashboard.total_balance))

    columns = st.columns(max(len(dashboard.wallets), 1))
    for column, wallet in zip(columns, dashboard.wallets):
        column.metric(
            wallet.name,
            _format_currency(wallet.balance),
            help=f"{wallet.wallet_type} · baseline {format_amount(wallet.baseline)}",
        )

    with st.expander("Add Transaction"):
        render_transaction_form(state_store.load())

    st.subheader("Recent Transactions")
    if not dashboard.recent_transactions:
        st.info("No transactions yet.")
        return
    st.dataframe(
        _transaction_rows(dashboard.recent_transactions),
        width="stretch",
        hide_index=True,
    )


def _render_history() -> None:
    """Render the searchable transaction history."""
    st.subheader("Transaction History")
    state_store = build_state_store()
    query = st.text_input("Search history", placeholder="Note or category")
    lines = SearchTransactionsUseCase(state_store).execute(query)
    st.caption(f"{len(lines)} transactions shown")
    if lines:
        st.dataframe(_transaction_rows(lines), width="stretch", hide_index=True)
    else:
        st.info("No transactions found.")
    render_transaction_editor(state_store.load())


def _render_schedules() -> None:
    """Render schedules with toggle, run-now, edit and delete actions."""
    st.subheader("Schedules")
    state_store = build_state_store()
    usage_logger = get_usage_logger()
    state = state_store.load()
    with st.expander("New Schedule"):
        render_schedule_form(state)
    if not state.schedules:
        st.info("No scheduled tasks yet.")
        return

    for schedule in state.schedules:
        with st.container(border=True):
            info_col, toggle_col, run_col, delete_col = st.columns([6, 1, 1, 1])
            status = "" if schedule.is_active else " (paused)"
            info_col.markdown(
                f"**{schedule.name}**{status}  \n"
                f"{schedule.frequency.value} · "
                f"{resolve_wallet_name(state.wallets, schedule.wallet_id)} · "
                f"{resolve_category_name(state.categories, schedule.category_id)} · "
                f"{_format_currency(schedule.amount)}  \n"
                f"Next: {schedule.next_run:%d %b %Y %H:%M}"
            )
            if toggle_col.button(
                "Pause" if schedule.is_active else "Resume",
                key=f"toggle-{schedule.id}",
            ):
                usage_logger.info(f"toggle schedule {schedule.id}")
                ToggleScheduleUseCase(state_store).execute(schedule.id)
                st.rerun()
            if run_col.button(
                "Run now",
                key=f"run-{schedule.id}",
                disabled=not schedule.is_active,
            ):
                usage_logger.info(f"run schedule now {schedule.id}")
                RunScheduleNowUseCase(state_store, clock=build_clock()).execute(
                    schedule.id
                )
                st.rerun()
            if delete_col.button("Delete", key=f"delete-{schedule.id}"):
                usage_logger.info(f"delete schedule {schedule.id}")
                DeleteScheduleUseCase(state_store).execute(schedule.id)
                st.rerun()
            with st.expander("Edit"):
                render_schedule_form(state, editing=schedule)


def _render_wallets() -> None:
    """Render wallet and category management."""
    st.subheader("Wallets")
    state = build_state_store().load()
    for wallet in state.wallets:
        with st.expander(f"{wallet.name} · {wallet.type}"):
            render_wallet_form(state, editing=wallet)
            render_wallet_delete(wallet)
    with st.expander("Add Wallet"):
        render_wallet_form(state)

    st.subheader("Categories")
    st.caption(
        ", ".join(
            f"{category.name} ({category.type.value.title()})"
            for category in state.categories
        )
    )
    with st.expander("Add Category"):
        render_category_form()


def _category_chart_data(
    rows: Sequence[CategorySpending],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready spending rows."""
    total = sum((row.amount for row in rows), Decimal("0"))
    data: list[dict[str, str | float]] = []
    for row in rows:
        share = (row.amount / total) * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": row.name,
                "amount": float(row.amount),
                "color": row.color,
                "amount_label": _format_currency(row.amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _trend_chart_data(
    points: Sequence[DailyTrendPoint],
) -> list[dict[str, str | float]]:
    """Prepare the daily trend as long-form rows."""
    data: list[dict[str, str | float]] = []
    for point in points:
        label = point.day.strftime("%a %d")
        data.append({"day": label, "kind": "income", "amount": float(point.income)})
        data.append({"day": label, "kind": "expense", "amount": float(point.expense)})
    return data


def _render_analytics() -> None:
    """Render spending by category and the 7-day trend."""
    analytics = GetSpendingAnalyticsUseCase(
        build_state_store(),
        clock=build_clock(),
    ).execute()

    st.subheader("Spending by Category")
    if not analytics.by_category:
        st.info("No expenses recorded yet.")
    else:
        data = _category_chart_data(analytics.by_category)
        donut = alt.Chart(alt.Data(values=data)).mark_arc(
            innerRadius=90,
            cornerRadius=6,
            padAngle=0.02,
        ).encode(
            theta=alt.Theta("amount:Q"),
            color=alt.Color(
                "category:N",
                scale=alt.Scale(
                    domain=[row["category"] for row in data],
                    range=[row["color"] for row in data],
                ),
                legend=alt.Legend(orient="bottom", title=None, columns=3),
            ),
            order=alt.Order("amount:Q", sort="descending"),
            tooltip=[
                alt.Tooltip("category:N"),
                alt.Tooltip("amount_label:N"),
                alt.Tooltip("share_label:N"),
            ],
        ).properties(width=320, height=320)
        st.altair_chart(donut, width="stretch")

    st.subheader("Last 7 Days")
    trend = alt.Chart(alt.Data(values=_trend_chart_data(analytics.trend))).mark_area(
        opacity=0.4,
        line=True,
    ).encode(
        x=alt.X("day:N", sort=None, title=None),
        y=alt.Y("amount:Q", title=CURRENCY_SYMBOL),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["income", "expense"],
                range=["#10b981", "#3b82f6"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
    )
    st.altair_chart(trend, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="ZenWallet", layout="wide")
    st.title("ZenWallet")

    result = _reconcile_on_startup()
    if result.generated_count:
        st.toast(f"{result.generated_count} scheduled transactions recorded")
    if result.failed_schedule_ids:
        st.warning(
            "Some schedules could not be advanced: "
            f"{', '.join(result.failed_schedule_ids)}"
        )

    page = st.sidebar.selectbox(
        "Page",
        ["Home", "History", "Schedules", "Wallets", "Analytics"],
    )
    if page == "Home":
        _render_home()
    elif page == "History":
        _render_history()
    elif page == "Schedules":
        _render_schedules()
    elif page == "Wallets":
        _render_wallets()
    else:
        _render_analytics()


if __name__ == "__main__":  # pragma: no cover
    main()
