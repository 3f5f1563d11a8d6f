"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, datetime, time
from decimal import Decimal

import streamlit as st
import altair as alt

from src.adapters.summation_query import (
    parse_summation_query,
    serialize_summaries,
)
from src.application.use_cases.get_summation import GroupSummary
from src.domain.errors import SummationError
from src.domain.models import GroupBy, Period, Transaction
from src.infrastructure.container import (
    build_summation_use_case,
    build_transactions_use_case,
)


MODE_LABELS = {
    "Total": "total",
    "Income": "income",
    "Expenses": "expenses",
}

CUSTOM_RANGE = "Custom range"


def _fetch_summaries(
    mode: str,
    group_by: str,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
) -> list[GroupSummary]:
    """Run the summation use case for raw query parameters."""
    query = parse_summation_query(
        group_by=group_by,
        period=period,
        start_date=start_date,
        end_date=end_date,
    )
    use_case = build_summation_use_case()
    return use_case.execute(query, mode)


def _fetch_transactions() -> Sequence[Transaction]:
    """Fetch all stored transactions."""
    use_case = build_transactions_use_case()
    return use_case.list_all()


def _format_amount(value: Decimal) -> str:
    """Format signed amounts for display."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:,.2f}"


def _prepare_bar_chart_data(
    summaries: Sequence[GroupSummary],
) -> list[dict[str, str | float | int]]:
    """Prepare Altair-ready rows, one per period."""
    return [
        {
            "period": summary.period,
            "total": float(summary.total),
            "total_label": _format_amount(summary.total),
            "count": summary.count,
            "direction": "in" if summary.total >= 0 else "out",
        }
        for summary in summaries
    ]


def _render_summation_chart(
    summaries: Sequence[GroupSummary],
    title: str,
    chart_height: int = 320,
) -> None:
    """Render a bar chart of totals by period.

    Args:
        summaries: Group summaries in display order.
        title: Chart title.
        chart_height: Height of the chart canvas.
    """
    if not summaries:
        st.info("No transactions in the selected range.")
        return
    data = _prepare_bar_chart_data(summaries)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X(
            "period:N",
            sort=[row["period"] for row in data],
            title=None,
        ),
        y=alt.Y("total:Q", title="Total"),
        color=alt.Color(
            "direction:N",
            scale=alt.Scale(
                domain=["in", "out"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("period:N"),
            alt.Tooltip("total_label:N", title="Total"),
            alt.Tooltip("count:Q"),
        ],
    ).properties(
        height=chart_height,
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _render_summation_page() -> None:
    """Render the summation controls, chart and table."""
    mode_label = st.sidebar.selectbox("Mode", list(MODE_LABELS))
    group_by = st.sidebar.selectbox(
        "Group by",
        [unit.value for unit in GroupBy],
        index=[unit.value for unit in GroupBy].index(GroupBy.MONTH.value),
    )
    period_choice = st.sidebar.selectbox(
        "Period",
        [CUSTOM_RANGE] + [period.value for period in Period],
    )
    start_date: str | None = None
    end_date: str | None = None
    period: str | None = None
    if period_choice == CUSTOM_RANGE:
        start_value = st.sidebar.date_input("Start date", value=None)
        end_value = st.sidebar.date_input("End date", value=None)
        start_date = start_value.isoformat() if start_value else None
        end_date = (
            datetime.combine(end_value, time.max).isoformat()
            if end_value
            else None
        )
    else:
        period = period_choice

    try:
        summaries = _fetch_summaries(
            MODE_LABELS[mode_label],
            group_by,
            period,
            start_date,
            end_date,
        )
    except SummationError as exc:
        st.warning(str(exc))
        return

    grand_total = sum(
        (summary.total for summary in summaries),
        start=Decimal("0"),
    )
    total_col, count_col = st.columns(2)
    total_col.metric(mode_label, _format_amount(grand_total))
    count_col.metric(
        "Transactions",
        str(sum(summary.count for summary in summaries)),
    )
    _render_summation_chart(summaries, f"{mode_label} by {group_by}")
    st.dataframe(
        serialize_summaries(summaries),
        width="stretch",
        hide_index=True,
    )


def _render_transactions_page() -> None:
    """Render the transactions table and an entry form."""
    transactions = _fetch_transactions()
    st.caption(f"{len(transactions)} transactions stored")
    data = [
        {
            "Id": tx.id,
            "Date": tx.date.isoformat(),
            "Amount": _format_amount(tx.amount),
            "Type": tx.type.value,
            "Description": tx.description or "—",
        }
        for tx in transactions
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)

    with st.form("add_transaction"):
        amount = st.number_input("Amount", value=0.0, step=1.0)
        day = st.date_input("Date", value=date.today())
        description = st.text_input("Description")
        submitted = st.form_submit_button("Add transaction")
    if submitted:
        build_transactions_use_case().add(
            amount=str(amount),
            date=datetime.combine(day, time.min),
            description=description or None,
        )
        st.success("Transaction added.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    st.title("Finance Tracker")

    page = st.sidebar.selectbox("Page", ["Summation", "Transactions"])
    if page == "Summation":
        _render_summation_page()
    else:
        _render_transactions_page()


if __name__ == "__main__":  # pragma: no cover
    main()
