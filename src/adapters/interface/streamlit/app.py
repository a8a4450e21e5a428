"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.use_cases.debt_dashboard_session import (
    DebtDashboardSession,
)
from src.application.use_cases.manage_debts import ManageDebtsUseCase
from src.domain.constants import DEBT_TYPES
from src.domain.exceptions import (
    DebtNotFoundError,
    DebtRepositoryError,
    DebtValidationError,
)
from src.domain.models import (
    DebtDraft,
    DebtRecord,
    DebtSummary,
    DebtTypeAmount,
    RiskAssessment,
    TimelinePoint,
)
from src.domain.policies.risk import assess_debt_risk
from src.infrastructure.container import (
    build_dashboard_session,
    build_debts_repository,
)

_SESSION_KEY = "debt_dashboard_session"

_RISK_LABELS = {
    "low": "Low Risk",
    "medium": "Moderate Risk",
    "high": "High Risk",
}


def _get_session() -> DebtDashboardSession:
    """Return the dashboard session stored in the Streamlit session."""
    if _SESSION_KEY not in st.session_state:
        session = build_dashboard_session()
        session.refresh()
        st.session_state[_SESSION_KEY] = session
    return st.session_state[_SESSION_KEY]


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"${value:,.0f}"


def _format_ratio(value: Decimal) -> str:
    """Format a ratio as a whole percentage."""
    return f"{value * 100:.0f}%"


def _format_months(months: int | float) -> str:
    """Format a payoff horizon in months."""
    if months == float("inf"):
        return "Never with current payments"
    return f"{months} months"


def _prepare_debt_type_data(
    items: Sequence[DebtTypeAmount],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for the debt-by-type donut."""
    total = sum((item.value for item in items), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for item in items:
        share = Decimal("0")
        if total:
            share = item.value / total * Decimal("100")
        data.append(
            {
                "category": item.name,
                "amount": float(item.value),
                "color": item.color,
                "amount_label": _format_currency(item.value),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _prepare_timeline_data(
    timeline: Sequence[TimelinePoint],
) -> list[dict[str, str | float | int]]:
    """Prepare Altair-ready rows for the projected balance line."""
    return [
        {
            "order": index,
            "month": point.month,
            "balance": float(point.projected_balance),
            "balance_label": _format_currency(point.projected_balance),
        }
        for index, point in enumerate(timeline)
    ]


def _render_metrics(summary: DebtSummary, risk: RiskAssessment) -> None:
    """Render the headline figures."""
    total_col, payments_col, interest_col, free_col = st.columns(4)
    total_col.metric("Total Debt", _format_currency(summary.total_debt))
    payments_col.metric(
        "Monthly Payments",
        _format_currency(summary.monthly_payments),
        f"{_format_ratio(summary.payment_to_income_ratio)} of monthly income",
        delta_color="off",
    )
    interest_col.metric(
        "Interest Paid (YTD)",
        _format_currency(summary.interest_paid_ytd),
    )
    free_col.metric(
        "Debt-Free Date",
        summary.debt_free_date,
        _format_months(summary.debt_free_months),
        delta_color="off",
    )

    remaining_col, future_col, risk_col = st.columns(3)
    remaining_col.metric(
        "Total Remaining Payments",
        _format_currency(summary.total_remaining_payments),
    )
    future_col.metric(
        "Future Interest",
        _format_currency(summary.future_interest),
    )
    risk_col.metric(
        "Debt-to-Income Ratio",
        _format_ratio(summary.payment_to_income_ratio),
        _RISK_LABELS[risk.overall],
        delta_color="off",
    )


def _render_debt_type_chart(
    items: Sequence[DebtTypeAmount],
    chart_size: int = 320,
) -> None:
    """Render a donut chart of principal by debt type."""
    st.subheader("Debt by Type")
    if not items:
        st.info("No debts to chart.")
        return
    data = _prepare_debt_type_data(items)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.35,
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
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _render_timeline_chart(timeline: Sequence[TimelinePoint]) -> None:
    """Render the projected aggregate balance over time."""
    st.subheader("Projected Balance")
    data = _prepare_timeline_data(timeline)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=len(data) <= 24,
    ).encode(
        x=alt.X(
            "month:N",
            sort=alt.EncodingSortField(field="order", order="ascending"),
            title=None,
        ),
        y=alt.Y("balance:Q", title="Balance ($)"),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("balance_label:N"),
        ],
    ).properties(height=320)
    st.altair_chart(chart, width="stretch")


def _render_debts_table(debts: Sequence[DebtRecord]) -> None:
    """Render the user's debts."""
    st.subheader("Your Debts")
    data = [
        {
            "Name": debt.name,
            "Type": debt.debt_type,
            "Balance": _format_currency(debt.amount),
            "Rate (%)": f"{debt.interest_rate}",
            "Minimum Payment": _format_currency(debt.minimum_payment),
            "Term (months)": debt.remaining_term or "-",
        }
        for debt in debts
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_add_debt_form(
    session: DebtDashboardSession,
    use_case: ManageDebtsUseCase,
) -> None:
    """Render the form adding a debt, refreshing the session on success."""
    with st.sidebar.form("add_debt", clear_on_submit=True):
        st.markdown("**Add a debt**")
        name = st.text_input("Name / lender")
        debt_type = st.selectbox("Type", options=list(DEBT_TYPES))
        amount = st.number_input("Balance ($)", min_value=0.0, step=100.0)
        interest_rate = st.number_input(
            "Interest rate (%)",
            min_value=0.0,
            max_value=100.0,
            step=0.1,
        )
        minimum_payment = st.number_input(
            "Minimum payment ($)",
            min_value=0.0,
            step=10.0,
        )
        remaining_term = st.number_input(
            "Remaining term (months, 0 if unknown)",
            min_value=0,
            step=1,
        )
        submitted = st.form_submit_button("Add debt")
    if not submitted:
        return
    draft = DebtDraft(
        name=name,
        debt_type=debt_type,
        amount=Decimal(str(amount)),
        interest_rate=Decimal(str(interest_rate)),
        minimum_payment=Decimal(str(minimum_payment)),
        remaining_term=int(remaining_term) or None,
    )
    try:
        use_case.add_debt(session.user_id, draft)
    except DebtValidationError as exc:
        for error in exc.errors:
            st.sidebar.error(error)
        return
    except DebtRepositoryError as exc:
        st.sidebar.error(f"Failed to add debt: {exc}")
        return
    st.sidebar.success("Debt added successfully!")
    session.refresh()


def _render_remove_debt(
    session: DebtDashboardSession,
    use_case: ManageDebtsUseCase,
) -> None:
    """Render the control removing a debt."""
    if not session.debts:
        return
    labels = {
        f"{debt.name} ({debt.debt_type})": debt.id for debt in session.debts
    }
    selected = st.sidebar.selectbox("Remove a debt", options=list(labels))
    if not st.sidebar.button("Remove"):
        return
    try:
        use_case.delete_debt(labels[selected])
    except (DebtNotFoundError, DebtRepositoryError) as exc:
        st.sidebar.error(str(exc))
        return
    st.sidebar.success("Debt removed successfully")
    session.refresh()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Debt Dashboard", layout="wide")
    st.title("Debt Dashboard")

    session = _get_session()
    if session.user_id is None:
        st.warning("No user configured. Set DEBT_USER_ID first.")
        return

    income = st.sidebar.number_input(
        "Monthly income ($)",
        min_value=0.0,
        value=float(session.monthly_income),
        step=100.0,
    )
    if Decimal(str(income)) != session.monthly_income:
        session.set_monthly_income(Decimal(str(income)))
    if st.sidebar.button("Refresh"):
        session.refresh()

    manage_use_case = ManageDebtsUseCase(build_debts_repository())
    _render_add_debt_form(session, manage_use_case)
    _render_remove_debt(session, manage_use_case)

    if session.last_error:
        st.error(f"Failed to load debt data: {session.last_error}")
    summary = session.summary
    if summary is None or not session.debts:
        st.info("No debts yet. Add your debts to get personalized insights.")
        return

    _render_metrics(summary, assess_debt_risk(summary))
    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_debt_type_chart(summary.debt_by_type)
    with chart_right:
        _render_timeline_chart(summary.payment_timeline)
    _render_debts_table(session.debts)


if __name__ == "__main__":  # pragma: no cover
    main()
