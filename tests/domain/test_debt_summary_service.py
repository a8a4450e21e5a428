"""Tests for debt set aggregate services."""

from datetime import date
from decimal import Decimal

from src.domain.constants import DEBT_TYPE_COLORS
from src.domain.models import DebtRecord, TimelinePoint
from src.domain.services.amortization import (
    PAYOFF_NEVER,
    calculate_time_to_payoff,
)
from src.domain.services.debt_summary import (
    calculate_debt_free_date,
    calculate_future_interest,
    calculate_interest_paid_ytd,
    calculate_payment_to_income_ratio,
    calculate_total_monthly_payment,
    calculate_total_remaining_payments,
    generate_debt_summary,
    get_debt_type_color,
    group_debts_by_type,
)

TODAY = date(2025, 1, 15)


def _debt(
    debt_id: str,
    amount: str,
    rate: str,
    payment: str,
    debt_type: str = "Credit Card",
) -> DebtRecord:
    return DebtRecord(
        id=debt_id,
        name=f"Debt {debt_id}",
        debt_type=debt_type,
        amount=Decimal(amount),
        interest_rate=Decimal(rate),
        minimum_payment=Decimal(payment),
    )


def test_total_monthly_payment_sums_minimums() -> None:
    """Minimum payments should be summed across debts."""
    debts = [_debt("a", "1000", "10", "50"), _debt("b", "2000", "5", "75.5")]

    assert calculate_total_monthly_payment(debts) == Decimal("125.5")
    assert calculate_total_monthly_payment([]) == Decimal("0")


def test_interest_paid_ytd_counts_current_month() -> None:
    """YTD interest should use months elapsed including the current one."""
    debts = [
        _debt("a", "1200", "12", "100"),
        _debt("b", "2400", "6", "100"),
    ]

    result = calculate_interest_paid_ytd(debts, today=date(2025, 3, 10))

    # 12/month + 12/month over January to March.
    assert result == Decimal("72")


def test_interest_paid_ytd_is_single_month_in_january() -> None:
    """In January only the current month is counted."""
    debts = [_debt("a", "1200", "12", "100")]

    assert calculate_interest_paid_ytd(debts, today=TODAY) == Decimal("12")


def test_debt_free_date_empty_is_not_applicable() -> None:
    """An empty debt set has no debt-free date."""
    result = calculate_debt_free_date([], today=TODAY)

    assert result.label == "N/A"
    assert result.months == 0


def test_debt_free_date_uses_slowest_debt() -> None:
    """The set is debt-free only once its slowest debt is repaid."""
    debts = [
        _debt("a", "1000", "0", "250"),
        _debt("b", "5000", "20", "200"),
        _debt("c", "300", "15", "100"),
    ]
    expected = max(
        calculate_time_to_payoff(d.amount, d.interest_rate, d.minimum_payment)
        for d in debts
    )

    result = calculate_debt_free_date(debts, today=TODAY)

    assert result.months == expected == 33
    assert result.label == "October 2027"


def test_debt_free_date_never_when_any_debt_never_repaid() -> None:
    """One non-amortizing debt makes the whole set never debt-free."""
    debts = [
        _debt("a", "1000", "0", "250"),
        _debt("b", "5000", "20", "50"),
    ]

    result = calculate_debt_free_date(debts, today=TODAY)

    assert result.label == "Never"
    assert result.months == PAYOFF_NEVER


def test_remaining_payments_and_future_interest_for_amortizing_debt() -> None:
    """Totals should be payment times payoff months."""
    debts = [_debt("a", "5000", "20", "200")]

    assert calculate_total_remaining_payments(debts) == Decimal("6600")
    assert calculate_future_interest(debts) == Decimal("1600")


def test_non_amortizing_debt_contributes_principal_only() -> None:
    """Non-amortizing debts add principal to totals and no interest."""
    debts = [_debt("a", "5000", "20", "50")]

    assert calculate_total_remaining_payments(debts) == Decimal("5000")
    assert calculate_future_interest(debts) == Decimal("0")


def test_zero_rate_debt_counts_full_final_payment() -> None:
    """Whole payments are counted, so the last overpayment shows as cost."""
    debts = [_debt("a", "1000", "0", "300")]

    assert calculate_total_remaining_payments(debts) == Decimal("1200")
    assert calculate_future_interest(debts) == Decimal("200")


def test_totals_sum_across_mixed_debts() -> None:
    """Mixed sets should add per-debt contributions."""
    debts = [
        _debt("a", "5000", "20", "200"),
        _debt("b", "5000", "20", "50"),
        _debt("c", "1000", "0", "250"),
    ]

    assert calculate_total_remaining_payments(debts) == Decimal("12600")
    assert calculate_future_interest(debts) == Decimal("1600")


def test_group_debts_by_type_keeps_first_seen_order() -> None:
    """Groups should follow the order types first appear in."""
    debts = [
        _debt("a", "1000", "10", "50", debt_type="Mortgage"),
        _debt("b", "250", "10", "50", debt_type="Credit Card"),
        _debt("c", "500", "10", "50", debt_type="Mortgage"),
    ]

    groups = group_debts_by_type(debts)

    assert [group.name for group in groups] == ["Mortgage", "Credit Card"]
    assert [group.value for group in groups] == [
        Decimal("1500"),
        Decimal("250"),
    ]
    assert groups[0].color == DEBT_TYPE_COLORS["Mortgage"]
    assert groups[1].color == DEBT_TYPE_COLORS["Credit Card"]


def test_group_debts_by_type_is_case_sensitive_with_fallback_color() -> None:
    """Unknown or differently cased types get their own group."""
    debts = [
        _debt("a", "100", "10", "50", debt_type="Credit Card"),
        _debt("b", "200", "10", "50", debt_type="credit card"),
        _debt("c", "300", "10", "50", debt_type="Payday Loan"),
    ]

    groups = group_debts_by_type(debts)

    assert [group.name for group in groups] == [
        "Credit Card",
        "credit card",
        "Payday Loan",
    ]
    assert groups[1].color == DEBT_TYPE_COLORS["Other"]
    assert groups[2].color == DEBT_TYPE_COLORS["Other"]
    assert sum(group.value for group in groups) == sum(
        debt.amount for debt in debts
    )


def test_get_debt_type_color_falls_back_to_other() -> None:
    assert get_debt_type_color("Auto Loan") == "#3B4754"
    assert get_debt_type_color("Boat Loan") == "#6D6875"


def test_payment_to_income_ratio() -> None:
    """Ratio should divide payments by income, zero for no income."""
    assert calculate_payment_to_income_ratio(
        Decimal("600"), Decimal("3000")
    ) == Decimal("0.2")
    assert calculate_payment_to_income_ratio(Decimal("600"), 0) == 0
    assert calculate_payment_to_income_ratio(Decimal("600"), -100) == 0


def test_generate_debt_summary_for_empty_set() -> None:
    """An empty set should produce zero totals and a single point."""
    summary = generate_debt_summary([], Decimal("4000"), today=TODAY)

    assert summary.total_debt == 0
    assert summary.monthly_payments == 0
    assert summary.interest_paid_ytd == 0
    assert summary.debt_free_date == "N/A"
    assert summary.debt_free_months == 0
    assert summary.payment_to_income_ratio == 0
    assert summary.total_remaining_payments == 0
    assert summary.future_interest == 0
    assert summary.debt_by_type == []
    assert summary.payment_timeline == [
        TimelinePoint(month="Now", projected_balance=Decimal("0"))
    ]


def test_generate_debt_summary_assembles_fields() -> None:
    """The summary should combine every aggregate."""
    debts = [
        _debt("a", "5000", "20", "200"),
        _debt("b", "1000", "0", "250", debt_type="Medical Debt"),
    ]

    summary = generate_debt_summary(debts, Decimal("3000"), today=TODAY)

    assert summary.total_debt == Decimal("6000")
    assert summary.monthly_payments == Decimal("450")
    assert summary.payment_to_income_ratio == Decimal("0.15")
    assert summary.debt_free_months == 33
    assert summary.debt_free_date == "October 2027"
    assert summary.total_remaining_payments == Decimal("7600")
    assert summary.future_interest == Decimal("1600")
    assert [group.name for group in summary.debt_by_type] == [
        "Credit Card",
        "Medical Debt",
    ]
    assert summary.payment_timeline[0] == TimelinePoint(
        month="Now",
        projected_balance=Decimal("6000"),
    )
    assert summary.is_debt_free_never is False


def test_generate_debt_summary_defaults_income() -> None:
    """Income should default to the 3000 assumption."""
    debts = [_debt("a", "5000", "20", "300")]

    summary = generate_debt_summary(debts, today=TODAY)

    assert summary.payment_to_income_ratio == Decimal("0.1")


def test_generate_debt_summary_is_deterministic_for_a_reference_date() -> None:
    """Identical inputs and reference date give identical summaries."""
    debts = [_debt("a", "5000", "20", "50"), _debt("b", "800", "9", "40")]

    first = generate_debt_summary(debts, Decimal("2500"), today=TODAY)
    second = generate_debt_summary(debts, Decimal("2500"), today=TODAY)

    assert first == second
    assert first.is_debt_free_never is True
