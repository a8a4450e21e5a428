"""Tests for the aggregate balance projection."""

from datetime import date
from decimal import Decimal

from src.domain.models import DebtRecord, TimelinePoint
from src.domain.services.amortization import PAYOFF_NEVER
from src.domain.services.timeline import (
    calculate_weighted_interest_rate,
    generate_payment_timeline,
    resolve_projection_horizon,
)

TODAY = date(2025, 1, 15)


def _debt(amount: str, rate: str, payment: str) -> DebtRecord:
    return DebtRecord(
        id=f"{amount}-{rate}",
        name="Loan",
        debt_type="Personal Loan",
        amount=Decimal(amount),
        interest_rate=Decimal(rate),
        minimum_payment=Decimal(payment),
    )


def test_weighted_interest_rate_blends_by_principal() -> None:
    debts = [_debt("1000", "10", "50"), _debt("3000", "20", "50")]

    assert calculate_weighted_interest_rate(debts) == Decimal("17.5")


def test_weighted_interest_rate_without_principal_is_zero() -> None:
    assert calculate_weighted_interest_rate([]) == 0


def test_resolve_projection_horizon_caps_at_thirty_years() -> None:
    assert resolve_projection_horizon(12) == 12
    assert resolve_projection_horizon(360) == 360
    assert resolve_projection_horizon(361) == 360
    assert resolve_projection_horizon(PAYOFF_NEVER) == 360


def test_timeline_for_empty_set_is_single_zero_point() -> None:
    """Without principal the timeline is just the starting point."""
    assert generate_payment_timeline([], 0, today=TODAY) == [
        TimelinePoint(month="Now", projected_balance=Decimal("0"))
    ]


def test_timeline_projects_until_balance_reaches_zero() -> None:
    """Each month should pay down the balance and floor it at zero."""
    timeline = generate_payment_timeline(
        [_debt("1000", "0", "300")],
        4,
        today=TODAY,
    )

    assert [point.month for point in timeline] == [
        "Now",
        "Feb '25",
        "Mar '25",
        "Apr '25",
        "May '25",
    ]
    assert [point.projected_balance for point in timeline] == [
        Decimal("1000"),
        Decimal("700"),
        Decimal("400"),
        Decimal("100"),
        Decimal("0"),
    ]


def test_timeline_stops_early_when_aggregate_is_repaid() -> None:
    """The loop should end at the first zero balance."""
    timeline = generate_payment_timeline(
        [_debt("500", "0", "250")],
        10,
        today=TODAY,
    )

    assert len(timeline) == 3
    assert timeline[-1].projected_balance == 0


def test_timeline_applies_blended_interest() -> None:
    """Interest should accrue on the aggregate balance each month."""
    timeline = generate_payment_timeline(
        [_debt("1200", "12", "112")],
        12,
        today=TODAY,
    )

    # 1200 + 12 interest - 112 payment.
    assert timeline[1].projected_balance == Decimal("1100")
    assert timeline[1].month == "Feb '25"


def test_timeline_never_repaid_is_capped_with_continuation_point() -> None:
    """A never-repaid set projects 30 years and ends with a marker."""
    timeline = generate_payment_timeline(
        [_debt("5000", "20", "50")],
        PAYOFF_NEVER,
        today=TODAY,
    )

    assert len(timeline) == 362
    assert timeline[0].month == "Now"
    assert timeline[-2].month == "Jan '55"
    assert timeline[-1].month == "..."
    assert timeline[-1].projected_balance == timeline[-2].projected_balance
    assert timeline[-1].projected_balance > Decimal("5000")


def test_timeline_without_cap_has_no_continuation_point() -> None:
    """Short horizons should not add a trailing marker."""
    timeline = generate_payment_timeline(
        [_debt("5000", "20", "50")],
        6,
        today=TODAY,
    )

    assert len(timeline) == 7
    assert all(point.month != "..." for point in timeline)


def test_timeline_labels_clamp_month_end_dates() -> None:
    """Month-end reference dates should not skip short months."""
    timeline = generate_payment_timeline(
        [_debt("1000", "0", "500")],
        2,
        today=date(2025, 1, 31),
    )

    assert [point.month for point in timeline] == ["Now", "Feb '25", "Mar '25"]
