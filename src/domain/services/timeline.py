"""Aggregate balance projection for charting.

The timeline deliberately treats the whole debt set as one balance accruing
at a principal-weighted blended rate and repaid by the summed minimum
payments. It is a smooth approximation, separate from the exact per-debt
payoff figures.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    TIMELINE_CONTINUES_LABEL,
    TIMELINE_MAX_MONTHS,
    TIMELINE_START_LABEL,
)
from src.domain.models import DebtRecord, TimelinePoint
from src.domain.services.amortization import calculate_monthly_interest
from src.domain.services.date_labels import add_months, format_month_year
from src.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")


def calculate_weighted_interest_rate(debts: Sequence[DebtRecord]) -> Decimal:
    """Return the principal-weighted average annual rate of a debt set.

    Args:
        debts: Debts to blend.

    Returns:
        Decimal: ``sum(amount * rate) / sum(amount)``, or zero when there
        is no principal.
    """
    total = sum((coerce_decimal(debt.amount) for debt in debts), _ZERO)
    if total == 0:
        return _ZERO
    weighted = sum(
        (
            coerce_decimal(debt.amount) * coerce_decimal(debt.interest_rate)
            for debt in debts
        ),
        _ZERO,
    )
    return weighted / total


def resolve_projection_horizon(debt_free_months: int | float) -> int:
    """Cap the projection horizon at ``TIMELINE_MAX_MONTHS``."""
    if debt_free_months > TIMELINE_MAX_MONTHS:
        return TIMELINE_MAX_MONTHS
    return int(debt_free_months)


def generate_payment_timeline(
    debts: Sequence[DebtRecord],
    debt_free_months: int | float,
    today: date | None = None,
) -> list[TimelinePoint]:
    """Project the aggregate balance month by month.

    Args:
        debts: Debts making up the aggregate balance.
        debt_free_months: Debt-free horizon of the set (``math.inf`` allowed).
        today: Reference date for month labels. Defaults to today.

    Returns:
        list[TimelinePoint]: Points from ``"Now"`` until the balance reaches
        zero or the horizon ends, with a trailing ``"..."`` point when the
        30 year cap is reached while a balance remains.
    """
    total_debt = sum((coerce_decimal(debt.amount) for debt in debts), _ZERO)
    if total_debt == 0:
        return [
            TimelinePoint(month=TIMELINE_START_LABEL, projected_balance=_ZERO)
        ]

    reference = today or date.today()
    total_payment = sum(
        (coerce_decimal(debt.minimum_payment) for debt in debts),
        _ZERO,
    )
    blended_rate = calculate_weighted_interest_rate(debts)
    months_to_project = resolve_projection_horizon(debt_free_months)

    timeline = [
        TimelinePoint(month=TIMELINE_START_LABEL, projected_balance=total_debt)
    ]
    balance = total_debt
    for month_index in range(1, months_to_project + 1):
        balance += calculate_monthly_interest(balance, blended_rate)
        balance -= total_payment
        balance = max(_ZERO, balance)
        timeline.append(
            TimelinePoint(
                month=format_month_year(add_months(reference, month_index)),
                projected_balance=balance,
            )
        )
        if balance == 0:
            break

    if months_to_project == TIMELINE_MAX_MONTHS and balance > 0:
        timeline.append(
            TimelinePoint(
                month=TIMELINE_CONTINUES_LABEL,
                projected_balance=balance,
            )
        )
    return timeline


__all__ = [
    "calculate_weighted_interest_rate",
    "resolve_projection_horizon",
    "generate_payment_timeline",
]
