"""Domain services for debt set aggregates."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEBT_TYPE_COLORS,
    DEFAULT_DEBT_TYPE,
    DEFAULT_MONTHLY_INCOME,
    NEVER_LABEL,
    NOT_APPLICABLE_LABEL,
)
from src.domain.models import (
    DebtFreeDate,
    DebtRecord,
    DebtSummary,
    DebtTypeAmount,
)
from src.domain.services.amortization import (
    PAYOFF_NEVER,
    calculate_monthly_interest,
    calculate_time_to_payoff,
    is_non_amortizing,
)
from src.domain.services.date_labels import format_future_date
from src.domain.services.timeline import generate_payment_timeline
from src.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")


def calculate_total_debt(debts: Sequence[DebtRecord]) -> Decimal:
    """Return the summed principal of all debts."""
    return sum((coerce_decimal(debt.amount) for debt in debts), _ZERO)


def calculate_total_monthly_payment(debts: Sequence[DebtRecord]) -> Decimal:
    """Return the summed minimum payments of all debts."""
    return sum(
        (coerce_decimal(debt.minimum_payment) for debt in debts),
        _ZERO,
    )


def calculate_interest_paid_ytd(
    debts: Sequence[DebtRecord],
    today: date | None = None,
) -> Decimal:
    """Approximate the interest accrued since January 1st.

    Each debt's interest on its *current* balance is multiplied by the
    months elapsed this year, current month included. The balance is
    assumed constant since January; no history is reconstructed.

    Args:
        debts: Debts to accrue interest for.
        today: Reference date. Defaults to the current date.

    Returns:
        Decimal: Approximate year-to-date interest.
    """
    months_elapsed = (today or date.today()).month
    return sum(
        (
            calculate_monthly_interest(debt.amount, debt.interest_rate)
            * months_elapsed
            for debt in debts
        ),
        _ZERO,
    )


def calculate_debt_free_date(
    debts: Sequence[DebtRecord],
    today: date | None = None,
) -> DebtFreeDate:
    """Return when the slowest debt of the set is repaid.

    Args:
        debts: Debts to project.
        today: Reference date for the label. Defaults to the current date.

    Returns:
        DebtFreeDate: ``N/A`` with zero months for an empty set, ``Never``
        with ``PAYOFF_NEVER`` months when a debt is never repaid, otherwise
        the month/year label and the month count.
    """
    if not debts:
        return DebtFreeDate(label=NOT_APPLICABLE_LABEL, months=0)

    max_months = max(
        calculate_time_to_payoff(
            debt.amount,
            debt.interest_rate,
            debt.minimum_payment,
        )
        for debt in debts
    )
    if max_months == PAYOFF_NEVER:
        return DebtFreeDate(label=NEVER_LABEL, months=PAYOFF_NEVER)
    return DebtFreeDate(
        label=format_future_date(max_months, today),
        months=max_months,
    )


def group_debts_by_type(debts: Sequence[DebtRecord]) -> list[DebtTypeAmount]:
    """Sum principal per debt type in first-seen order.

    Args:
        debts: Debts to group. Types are matched exactly.

    Returns:
        list[DebtTypeAmount]: One entry per type with its display colour.
    """
    totals: dict[str, Decimal] = {}
    for debt in debts:
        totals[debt.debt_type] = (
            totals.get(debt.debt_type, _ZERO) + coerce_decimal(debt.amount)
        )
    return [
        DebtTypeAmount(
            name=debt_type,
            value=value,
            color=get_debt_type_color(debt_type),
        )
        for debt_type, value in totals.items()
    ]


def get_debt_type_color(debt_type: str) -> str:
    """Return the display colour of a debt type."""
    return DEBT_TYPE_COLORS.get(
        debt_type,
        DEBT_TYPE_COLORS[DEFAULT_DEBT_TYPE],
    )


def calculate_payment_to_income_ratio(
    monthly_payment,
    monthly_income,
) -> Decimal:
    """Return payments divided by income, zero for non-positive income."""
    income = coerce_decimal(monthly_income)
    if income <= 0:
        return _ZERO
    return coerce_decimal(monthly_payment) / income


def calculate_total_remaining_payments(
    debts: Sequence[DebtRecord],
) -> Decimal:
    """Return the total still to be paid across debts.

    Non-amortizing debts contribute their principal only, since their total
    cost under minimum payments is unbounded.
    """
    total = _ZERO
    for debt in debts:
        if is_non_amortizing(
            debt.amount,
            debt.interest_rate,
            debt.minimum_payment,
        ):
            total += coerce_decimal(debt.amount)
            continue
        total += _total_payment(debt)
    return total


def calculate_future_interest(debts: Sequence[DebtRecord]) -> Decimal:
    """Return the interest still to be paid across debts.

    Non-amortizing debts contribute nothing.
    """
    total = _ZERO
    for debt in debts:
        if is_non_amortizing(
            debt.amount,
            debt.interest_rate,
            debt.minimum_payment,
        ):
            continue
        total += _total_payment(debt) - coerce_decimal(debt.amount)
    return total


def generate_debt_summary(
    debts: Sequence[DebtRecord],
    monthly_income=DEFAULT_MONTHLY_INCOME,
    today: date | None = None,
) -> DebtSummary:
    """Compute the full summary of a debt set.

    Args:
        debts: Debts owned by the caller, in display order.
        monthly_income: Assumed monthly income.
        today: Reference date for date dependent fields. Defaults to the
            current date.

    Returns:
        DebtSummary: Totals, horizons, ratio, grouping and timeline.
    """
    reference = today or date.today()
    monthly_payments = calculate_total_monthly_payment(debts)
    debt_free = calculate_debt_free_date(debts, reference)
    return DebtSummary(
        total_debt=calculate_total_debt(debts),
        monthly_payments=monthly_payments,
        interest_paid_ytd=calculate_interest_paid_ytd(debts, reference),
        debt_free_date=debt_free.label,
        debt_free_months=debt_free.months,
        payment_to_income_ratio=calculate_payment_to_income_ratio(
            monthly_payments,
            monthly_income,
        ),
        total_remaining_payments=calculate_total_remaining_payments(debts),
        future_interest=calculate_future_interest(debts),
        debt_by_type=group_debts_by_type(debts),
        payment_timeline=generate_payment_timeline(
            debts,
            debt_free.months,
            reference,
        ),
    )


def _total_payment(debt: DebtRecord) -> Decimal:
    months = calculate_time_to_payoff(
        debt.amount,
        debt.interest_rate,
        debt.minimum_payment,
    )
    return coerce_decimal(debt.minimum_payment) * months


__all__ = [
    "calculate_total_debt",
    "calculate_total_monthly_payment",
    "calculate_interest_paid_ytd",
    "calculate_debt_free_date",
    "group_debts_by_type",
    "get_debt_type_color",
    "calculate_payment_to_income_ratio",
    "calculate_total_remaining_payments",
    "calculate_future_interest",
    "generate_debt_summary",
]
