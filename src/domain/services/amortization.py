"""Per-debt amortization math."""

import math
from decimal import ROUND_CEILING, Decimal

from src.utils.decimal_utils import coerce_decimal

PAYOFF_NEVER = math.inf

_ONE = Decimal("1")
_MONTHS_PER_YEAR = Decimal("12")
_PERCENT = Decimal("100")


def monthly_rate_from_annual(annual_rate) -> Decimal:
    """Convert a nominal annual percentage to a monthly decimal rate."""
    return coerce_decimal(annual_rate) / _PERCENT / _MONTHS_PER_YEAR


def calculate_monthly_interest(principal, annual_rate) -> Decimal:
    """Return one month of interest on a principal.

    Args:
        principal: Outstanding principal.
        annual_rate: Nominal annual interest rate as a percentage.

    Returns:
        Decimal: ``principal * annual_rate / 100 / 12``.
    """
    return coerce_decimal(principal) * monthly_rate_from_annual(annual_rate)


def calculate_time_to_payoff(
    principal,
    annual_rate,
    monthly_payment,
) -> int | float:
    """Return the whole months needed to repay a debt.

    Uses the closed amortization form
    ``n = -ln(1 - P*r/PMT) / ln(1 + r)`` rounded up, so a partial final
    month counts as a full one.

    Args:
        principal: Outstanding principal.
        annual_rate: Nominal annual interest rate as a percentage.
        monthly_payment: Fixed monthly payment.

    Returns:
        int | float: Months to payoff, ``0`` when there is nothing to pay or
        no payment, or ``PAYOFF_NEVER`` when the payment does not exceed the
        accruing interest.
    """
    principal = coerce_decimal(principal)
    monthly_payment = coerce_decimal(monthly_payment)
    if monthly_payment <= 0 or principal <= 0:
        return 0

    monthly_rate = monthly_rate_from_annual(annual_rate)
    if monthly_rate == 0:
        return _ceil_months(principal / monthly_payment)

    remaining_share = _ONE - (principal * monthly_rate) / monthly_payment
    growth = _ONE + monthly_rate
    # ln is undefined for non-positive arguments: the balance never shrinks.
    if remaining_share <= 0 or growth <= 0:
        return PAYOFF_NEVER

    months = -remaining_share.ln() / growth.ln()
    if not months.is_finite() or months < 0:
        return PAYOFF_NEVER
    return _ceil_months(months)


def is_non_amortizing(principal, annual_rate, monthly_payment) -> bool:
    """Return True when the payment does not exceed the monthly interest."""
    monthly_interest = calculate_monthly_interest(principal, annual_rate)
    return coerce_decimal(monthly_payment) <= monthly_interest


def _ceil_months(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))


__all__ = [
    "PAYOFF_NEVER",
    "monthly_rate_from_annual",
    "calculate_monthly_interest",
    "calculate_time_to_payoff",
    "is_non_amortizing",
]
