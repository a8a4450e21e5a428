"""Domain models for debts and their projected summary."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class DebtRecord:
    """A single outstanding debt as supplied by storage.

    Attributes:
        id: Opaque unique identifier.
        name: Display label.
        debt_type: Category used for grouping and colouring only.
        amount: Current outstanding principal.
        interest_rate: Nominal annual interest rate as a percentage.
        minimum_payment: Monthly payment amount.
        remaining_term: Optional contractual term in months (not used by
            any projection).
    """

    id: str
    name: str
    debt_type: str
    amount: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    remaining_term: int | None = None


@dataclass(frozen=True)
class DebtDraft:
    """Editable fields of a debt, used when creating or updating one."""

    name: str
    debt_type: str
    amount: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    remaining_term: int | None = None


@dataclass(frozen=True)
class DebtTypeAmount:
    """Principal aggregated for a debt category."""

    name: str
    value: Decimal
    color: str


@dataclass(frozen=True)
class TimelinePoint:
    """Projected aggregate balance at a labelled month."""

    month: str
    projected_balance: Decimal


@dataclass(frozen=True)
class DebtFreeDate:
    """Debt-free horizon of a debt set.

    Attributes:
        label: Human readable month/year, or a "N/A"/"Never" sentinel.
        months: Months until the slowest debt is repaid; ``math.inf`` when
            it never is.
    """

    label: str
    months: int | float


@dataclass(frozen=True)
class DebtSummary:
    """Derived financial summary of a debt set."""

    total_debt: Decimal
    monthly_payments: Decimal
    interest_paid_ytd: Decimal
    debt_free_date: str
    debt_free_months: int | float
    payment_to_income_ratio: Decimal
    total_remaining_payments: Decimal
    future_interest: Decimal
    debt_by_type: list[DebtTypeAmount] = field(default_factory=list)
    payment_timeline: list[TimelinePoint] = field(default_factory=list)

    @property
    def is_debt_free_never(self) -> bool:
        """Return True when at least one debt is never repaid."""
        return self.debt_free_months == float("inf")


__all__ = [
    "DebtRecord",
    "DebtDraft",
    "DebtTypeAmount",
    "TimelinePoint",
    "DebtFreeDate",
    "DebtSummary",
]
