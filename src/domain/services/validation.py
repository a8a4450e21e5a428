"""Data-entry validation for debt drafts.

The projection engine accepts whatever it is given; these checks run before
a debt reaches storage.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import DEBT_TYPES
from src.domain.exceptions import DebtValidationError
from src.domain.models import DebtDraft
from src.utils.decimal_utils import coerce_decimal

MIN_DEBT_AMOUNT = Decimal("1")
MAX_INTEREST_RATE = Decimal("100")


def collect_debt_draft_errors(
    draft: DebtDraft,
    allowed_types: Iterable[str] = DEBT_TYPES,
) -> list[str]:
    """Return the validation errors of a draft, empty when valid.

    Args:
        draft: Debt fields entered by the user.
        allowed_types: Accepted debt categories.

    Returns:
        list[str]: Human readable error messages.
    """
    errors: list[str] = []
    if not draft.name or not draft.name.strip():
        errors.append("Name is required.")
    if not draft.debt_type:
        errors.append("Please select a debt type.")
    elif draft.debt_type not in tuple(allowed_types):
        errors.append(f"Unknown debt type: {draft.debt_type}.")
    if coerce_decimal(draft.amount) < MIN_DEBT_AMOUNT:
        errors.append("Balance must be at least $1.")
    interest_rate = coerce_decimal(draft.interest_rate)
    if interest_rate < 0:
        errors.append("Interest rate cannot be negative.")
    elif interest_rate > MAX_INTEREST_RATE:
        errors.append("Interest rate must be 100% or less.")
    if coerce_decimal(draft.minimum_payment) < 0:
        errors.append("Minimum payment cannot be negative.")
    if draft.remaining_term is not None and draft.remaining_term <= 0:
        errors.append("Remaining term must be a positive number of months.")
    return errors


def validate_debt_draft(
    draft: DebtDraft,
    allowed_types: Iterable[str] = DEBT_TYPES,
) -> None:
    """Raise DebtValidationError when a draft is invalid."""
    errors = collect_debt_draft_errors(draft, allowed_types)
    if errors:
        raise DebtValidationError(errors)


__all__ = [
    "MIN_DEBT_AMOUNT",
    "MAX_INTEREST_RATE",
    "collect_debt_draft_errors",
    "validate_debt_draft",
]
