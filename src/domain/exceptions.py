"""Exceptions raised around the debt projection engine.

The engine itself never raises for numeric edge cases; these errors belong
to data entry and storage.
"""


class DebtDashboardError(Exception):
    """Base exception for debt dashboard errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DebtValidationError(DebtDashboardError, ValueError):
    """Raised when a debt draft fails data-entry validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("Invalid debt: " + "; ".join(errors))
        self.errors = list(errors)


class DebtNotFoundError(DebtDashboardError, LookupError):
    """Raised when a debt id does not exist in storage."""

    def __init__(self, debt_id: str) -> None:
        super().__init__(f"Debt '{debt_id}' not found")
        self.debt_id = debt_id


class DebtRepositoryError(DebtDashboardError, RuntimeError):
    """Raised when the debts storage backend fails."""


__all__ = [
    "DebtDashboardError",
    "DebtValidationError",
    "DebtNotFoundError",
    "DebtRepositoryError",
]
