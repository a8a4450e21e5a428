"""Helpers for numeric normalization of debt figures."""

from decimal import Decimal


def coerce_decimal(value, default: Decimal = Decimal("0")) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Args:
        value: Raw numeric value from SQL, settings, or callers.
        default: Value returned when ``value`` is None.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return default
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_int(value) -> int | None:
    """Normalize an optional whole number such as a term in months."""
    if value is None:
        return None
    return int(value)


__all__ = ["coerce_decimal", "coerce_optional_int"]
