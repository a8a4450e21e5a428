"""Month labels used by debt projections."""

from datetime import MAXYEAR, date

from dateutil.relativedelta import relativedelta


def add_months(start: date, months: int) -> date:
    """Return ``start`` shifted by whole calendar months.

    The day is clamped to the end of shorter months (Jan 31 + 1 -> Feb 28).
    """
    return start + relativedelta(months=months)


def format_future_date(months: int, today: date | None = None) -> str:
    """Format the month ``months`` after today, e.g. ``"June 2028"``.

    Args:
        months: Whole months from the reference date.
        today: Reference date. Defaults to the current date.

    Returns:
        str: Long month and year label, or ``"<n> months"`` when the target
        lies beyond the last representable calendar year.
    """
    reference = today or date.today()
    target_year = reference.year + (reference.month - 1 + months) // 12
    if target_year > MAXYEAR:
        return f"{months} months"
    return add_months(reference, months).strftime("%B %Y")


def format_month_year(value: date) -> str:
    """Format a short month label, e.g. ``"Jan '25"``."""
    return value.strftime("%b '%y")


__all__ = ["add_months", "format_future_date", "format_month_year"]
