"""Date and grouping-key helpers shared by every expense report."""

import datetime as dt
from collections.abc import Iterable

from app.core.errors import InvalidRequest
from app.core.models import Expense

DEFAULT_RECURRING_MONTHS = 3
DEFAULT_TAG_MONTHS = 2

TemplateKey = tuple[str, str, float]


def month_key(date: dt.date) -> str:
    """Return the YYYY-MM bucket key for a calendar date."""
    return f"{date.year:04d}-{date.month:02d}"


def template_key(expense: Expense) -> TemplateKey:
    """Return the (description, category, amount) key identifying a repeated charge."""
    return (expense.description, expense.category, expense.amount)


def window_cutoff(months: int, today: dt.date) -> dt.date:
    """Return the first day of the month `months` months before the month of `today`.

    Windows reaching back before year 1 are clamped to `date.min`, so every expense falls inside them.
    """
    index = today.year * 12 + (today.month - 1) - months
    if index < 12:
        return dt.date.min
    return dt.date(index // 12, index % 12 + 1, 1)


def expenses_in_window(expenses: Iterable[Expense], months: int, today: dt.date | None = None) -> list[Expense]:
    """Keep the expenses dated between the window cutoff and today, both inclusive."""
    today = today or dt.date.today()
    cutoff = window_cutoff(months, today)
    return [exp for exp in expenses if cutoff <= exp.date <= today]


def parse_months_window(raw: str | int | None, default: int) -> int:
    """Parse a `months` query value into a positive integer window size."""
    if raw is None or raw == "":
        return default
    try:
        months = int(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidRequest("Invalid number of months specified.") from exc
    if months <= 0:
        raise InvalidRequest("Invalid number of months specified.")
    return months


def require_positive_window(months: int) -> None:
    """Reject window sizes that are not positive integers."""
    if isinstance(months, bool) or not isinstance(months, int) or months <= 0:
        raise InvalidRequest("Invalid number of months specified.")
