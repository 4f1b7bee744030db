"""Monthly rollups, month comparison and recurring-expense detection.

All functions are pure: they read an expense snapshot and never touch storage.
"""

import datetime as dt
from collections.abc import Iterable

from app.core.errors import InvalidRequest
from app.core.models import ComparisonBucket, Expense, ExpenseTemplate, MonthlyBucket
from app.reports.periods import (
    DEFAULT_RECURRING_MONTHS,
    TemplateKey,
    expenses_in_window,
    month_key,
    require_positive_window,
    template_key,
)

MIN_RECURRING_MONTHS = 2


def _accumulate(bucket: MonthlyBucket, expense: Expense) -> None:
    bucket.total += expense.amount
    bucket.categories[expense.category] = bucket.categories.get(expense.category, 0) + expense.amount


def monthly_report(expenses: Iterable[Expense]) -> dict[str, MonthlyBucket]:
    """Total every expense per YYYY-MM month and per category, ordered by month."""
    buckets: dict[str, MonthlyBucket] = {}
    for exp in expenses:
        _accumulate(buckets.setdefault(month_key(exp.date), MonthlyBucket()), exp)
    return {key: buckets[key] for key in sorted(buckets)}


def compare_months(expenses: Iterable[Expense], month1: str | None, month2: str | None) -> dict[str, ComparisonBucket]:
    """Build side-by-side totals and details for two YYYY-MM months.

    Both requested months are always present in the result, even when no expense falls in them.
    """
    if not month1 or not month2:
        msg = "Please provide two months for comparison (e.g., ?month1=YYYY-MM&month2=YYYY-MM)"
        raise InvalidRequest(msg)
    comparison = {month: ComparisonBucket() for month in (month1, month2)}
    for exp in expenses:
        bucket = comparison.get(month_key(exp.date))
        if bucket is None:
            continue
        _accumulate(bucket, exp)
        bucket.details.append(exp)
    return comparison


def recurring_expenses(
    expenses: Iterable[Expense],
    months: int = DEFAULT_RECURRING_MONTHS,
    today: dt.date | None = None,
) -> list[ExpenseTemplate]:
    """Find charges repeated in at least two distinct months of the trailing window."""
    require_positive_window(months)
    occurrences: dict[TemplateKey, set[str]] = {}
    for exp in expenses_in_window(expenses, months, today):
        occurrences.setdefault(template_key(exp), set()).add(month_key(exp.date))
    return [
        ExpenseTemplate(description=key[0], category=key[1], amount=key[2])
        for key, seen in occurrences.items()
        if len(seen) >= MIN_RECURRING_MONTHS
    ]
