"""Distinct recent expense templates, used to prefill new expenses."""

import datetime as dt
from collections.abc import Iterable

from app.core.models import Expense, ExpenseTemplate
from app.reports.periods import (
    DEFAULT_TAG_MONTHS,
    TemplateKey,
    expenses_in_window,
    require_positive_window,
    template_key,
)


def extract_tags(
    expenses: Iterable[Expense],
    months: int = DEFAULT_TAG_MONTHS,
    today: dt.date | None = None,
) -> list[ExpenseTemplate]:
    """Return each distinct description/category/amount seen in the window, first occurrence first."""
    require_positive_window(months)
    tags: dict[TemplateKey, ExpenseTemplate] = {}
    for exp in expenses_in_window(expenses, months, today):
        key = template_key(exp)
        if key not in tags:
            tags[key] = ExpenseTemplate(description=exp.description, category=exp.category, amount=exp.amount)
    return list(tags.values())
