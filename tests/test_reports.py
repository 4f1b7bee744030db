"""Unit tests for the monthly, comparison, recurring and tag reports."""

import datetime as dt

import pytest

from app.core.errors import InvalidRequest
from app.core.models import Expense, ExpenseTemplate
from app.reports import (
    compare_months,
    extract_tags,
    month_key,
    monthly_report,
    parse_months_window,
    recurring_expenses,
    template_key,
    window_cutoff,
)

MARCH_2024 = dt.date(2024, 3, 15)


def _expense(idx: int, date: str, amount: float, category: str = "Food", description: str = "Coffee") -> Expense:
    return Expense(
        id=str(idx), date=dt.date.fromisoformat(date), amount=amount, category=category, description=description
    )


def test_month_key_zero_pads() -> None:
    """Month keys are YYYY-MM with a zero-padded month."""
    if month_key(dt.date(2024, 1, 31)) != "2024-01":
        raise AssertionError("Expected 2024-01")
    if month_key(dt.date(987, 12, 1)) != "0987-12":
        raise AssertionError("Expected 0987-12")


def test_template_key_is_exact_tuple() -> None:
    """Template keys compare raw values, so case and whitespace matter."""
    first = _expense(1, "2024-01-01", 10, description="Coffee")
    second = _expense(2, "2024-02-01", 10, description="coffee ")
    if template_key(first) != ("Coffee", "Food", 10):
        raise AssertionError(f"Unexpected key {template_key(first)}")
    if template_key(first) == template_key(second):
        raise AssertionError("Expected keys to differ on case/whitespace")


@pytest.mark.parametrize(
    ("months", "today", "expected"),
    [
        (3, dt.date(2024, 3, 15), dt.date(2023, 12, 1)),
        (2, dt.date(2024, 1, 31), dt.date(2023, 11, 1)),
        (1, dt.date(2024, 12, 1), dt.date(2024, 11, 1)),
        (14, dt.date(2024, 3, 2), dt.date(2023, 1, 1)),
    ],
)
def test_window_cutoff_uses_month_arithmetic(months: int, today: dt.date, expected: dt.date) -> None:
    """The cutoff is the first of the month `months` months back, rolling the year."""
    got = window_cutoff(months, today)
    if got != expected:
        msg = f"Expected {expected}, got {got}"
        raise AssertionError(msg)


def test_parse_months_window() -> None:
    """Missing values use the default; numeric strings parse."""
    if parse_months_window(None, 3) != 3:
        raise AssertionError("Expected default 3")
    if parse_months_window("", 2) != 2:
        raise AssertionError("Expected default 2")
    if parse_months_window("6", 3) != 6:
        raise AssertionError("Expected 6")


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "1.5"])
def test_parse_months_window_rejects_invalid(raw: str) -> None:
    """Non-numeric and non-positive windows are invalid requests."""
    with pytest.raises(InvalidRequest):
        parse_months_window(raw, 3)


def test_monthly_report_example(sample_expenses: list[Expense]) -> None:
    """Each month gets its total and per-category subtotal."""
    report = monthly_report(sample_expenses)
    got = {key: bucket.model_dump() for key, bucket in report.items()}
    expected = {
        "2024-01": {"total": 10, "categories": {"Food": 10}},
        "2024-02": {"total": 10, "categories": {"Food": 10}},
        "2024-03": {"total": 5, "categories": {"Food": 5}},
    }
    if got != expected:
        msg = f"Expected {expected}, got {got}"
        raise AssertionError(msg)


def test_monthly_report_sorted_and_sums() -> None:
    """Keys come out in chronological order and totals add up to the sum of amounts."""
    expenses = [
        _expense(1, "2024-11-02", 4.5, category="Travel"),
        _expense(2, "2023-02-10", 3),
        _expense(3, "2024-02-01", 7.25),
        _expense(4, "2024-11-20", 1.5),
    ]
    report = monthly_report(expenses)
    if list(report) != ["2023-02", "2024-02", "2024-11"]:
        msg = f"Unexpected key order {list(report)}"
        raise AssertionError(msg)
    if sum(bucket.total for bucket in report.values()) != pytest.approx(sum(exp.amount for exp in expenses)):
        raise AssertionError("Monthly totals do not add up to the sum of amounts")
    if report["2024-11"].categories != {"Travel": 4.5, "Food": 1.5}:
        msg = f"Unexpected categories {report['2024-11'].categories}"
        raise AssertionError(msg)


def test_monthly_report_empty() -> None:
    """No expenses yields an empty report."""
    if monthly_report([]) != {}:
        raise AssertionError("Expected empty report")


def test_compare_months_includes_empty_month(sample_expenses: list[Expense]) -> None:
    """Both requested months are present even without data."""
    comparison = compare_months(sample_expenses, "2024-01", "2024-09")
    if list(comparison) != ["2024-01", "2024-09"]:
        msg = f"Unexpected keys {list(comparison)}"
        raise AssertionError(msg)
    jan, sep = comparison["2024-01"], comparison["2024-09"]
    if jan.total != 10 or jan.categories != {"Food": 10} or [exp.id for exp in jan.details] != ["1"]:
        msg = f"Unexpected January bucket {jan}"
        raise AssertionError(msg)
    if sep.total != 0 or sep.categories != {} or sep.details != []:
        msg = f"Unexpected September bucket {sep}"
        raise AssertionError(msg)


def test_compare_same_month_once(sample_expenses: list[Expense]) -> None:
    """Equal months produce a single key with expenses counted once."""
    comparison = compare_months(sample_expenses, "2024-02", "2024-02")
    if list(comparison) != ["2024-02"] or comparison["2024-02"].total != 10:
        msg = f"Unexpected comparison {comparison}"
        raise AssertionError(msg)


def test_compare_details_keep_input_order() -> None:
    """Details follow the original sequence order."""
    expenses = [_expense(1, "2024-05-20", 1), _expense(2, "2024-05-01", 2), _expense(3, "2024-06-01", 3)]
    comparison = compare_months(expenses, "2024-06", "2024-05")
    if [exp.id for exp in comparison["2024-05"].details] != ["1", "2"]:
        raise AssertionError("Expected details in input order")


@pytest.mark.parametrize(("month1", "month2"), [(None, "2024-01"), ("2024-01", ""), (None, None)])
def test_compare_requires_both_months(month1: str | None, month2: str | None) -> None:
    """A missing month is an invalid request."""
    with pytest.raises(InvalidRequest):
        compare_months([], month1, month2)


def test_recurring_example(sample_expenses: list[Expense]) -> None:
    """Coffee appears in two months and is recurring; the single snack is not."""
    got = recurring_expenses(sample_expenses, 3, today=MARCH_2024)
    expected = [ExpenseTemplate(description="Coffee", category="Food", amount=10)]
    if got != expected:
        msg = f"Expected {expected}, got {got}"
        raise AssertionError(msg)


def test_recurring_needs_distinct_months() -> None:
    """Two occurrences in the same month do not make a charge recurring."""
    expenses = [_expense(1, "2024-03-01", 10), _expense(2, "2024-03-10", 10)]
    if recurring_expenses(expenses, 3, today=MARCH_2024) != []:
        raise AssertionError("Same-month repeats must not be recurring")


def test_recurring_respects_window() -> None:
    """Occurrences before the cutoff or after today are ignored."""
    expenses = [
        _expense(1, "2023-11-30", 10),
        _expense(2, "2024-01-05", 10),
        _expense(3, "2024-04-01", 10),
        _expense(4, "2023-12-01", 20, description="Gym"),
        _expense(5, "2024-03-15", 20, description="Gym"),
    ]
    got = recurring_expenses(expenses, 3, today=MARCH_2024)
    if got != [ExpenseTemplate(description="Gym", category="Food", amount=20)]:
        msg = f"Unexpected recurring result {got}"
        raise AssertionError(msg)


def test_recurring_first_occurrence_order() -> None:
    """Recurring groups are listed in order of their first occurrence."""
    expenses = [
        _expense(1, "2024-01-02", 15, description="Gym"),
        _expense(2, "2024-01-03", 10),
        _expense(3, "2024-02-03", 10),
        _expense(4, "2024-02-02", 15, description="Gym"),
    ]
    got = [tpl.description for tpl in recurring_expenses(expenses, 3, today=MARCH_2024)]
    if got != ["Gym", "Coffee"]:
        msg = f"Unexpected order {got}"
        raise AssertionError(msg)


@pytest.mark.parametrize("months", [0, -2])
def test_recurring_rejects_bad_window(months: int) -> None:
    """Window sizes must be positive."""
    with pytest.raises(InvalidRequest):
        recurring_expenses([], months)


def test_tags_dedupe_first_seen(sample_expenses: list[Expense]) -> None:
    """Each template appears once, in first-seen order, without a month threshold."""
    got = extract_tags(sample_expenses, 3, today=MARCH_2024)
    expected = [
        ExpenseTemplate(description="Coffee", category="Food", amount=10),
        ExpenseTemplate(description="Snack", category="Food", amount=5),
    ]
    if got != expected:
        msg = f"Expected {expected}, got {got}"
        raise AssertionError(msg)


def test_tags_default_window_is_two_months(sample_expenses: list[Expense]) -> None:
    """The default window reaches back two months from the current month."""
    got = extract_tags(sample_expenses, today=dt.date(2024, 4, 2))
    if [tpl.description for tpl in got] != ["Coffee", "Snack"]:
        msg = f"Unexpected tags {got}"
        raise AssertionError(msg)
    if extract_tags(sample_expenses, today=dt.date(2024, 6, 1)) != []:
        raise AssertionError("Expected nothing within April-June")


def test_tags_superset_of_recurring(sample_expenses: list[Expense]) -> None:
    """Every recurring template is also a tag for the same window."""
    recurring = recurring_expenses(sample_expenses, 3, today=MARCH_2024)
    tags = extract_tags(sample_expenses, 3, today=MARCH_2024)
    missing = [tpl for tpl in recurring if tpl not in tags]
    if missing:
        msg = f"Recurring templates missing from tags: {missing}"
        raise AssertionError(msg)


def test_tags_rejects_bad_window() -> None:
    """Window sizes must be positive."""
    with pytest.raises(InvalidRequest):
        extract_tags([], 0)


def test_huge_window_covers_everything(sample_expenses: list[Expense]) -> None:
    """A window reaching back past year 1 includes every expense instead of failing."""
    if window_cutoff(30000, dt.date(2026, 10, 19)) != dt.date.min:
        raise AssertionError("Expected the cutoff to clamp to date.min")
    recurring = recurring_expenses(sample_expenses, 30000, today=MARCH_2024)
    if [tpl.description for tpl in recurring] != ["Coffee"]:
        msg = f"Unexpected recurring result {recurring}"
        raise AssertionError(msg)
    tags = extract_tags(sample_expenses, 30000, today=MARCH_2024)
    if [tpl.description for tpl in tags] != ["Coffee", "Snack"]:
        msg = f"Unexpected tags {tags}"
        raise AssertionError(msg)
