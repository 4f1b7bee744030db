"""FastAPI endpoints for the derived expense reports and tag suggestions."""

import datetime as dt

from fastapi import APIRouter, Depends

from app.api.dependencies import get_expense_service
from app.core.models import ComparisonBucket, ExpenseTemplate, MonthlyBucket
from app.reports import compare_months, extract_tags, monthly_report, parse_months_window, recurring_expenses
from app.reports.periods import DEFAULT_RECURRING_MONTHS, DEFAULT_TAG_MONTHS
from app.services.crud import ExpenseService

router = APIRouter()

INVALID_MONTHS = {
    "description": "Invalid months parameter.",
    "content": {"application/json": {"example": {"detail": "Invalid number of months specified."}}},
}


@router.get(
    "/reports/monthly",
    response_model=dict[str, MonthlyBucket],
    summary="Monthly totals by category",
    description="Total of all expenses per `YYYY-MM` month, with per-category subtotals, ordered by month.",
    responses={
        200: {
            "description": "Monthly report.",
            "content": {"application/json": {"example": {"2024-01": {"total": 10, "categories": {"Food": 10}}}}},
        },
    },
)
def get_monthly_report(service: ExpenseService = Depends(get_expense_service)) -> dict[str, MonthlyBucket]:
    """Return the monthly report over all expenses."""
    return monthly_report(service.list_all())


@router.get(
    "/reports/compare",
    response_model=dict[str, ComparisonBucket],
    summary="Compare two months",
    description=(
        "Totals, category subtotals and the matching expenses for two months.\n\n"
        "**Query parameters:**\n"
        "- `month1`, `month2`: months in `YYYY-MM` form, both required."
    ),
    responses={
        400: {
            "description": "Missing month.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Please provide two months for comparison (e.g., ?month1=YYYY-MM&month2=YYYY-MM)"
                    }
                }
            },
        },
    },
)
def get_comparison(
    month1: str | None = None,
    month2: str | None = None,
    service: ExpenseService = Depends(get_expense_service),
) -> dict[str, ComparisonBucket]:
    """Return the side-by-side comparison for two months."""
    return compare_months(service.list_all(), month1, month2)


@router.get(
    "/reports/recurring",
    response_model=list[ExpenseTemplate],
    summary="Recurring expenses",
    description=(
        "Expenses with the same description, category and amount seen in at least two distinct months "
        f"within the last `months` months (default {DEFAULT_RECURRING_MONTHS})."
    ),
    responses={400: INVALID_MONTHS},
)
def get_recurring(
    months: str | None = None,
    service: ExpenseService = Depends(get_expense_service),
) -> list[ExpenseTemplate]:
    """Return recurring expense templates for the trailing window."""
    window = parse_months_window(months, DEFAULT_RECURRING_MONTHS)
    return recurring_expenses(service.list_all(), window, dt.date.today())


@router.get(
    "/tags",
    response_model=list[ExpenseTemplate],
    summary="Recent expense tags",
    description=(
        "Distinct description/category/amount combinations seen within the last `months` months "
        f"(default {DEFAULT_TAG_MONTHS}), in first-seen order."
    ),
    responses={400: INVALID_MONTHS},
)
def get_tags(
    months: str | None = None,
    service: ExpenseService = Depends(get_expense_service),
) -> list[ExpenseTemplate]:
    """Return distinct recent expense templates."""
    window = parse_months_window(months, DEFAULT_TAG_MONTHS)
    return extract_tags(service.list_all(), window, dt.date.today())
