"""Pydantic models for the Expense Tracker.

This module defines the persisted records (Expense, Todo), the request payloads used to create and update them,
and the derived report shapes returned by the reporting endpoints.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, field_validator

# Raw amount as sent; booleans stay booleans so the service can reject them.
RawAmount = StrictFloat | StrictInt | StrictBool | str | None


class Expense(BaseModel):
    """A single recorded expense."""

    id: str
    date: dt.date
    amount: float
    category: str
    description: str = ""
    notes: str = ""


class ExpenseCreate(BaseModel):
    """Payload for creating an expense. Amount is validated by the service so numeric strings are accepted."""

    date: dt.date | None = None
    amount: RawAmount = None
    category: str | None = None
    description: str | None = None
    notes: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def blank_date_is_missing(cls, value: object) -> object:
        """Treat an empty date string like an absent date."""
        return None if value == "" else value


class ExpenseUpdate(BaseModel):
    """Partial update for an expense.

    `date`, `category` and `description` only replace the stored value when non-empty. `amount` and `notes`
    replace it whenever they are present in the payload, which is tracked through `model_fields_set`.
    """

    date: dt.date | None = None
    amount: RawAmount = None
    category: str | None = None
    description: str | None = None
    notes: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def blank_date_is_missing(cls, value: object) -> object:
        """Treat an empty date string like an absent date."""
        return None if value == "" else value


class Todo(BaseModel):
    """A todo list entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    completed: bool = False
    created_at: str = Field(alias="createdAt")


class TodoCreate(BaseModel):
    """Payload for creating a todo."""

    text: str | None = None
    completed: bool | None = None


class TodoUpdate(BaseModel):
    """Partial update for a todo."""

    text: str | None = None
    completed: bool | None = None


class MonthlyBucket(BaseModel):
    """Totals for one YYYY-MM month."""

    total: float = 0
    categories: dict[str, float] = Field(default_factory=dict)


class ComparisonBucket(MonthlyBucket):
    """Monthly totals plus the expenses that produced them."""

    details: list[Expense] = Field(default_factory=list)


class ExpenseTemplate(BaseModel):
    """The description/category/amount triple identifying a repeated charge."""

    description: str
    category: str
    amount: float
