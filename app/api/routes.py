"""FastAPI endpoints for the expense and todo collections.

This module defines the CRUD routes for expenses and todos plus the health check. Domain errors raised by the
services (`InvalidRequest`, `NotFound`) are turned into 400/404 responses by the handlers registered in `main.py`.
"""

from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_expense_service, get_todo_service
from app.core.models import Expense, ExpenseCreate, ExpenseUpdate, Todo, TodoCreate, TodoUpdate
from app.services.crud import ExpenseService, TodoService

router = APIRouter()

NOT_FOUND_EXPENSE = {
    "description": "Expense not found.",
    "content": {"application/json": {"example": {"detail": "Expense not found"}}},
}
NOT_FOUND_TODO = {
    "description": "Todo not found.",
    "content": {"application/json": {"example": {"detail": "Todo not found"}}},
}


@router.get("/expenses", response_model=list[Expense], summary="List all expenses")
def list_expenses(service: ExpenseService = Depends(get_expense_service)) -> list[Expense]:
    """Return every stored expense."""
    return service.list_all()


@router.post(
    "/expenses",
    response_model=Expense,
    status_code=201,
    summary="Create an expense",
    description=(
        "Create a new expense. `date` (YYYY-MM-DD), `amount` and `category` are required; "
        "`description` and `notes` default to an empty string.\n\n"
        "**Response:**\n"
        "- 201 Created: the stored expense including its generated `id`.\n"
        "- 400 Bad Request: if a required field is missing or `amount` is not a number."
    ),
    responses={
        400: {
            "description": "Missing or invalid fields.",
            "content": {"application/json": {"example": {"detail": "Date, amount, and category are required."}}},
        },
    },
)
def create_expense(payload: ExpenseCreate, service: ExpenseService = Depends(get_expense_service)) -> Expense:
    """Create a new expense."""
    return service.create(payload)


@router.get(
    "/expenses/{expense_id}",
    response_model=Expense,
    summary="Get an expense by id",
    responses={404: NOT_FOUND_EXPENSE},
)
def get_expense(expense_id: str, service: ExpenseService = Depends(get_expense_service)) -> Expense:
    """Return a single expense."""
    return service.get(expense_id)


@router.put(
    "/expenses/{expense_id}",
    response_model=Expense,
    summary="Update an expense",
    description=(
        "Partially update an expense. Empty `date`, `category` and `description` keep the stored value; "
        "`amount` and `notes` are replaced whenever they are present in the body."
    ),
    responses={
        400: {
            "description": "Invalid amount.",
            "content": {"application/json": {"example": {"detail": "Invalid amount provided."}}},
        },
        404: NOT_FOUND_EXPENSE,
    },
)
def update_expense(
    expense_id: str,
    payload: ExpenseUpdate,
    service: ExpenseService = Depends(get_expense_service),
) -> Expense:
    """Update an existing expense."""
    return service.update(expense_id, payload)


@router.delete(
    "/expenses/{expense_id}",
    status_code=204,
    summary="Delete an expense",
    responses={404: NOT_FOUND_EXPENSE},
)
def delete_expense(expense_id: str, service: ExpenseService = Depends(get_expense_service)) -> Response:
    """Delete an expense."""
    service.delete(expense_id)
    return Response(status_code=204)


@router.get("/todos", response_model=list[Todo], summary="List all todos")
def list_todos(service: TodoService = Depends(get_todo_service)) -> list[Todo]:
    """Return every stored todo."""
    return service.list_all()


@router.post(
    "/todos",
    response_model=Todo,
    status_code=201,
    summary="Create a todo",
    responses={
        400: {
            "description": "Missing text.",
            "content": {"application/json": {"example": {"detail": "Todo text is required."}}},
        },
    },
)
def create_todo(payload: TodoCreate, service: TodoService = Depends(get_todo_service)) -> Todo:
    """Create a new todo."""
    return service.create(payload)


@router.get("/todos/{todo_id}", response_model=Todo, summary="Get a todo by id", responses={404: NOT_FOUND_TODO})
def get_todo(todo_id: str, service: TodoService = Depends(get_todo_service)) -> Todo:
    """Return a single todo."""
    return service.get(todo_id)


@router.put("/todos/{todo_id}", response_model=Todo, summary="Update a todo", responses={404: NOT_FOUND_TODO})
def update_todo(todo_id: str, payload: TodoUpdate, service: TodoService = Depends(get_todo_service)) -> Todo:
    """Update text and/or completed on an existing todo."""
    return service.update(todo_id, payload)


@router.delete("/todos/{todo_id}", status_code=204, summary="Delete a todo", responses={404: NOT_FOUND_TODO})
def delete_todo(todo_id: str, service: TodoService = Depends(get_todo_service)) -> Response:
    """Delete a todo."""
    service.delete(todo_id)
    return Response(status_code=204)


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
