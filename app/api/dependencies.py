"""FastAPI dependencies for DI (settings, storage backend, record stores, services).

Tests override `get_backend` through `app.dependency_overrides` to point every store at a temporary directory.
"""

from functools import lru_cache

from fastapi import Depends

from app.core.models import Expense, Todo
from app.core.settings import Settings, get_settings
from app.services.base import BaseFileBackend
from app.services.crud import ExpenseService, TodoService
from app.services.record_store import RecordStore
from app.services.registry import build_backend


@lru_cache
def get_backend() -> BaseFileBackend:
    """Provide the configured storage backend, built once per process."""
    return build_backend(get_settings())


def get_expense_store(
    backend: BaseFileBackend = Depends(get_backend),
    settings: Settings = Depends(get_settings),
) -> RecordStore[Expense]:
    """Provide the expenses record store."""
    return RecordStore(backend, settings.expenses_file, Expense)


def get_todo_store(
    backend: BaseFileBackend = Depends(get_backend),
    settings: Settings = Depends(get_settings),
) -> RecordStore[Todo]:
    """Provide the todos record store."""
    return RecordStore(backend, settings.todos_file, Todo)


def get_expense_service(store: RecordStore[Expense] = Depends(get_expense_store)) -> ExpenseService:
    """Provide an ExpenseService instance for dependency injection."""
    return ExpenseService(store)


def get_todo_service(store: RecordStore[Todo] = Depends(get_todo_store)) -> TodoService:
    """Provide a TodoService instance for dependency injection."""
    return TodoService(store)
