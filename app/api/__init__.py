"""API package: provides FastAPI dependencies and route definitions for the application."""

from .dependencies import get_backend, get_expense_service, get_todo_service  # noqa: F401
from .reports import router as reports_router  # noqa: F401
from .routes import router  # noqa: F401
