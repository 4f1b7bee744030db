"""Main entrypoint and application factory for the Expense Tracker API.

This module initializes the FastAPI application, configures logging, creates the expense and todo collections on
startup, maps domain errors to HTTP responses, and exposes the Scalar API reference endpoint. It also includes the
main entrypoint for running the app with Uvicorn.
"""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from scalar_fastapi import get_scalar_api_reference

from app.api import reports_router, router
from app.api.dependencies import get_backend
from app.core.errors import InvalidRequest, NotFound
from app.core.models import Expense, Todo
from app.core.settings import get_settings
from app.core.utils import ensure_dir, get_logger
from app.services.record_store import RecordStore

# Ensure the project root is in sys.path for 'uv run main.py' or 'python main.py'
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

logger = get_logger("expense-tracker")


# --- Logging Setup ---
def setup_logging() -> None:
    """Configure the file handler and level, and ensure the log directory exists."""
    settings = get_settings()
    log_path = Path(settings.log_file)
    ensure_dir(log_path.parent)
    logger.setLevel(settings.log_level.upper())
    # Add file handler for persistent logs (not colorized)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(file_handler)
    for name in ("expense-tracker.api", "expense-tracker.store", "expense-tracker.crud"):
        child = get_logger(name)
        child.setLevel(logger.level)
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler not in child.handlers:
                child.addHandler(handler)


setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan event handler that creates empty expense and todo collections when missing."""
    _ = app  # Silence unused argument warning
    settings = get_settings()
    backend = get_backend()
    RecordStore(backend, settings.expenses_file, Expense).ensure_initialized()
    RecordStore(backend, settings.todos_file, Todo).ensure_initialized()
    logger.info(f"Expenses stored in: {settings.expenses_file} ({settings.storage_backend})")
    logger.info(f"Todos stored in: {settings.todos_file} ({settings.storage_backend})")
    yield


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Expense Tracker API",
    description="""
    The Expense Tracker API stores expenses and todos and reports on spending.

    **Endpoints:**
    - `GET|POST /expenses`, `GET|PUT|DELETE /expenses/{id}`: Manage expenses.
    - `GET /reports/monthly`: Totals per month and category.
    - `GET /reports/compare?month1=YYYY-MM&month2=YYYY-MM`: Compare two months.
    - `GET /reports/recurring?months=N`: Charges repeated across months.
    - `GET /tags?months=N`: Distinct recent expense templates.
    - `GET|POST /todos`, `GET|PUT|DELETE /todos/{id}`: Manage todos.
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.
    """,
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)
app.include_router(reports_router)

api_logger = get_logger("expense-tracker.api")


@app.exception_handler(InvalidRequest)
async def invalid_request_handler(request: Request, exc: InvalidRequest) -> JSONResponse:
    """Map InvalidRequest to a 400 response."""
    api_logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    """Map NotFound to a 404 response."""
    api_logger.info(f"Not found {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/scalar", include_in_schema=False)
async def scalar_docs() -> JSONResponse:
    """Return Scalar API reference."""
    return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.server_host, port=settings.server_port, reload=True)
