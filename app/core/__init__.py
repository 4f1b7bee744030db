"""Core package: provides models, error types, settings, and shared utilities."""

from .errors import InvalidRequest, NotFound, StorageError, TrackerError  # noqa: F401
from .models import Expense, ExpenseTemplate, MonthlyBucket, Todo  # noqa: F401
from .settings import Settings  # noqa: F401
from .utils import get_logger  # noqa: F401
