"""Shared utility functions for the Expense Tracker project."""

import logging
import math
import uuid
from datetime import UTC, datetime
from pathlib import Path

import colorlog

from app.core.errors import InvalidRequest


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a colorized format for the project."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def ensure_dir(path: str | Path) -> None:
    """Ensure a directory exists (like mkdir -p)."""
    Path(path).mkdir(parents=True, exist_ok=True)


def parse_amount(val: object) -> float:
    """Coerce a number or numeric string to a finite float, raising InvalidRequest otherwise."""
    if isinstance(val, bool) or val is None:
        raise InvalidRequest("Invalid amount provided.")
    try:
        amount = float(val)
    except (ValueError, TypeError) as exc:
        raise InvalidRequest("Invalid amount provided.") from exc
    if not math.isfinite(amount):
        raise InvalidRequest("Invalid amount provided.")
    return amount


def new_record_id() -> str:
    """Return a fresh opaque record identifier."""
    return uuid.uuid4().hex


def utcnow_iso() -> str:
    """Get the current UTC time as an ISO8601 string."""
    return datetime.now(UTC).isoformat()
