"""Shared fixtures: a TestClient whose stores live in a temporary directory, and sample expenses."""

import datetime as dt
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_backend
from app.core.models import Expense
from app.services.file_service import LocalFileService
from main import app


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding the JSON collections for one test."""
    return tmp_path / "data"


@pytest.fixture
def client(data_dir: Path) -> Iterator[TestClient]:
    """TestClient with the storage backend pointed at the test data directory."""
    backend = LocalFileService(data_dir)
    app.dependency_overrides[get_backend] = lambda: backend
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_expenses() -> list[Expense]:
    """Two monthly coffees and a one-off snack, early 2024."""
    return [
        Expense(id="1", date=dt.date(2024, 1, 5), amount=10, category="Food", description="Coffee"),
        Expense(id="2", date=dt.date(2024, 2, 5), amount=10, category="Food", description="Coffee"),
        Expense(id="3", date=dt.date(2024, 3, 1), amount=5, category="Food", description="Snack"),
    ]
