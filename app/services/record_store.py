"""JSON record store: load-all/save-all persistence for one collection."""

import json
from collections.abc import Sequence
from typing import Generic, TypeVar

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ValidationError

from app.core.errors import StorageError
from app.core.utils import get_logger

from .base import BaseFileBackend

logger = get_logger("expense-tracker.store")

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """Holds an ordered collection of records as a pretty-printed JSON array under one backend key."""

    def __init__(self, backend: BaseFileBackend, key: str, model: type[RecordT]) -> None:
        """Initialize the store for `model` records stored under `key`."""
        self.backend = backend
        self.key = key
        self.model = model

    def load(self) -> list[RecordT]:
        """Return every stored record. Missing or corrupt data yields an empty list."""
        try:
            raw = json.loads(self.backend.read_bytes(self.key))
        except FileNotFoundError:
            return []
        except (OSError, ValueError, ClientError, BotoCoreError) as exc:
            logger.warning(f"Could not read {self.key}, treating collection as empty: {exc}")
            return []
        if not isinstance(raw, list):
            logger.warning(f"{self.key} does not hold a JSON array, treating collection as empty")
            return []
        records = []
        for idx, item in enumerate(raw):
            try:
                records.append(self.model.model_validate(item))
            except ValidationError as exc:
                logger.warning(f"Skipping invalid record #{idx} in {self.key}: {exc.errors(include_url=False)}")
        return records

    def save(self, records: Sequence[RecordT]) -> None:
        """Replace the whole stored collection."""
        payload = [record.model_dump(mode="json", by_alias=True) for record in records]
        data = json.dumps(payload, indent=2).encode("utf-8")
        try:
            self.backend.write_bytes(self.key, data)
        except (OSError, ClientError, BotoCoreError) as exc:
            logger.exception(f"Failed to write {self.key}")
            msg = f"Failed to write {self.key}: {exc}"
            raise StorageError(msg) from exc

    def ensure_initialized(self) -> None:
        """Write an empty collection if nothing is stored yet."""
        if not self.backend.exists(self.key):
            logger.info(f"Initializing empty collection {self.key}")
            self.save([])
