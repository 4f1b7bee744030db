"""Base file backend abstraction for collection storage.

A backend stores opaque byte documents under string keys. The record store builds JSON collections on top of it,
so the same store works against the local filesystem or an S3 bucket.
"""

from abc import ABC, abstractmethod


class BaseFileBackend(ABC):
    """Abstract base class for all file backends."""

    @abstractmethod
    def read_bytes(self, key: str) -> bytes:
        """Return the document stored under key. Raises FileNotFoundError when absent."""

    @abstractmethod
    def write_bytes(self, key: str, data: bytes) -> None:
        """Replace the document stored under key."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check whether a document is stored under key."""
