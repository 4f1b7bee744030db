"""Local filesystem backend for JSON collections."""

import os
import tempfile
from pathlib import Path

from app.core.utils import ensure_dir

from .base import BaseFileBackend


class LocalFileService(BaseFileBackend):
    """Stores each document as a file under a root directory."""

    def __init__(self, root: str | Path) -> None:
        """Initialize LocalFileService and ensure the root directory exists."""
        self.root = Path(root)
        ensure_dir(self.root)

    def path_for(self, key: str) -> Path:
        """Resolve the file path for a key."""
        return self.root / key

    def read_bytes(self, key: str) -> bytes:
        """Read a document from disk."""
        return self.path_for(key).read_bytes()

    def write_bytes(self, key: str, data: bytes) -> None:
        """Write a document to a temp file in the same directory, then rename it over the target."""
        target = self.path_for(key)
        ensure_dir(target.parent)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def exists(self, key: str) -> bool:
        """Check if a document file exists."""
        return self.path_for(key).is_file()
