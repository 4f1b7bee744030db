"""Backend registry for selecting the storage backend by name.

Backends register a factory taking the application settings; `build_backend` picks the one named by
`settings.storage_backend`.
"""

from collections.abc import Callable
from typing import ClassVar

from app.core.settings import Settings

from .base import BaseFileBackend
from .file_service import LocalFileService
from .s3_file_service import S3FileService

BackendFactory = Callable[[Settings], BaseFileBackend]


class BackendRegistry:
    """Registry for file backend factories."""

    _registry: ClassVar[dict[str, BackendFactory]] = {}

    @classmethod
    def register(cls, name: str, factory: BackendFactory) -> None:
        """Register a backend factory with a given name."""
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str) -> BackendFactory:
        """Retrieve a backend factory by name."""
        try:
            return cls._registry[name]
        except KeyError as exc:
            msg = f"Unknown storage backend '{name}'. Available: {', '.join(cls.available())}"
            raise ValueError(msg) from exc

    @classmethod
    def available(cls) -> list[str]:
        """List all available backend names."""
        return list(cls._registry.keys())


BackendRegistry.register("local", lambda settings: LocalFileService(settings.data_dir))
BackendRegistry.register("s3", S3FileService)


def build_backend(settings: Settings) -> BaseFileBackend:
    """Instantiate the backend selected in settings."""
    return BackendRegistry.get(settings.storage_backend)(settings)
