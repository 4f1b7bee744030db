"""Domain exceptions raised by the tracker services and report functions."""


class TrackerError(Exception):
    """Base class for all tracker errors."""


class InvalidRequest(TrackerError, ValueError):
    """A required parameter is missing or malformed."""


class NotFound(TrackerError, LookupError):
    """No record matches the requested id."""


class StorageError(TrackerError, OSError):
    """The persistence layer failed to write a collection."""
