"""Domain exceptions for filestore."""
from enum import Enum
from typing import Any


class FileStoreError(Exception):
    """Base exception for all filestore errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(FileStoreError):
    """Invalid or incomplete storage configuration."""

    pass


# Storage errors
class StorageErrorKind(str, Enum):
    """What a storage backend refused to do."""

    EXISTS = "exists"
    NOT_FOUND = "not_found"
    INVALID_PATH = "invalid_path"
    PATH_TRAVERSAL = "path_traversal"
    INVALID_DIRECTORY = "invalid_directory"


class StorageError(FileStoreError):
    """Misuse of a storage backend.

    Carries the backend instance that raised it, so callers can tell which
    adapter failed, and a ``kind`` tag to branch on without string matching.
    Routine I/O failures are never raised; they degrade to False, 0 or b"".
    """

    kind: StorageErrorKind

    def __init__(
        self,
        message: str,
        backend: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.backend = backend

    @property
    def backend_name(self) -> str | None:
        """Name of the raising backend, if any."""
        return getattr(self.backend, "name", None)


class FileExistsConflictError(StorageError):
    """Write against an existing resource without the overwrite option."""

    kind = StorageErrorKind.EXISTS


class ResourceNotFoundError(StorageError):
    """Resource does not exist."""

    kind = StorageErrorKind.NOT_FOUND


class InvalidPathError(StorageError):
    """Path contains forbidden control or format characters."""

    kind = StorageErrorKind.INVALID_PATH


class PathTraversalError(StorageError):
    """Path ascends past the backend root."""

    kind = StorageErrorKind.PATH_TRAVERSAL


class InvalidDirectoryError(StorageError):
    """Directory operation against a missing or non-directory target."""

    kind = StorageErrorKind.INVALID_DIRECTORY
