"""Core module - shared kernel for filestore."""
from filestore.core.config import settings
from filestore.core.exceptions import FileStoreError, StorageError

__all__ = ["settings", "FileStoreError", "StorageError"]
