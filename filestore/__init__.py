"""filestore - one file API over local disk and S3-compatible object stores."""
from filestore.core.exceptions import FileStoreError, StorageError
from filestore.storage import LocalStorage, ObjectStorage, Storage, create_storage

__version__ = "0.1.0"

__all__ = [
    "Storage",
    "LocalStorage",
    "ObjectStorage",
    "create_storage",
    "FileStoreError",
    "StorageError",
]
