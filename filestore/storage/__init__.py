"""Storage module - File storage abstraction over local and object backends."""
from filestore.storage.base import StorageBackend
from filestore.storage.client import ObjectResponse, ObjectStoreClient
from filestore.storage.facade import Storage
from filestore.storage.factory import create_backend, create_storage
from filestore.storage.local import LocalStorage
from filestore.storage.object import ObjectStorage
from filestore.storage.paths import normalize_path

__all__ = [
    "StorageBackend",
    "Storage",
    "LocalStorage",
    "ObjectStorage",
    "ObjectStoreClient",
    "ObjectResponse",
    "normalize_path",
    "create_backend",
    "create_storage",
]
