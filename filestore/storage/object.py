"""Object store (S3-compatible) storage backend."""
import hashlib
from email.utils import parsedate_to_datetime

from filestore.core.exceptions import FileExistsConflictError, ResourceNotFoundError
from filestore.core.logging import get_logger
from filestore.core.models import (
    OVERWRITE,
    BackendType,
    WriteConfig,
    split_write_config,
    to_bytes,
)
from filestore.storage.client import ObjectResponse, ObjectStoreClient

logger = get_logger(__name__)


def cache_key(path: str) -> str:
    """Digest used to key the metadata cache."""
    return hashlib.md5(path.encode("utf-8")).hexdigest()


class ObjectStorage:
    """Object store backend.

    Keys are used verbatim. A metadata cache keeps the last successful info
    probe per key for the lifetime of the instance, so repeated existence,
    size and timestamp checks on an existing object cost one remote call.
    Missing objects are never cached. The cache is unbounded and not
    synchronized; do not share an instance across threads.

    The store has no directory concept: listings are empty and directory
    operations return False.

    Example:
        storage = ObjectStorage("my-bucket", ObjectStoreClient.from_settings())

        storage.write("reports/q1.txt", b"hello", {"Content-Type": "text/plain"})
        storage.size("reports/q1.txt")  # 5
    """

    def __init__(self, bucket: str, client: ObjectStoreClient) -> None:
        self.bucket = bucket
        self.client = client
        self._cache: dict[str, ObjectResponse] = {}

    @property
    def name(self) -> str:
        return BackendType.S3.value

    def get_metadata(self, path: str) -> ObjectResponse | None:
        """Cached info probe; None when the object is missing or the call fails."""
        key = cache_key(path)
        if key in self._cache:
            return self._cache[key]

        response = self.client.get_object_info(self.bucket, path)
        if response.ok and response.code == 200:
            self._cache[key] = response
            return response
        return None

    def invalidate(self, path: str) -> None:
        """Drop the cached metadata for a key."""
        self._cache.pop(cache_key(path), None)

    def clear_cache(self) -> None:
        """Drop all cached metadata."""
        self._cache.clear()

    def exists(self, path: str) -> bool:
        metadata = self.get_metadata(path)
        return metadata is not None and metadata.code == 200

    def read(self, path: str) -> bytes:
        response = self.client.get_object(self.bucket, path)
        return response.body if response.ok else b""

    def write(
        self,
        path: str,
        contents: bytes | str,
        config: WriteConfig | None = None,
    ) -> bool:
        """Put an object; non-overwrite keys in ``config`` become request headers."""
        overwrite, headers = split_write_config(config)
        if self.exists(path) and not overwrite:
            raise FileExistsConflictError(
                "File already exists", backend=self, details={"path": path}
            )

        response = self.client.put_object(self.bucket, path, to_bytes(contents), headers)
        if not response.ok:
            logger.warning(
                "Failed to write object", bucket=self.bucket, key=path, error=response.error
            )
            return False

        self.invalidate(path)
        logger.debug("Object written", bucket=self.bucket, key=path)
        return True

    def delete(self, path: str) -> bool:
        response = self.client.delete_object(self.bucket, path)
        if not response.ok:
            logger.warning(
                "Failed to delete object", bucket=self.bucket, key=path, error=response.error
            )
            return False

        self.invalidate(path)
        logger.debug("Object deleted", bucket=self.bucket, key=path)
        return True

    def size(self, path: str) -> int:
        metadata = self.get_metadata(path)
        if metadata is None:
            return 0

        try:
            return int(metadata.headers.get("content-length", 0))
        except ValueError:
            return 0

    def last_modified(self, path: str) -> int:
        metadata = self.get_metadata(path)
        if metadata is None:
            return 0

        value = metadata.headers.get("last-modified", "")
        if not value:
            return 0

        try:
            return int(parsedate_to_datetime(value).timestamp())
        except (TypeError, ValueError):
            return 0

    def path(self, path: str) -> str:
        """The key itself, if the object exists."""
        if not self.exists(path):
            raise ResourceNotFoundError(
                "File does not exist", backend=self, details={"path": path}
            )
        return path

    def copy(self, source: str, destination: str) -> bool:
        """Read the source and write it to the destination."""
        if not self.exists(source):
            return False
        return self.write(destination, self.read(source), {OVERWRITE: True})

    def move(self, source: str, destination: str) -> bool:
        """Copy then delete; the source survives a failed copy."""
        if not self.exists(source):
            return False
        if source == destination:
            return True

        if not self.copy(source, destination):
            return False
        return self.delete(source)

    def files(self, directory: str, recursive: bool = False) -> list[str]:
        return []

    def directories(self, directory: str, recursive: bool = False) -> list[str]:
        return []

    def create_directory(self, path: str) -> bool:
        return False

    def delete_directory(self, path: str) -> bool:
        return False
