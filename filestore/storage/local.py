"""Local filesystem storage backend."""
import os
import shutil
from collections.abc import Iterator

from filestore.core.exceptions import (
    FileExistsConflictError,
    InvalidDirectoryError,
    ResourceNotFoundError,
)
from filestore.core.logging import get_logger
from filestore.core.models import BackendType, WriteConfig, split_write_config, to_bytes
from filestore.storage.paths import normalize_path

logger = get_logger(__name__)


def sort_paths(paths: list[str]) -> list[str]:
    """Sort paths case-insensitively, ties broken by exact value."""
    return sorted(paths, key=lambda p: (p.lower(), p))


class LocalStorage:
    """Local filesystem storage backend.

    Every caller path is normalized and joined under ``root``; nothing can
    reach outside it. Write config keys other than ``overwrite`` are ignored.

    Example:
        storage = LocalStorage("/data")

        storage.write("reports/q1.txt", b"hello")
        data = storage.read("reports/q1.txt")

        storage.exists("../etc/passwd")  # raises PathTraversalError
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = os.fspath(root).rstrip(os.sep)

    @property
    def name(self) -> str:
        return BackendType.LOCAL.value

    def _absolute_path(self, path: str) -> str:
        """Resolve a caller path to its location under root."""
        normalized = normalize_path(path.lstrip("/"), backend=self)
        return f"{self.root}/{normalized}"

    def exists(self, path: str) -> bool:
        """Check if a file or directory exists."""
        return os.path.exists(self._absolute_path(path))

    def read(self, path: str) -> bytes:
        """Read file contents, b"" on failure."""
        target = self.path(path)

        try:
            with open(target, "rb") as f:
                return f.read()
        except OSError as e:
            logger.warning("Failed to read file", path=path, error=str(e))
            return b""

    def write(
        self,
        path: str,
        contents: bytes | str,
        config: WriteConfig | None = None,
    ) -> bool:
        """Write file contents.

        Missing parent directories are created. An empty write is reported
        as a failure since nothing was written.
        """
        overwrite, _ = split_write_config(config)
        if self.exists(path) and not overwrite:
            raise FileExistsConflictError(
                "File already exists", backend=self, details={"path": path}
            )

        target = self._absolute_path(path)
        data = to_bytes(contents)

        try:
            os.makedirs(os.path.dirname(target), exist_ok=True)
            with open(target, "wb") as f:
                written = f.write(data)
        except OSError as e:
            logger.warning("Failed to write file", path=path, error=str(e))
            return False

        logger.debug("File written", path=target, bytes=written)
        return written > 0

    def delete(self, path: str) -> bool:
        """Delete a file."""
        target = self.path(path)

        try:
            os.remove(target)
        except OSError as e:
            logger.warning("Failed to delete file", path=path, error=str(e))
            return False

        logger.debug("File deleted", path=target)
        return True

    def size(self, path: str) -> int:
        """File size in bytes, 0 on failure."""
        target = self.path(path)

        try:
            return os.path.getsize(target)
        except OSError:
            return 0

    def last_modified(self, path: str) -> int:
        """File modification time as a unix timestamp, 0 on failure."""
        target = self.path(path)

        try:
            return int(os.path.getmtime(target))
        except OSError:
            return 0

    def path(self, path: str) -> str:
        """Absolute filesystem path of an existing file."""
        if not self.exists(path):
            raise ResourceNotFoundError(
                "File does not exist", backend=self, details={"path": path}
            )
        return self._absolute_path(path)

    def copy(self, source: str, destination: str) -> bool:
        """Copy a file, replacing the destination if present."""
        source_path = self._absolute_path(source)
        destination_path = self._absolute_path(destination)

        if not os.path.exists(source_path):
            return False

        try:
            shutil.copyfile(source_path, destination_path)
        except OSError as e:
            logger.warning(
                "Failed to copy file", source=source, destination=destination, error=str(e)
            )
            return False

        return True

    def move(self, source: str, destination: str) -> bool:
        """Rename a file, replacing the destination if present."""
        source_path = self._absolute_path(source)
        destination_path = self._absolute_path(destination)

        if not os.path.exists(source_path):
            return False

        try:
            os.replace(source_path, destination_path)
        except OSError as e:
            logger.warning(
                "Failed to move file", source=source, destination=destination, error=str(e)
            )
            return False

        return True

    def files(self, directory: str, recursive: bool = False) -> list[str]:
        """Absolute paths of files in a directory."""
        return self._list(self._absolute_path(directory), recursive, want_dirs=False)

    def directories(self, directory: str, recursive: bool = False) -> list[str]:
        """Absolute paths of subdirectories of a directory."""
        return self._list(self._absolute_path(directory), recursive, want_dirs=True)

    def create_directory(self, path: str) -> bool:
        """Create a directory and missing parents; False if it already exists."""
        target = self._absolute_path(path)

        try:
            os.makedirs(target, mode=0o755)
        except OSError as e:
            logger.debug("Failed to create directory", path=path, error=str(e))
            return False

        return True

    def delete_directory(self, path: str) -> bool:
        """Remove an empty directory."""
        target = self._absolute_path(path)

        if not os.path.isdir(target):
            raise InvalidDirectoryError(
                "Invalid directory", backend=self, details={"path": path}
            )

        try:
            os.rmdir(target)
        except OSError as e:
            logger.warning("Failed to delete directory", path=path, error=str(e))
            return False

        return True

    def _list(self, directory: str, recursive: bool, want_dirs: bool) -> list[str]:
        """List entries, keeping only directories or only non-directories."""
        try:
            entries = list(self._walk(directory, recursive))
        except OSError as e:
            logger.warning("Failed to list directory", path=directory, error=str(e))
            return []

        return sort_paths([entry.path for entry in entries if entry.is_dir() == want_dirs])

    def _walk(self, directory: str, recursive: bool) -> Iterator[os.DirEntry[str]]:
        """Yield entries depth-first, each directory before its children.

        os.scandir never yields ``.`` or ``..``.
        """
        with os.scandir(directory) as it:
            entries = list(it)

        for entry in entries:
            yield entry
            if recursive and entry.is_dir(follow_symlinks=False):
                yield from self._walk(entry.path, recursive)
