"""Storage facade over a single backend."""
from filestore.core.models import OVERWRITE, WriteConfig, to_bytes
from filestore.storage.base import StorageBackend


class Storage:
    """Uniform file operations over one storage backend.

    Every operation is passed straight to the backend, so behaviour is the
    same whichever backend is held. ``append`` and ``prepend`` are built from
    read + write: they rewrite the whole file and are not atomic.

    Example:
        storage = Storage(LocalStorage("/data"))

        storage.write("notes.txt", "first")
        storage.append("notes.txt", "second")
        storage.read("notes.txt")  # b"first\\nsecond"
    """

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend

    @property
    def backend(self) -> StorageBackend:
        """The backend this facade delegates to."""
        return self._backend

    def exists(self, path: str) -> bool:
        return self._backend.exists(path)

    def missing(self, path: str) -> bool:
        return not self._backend.exists(path)

    def read(self, path: str) -> bytes:
        return self._backend.read(path)

    def write(
        self,
        path: str,
        contents: bytes | str,
        config: WriteConfig | None = None,
    ) -> bool:
        return self._backend.write(path, contents, config)

    def append(self, path: str, data: bytes | str, separator: bytes | str = "\n") -> bool:
        """Append to a file, creating it if missing."""
        if self.exists(path):
            contents = self.read(path) + to_bytes(separator) + to_bytes(data)
            return self.write(path, contents, {OVERWRITE: True})
        return self.write(path, data)

    def prepend(self, path: str, data: bytes | str, separator: bytes | str = "\n") -> bool:
        """Prepend to a file, creating it if missing."""
        if self.exists(path):
            contents = to_bytes(data) + to_bytes(separator) + self.read(path)
            return self.write(path, contents, {OVERWRITE: True})
        return self.write(path, data)

    def delete(self, path: str) -> bool:
        return self._backend.delete(path)

    def size(self, path: str) -> int:
        return self._backend.size(path)

    def last_modified(self, path: str) -> int:
        return self._backend.last_modified(path)

    def path(self, path: str) -> str:
        """Absolute locator of an existing file."""
        return self._backend.path(path)

    def copy(self, source: str, destination: str) -> bool:
        return self._backend.copy(source, destination)

    def move(self, source: str, destination: str) -> bool:
        return self._backend.move(source, destination)

    def files(self, directory: str, recursive: bool = False) -> list[str]:
        return self._backend.files(directory, recursive)

    def directories(self, directory: str, recursive: bool = False) -> list[str]:
        return self._backend.directories(directory, recursive)

    def create_directory(self, path: str) -> bool:
        return self._backend.create_directory(path)

    def delete_directory(self, path: str) -> bool:
        return self._backend.delete_directory(path)
