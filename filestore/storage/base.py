"""Storage backend capability protocol."""
from typing import Protocol, runtime_checkable

from filestore.core.models import WriteConfig


@runtime_checkable
class StorageBackend(Protocol):
    """Operations every storage backend provides.

    Backends satisfy this structurally; there is no base class to inherit.
    Misuse (bad paths, missing preconditions) raises a StorageError that
    carries the backend. Routine I/O failures degrade to False, 0 or b"".
    """

    @property
    def name(self) -> str:
        """Backend type identifier (e.g. 'local', 's3')."""
        ...

    def exists(self, path: str) -> bool:
        """Check if a resource exists.

        A missing resource is a normal False, never an error.
        """
        ...

    def read(self, path: str) -> bytes:
        """Read resource contents.

        Returns:
            Contents, or b"" if the underlying read fails
        """
        ...

    def write(
        self,
        path: str,
        contents: bytes | str,
        config: WriteConfig | None = None,
    ) -> bool:
        """Create or replace a resource.

        Args:
            path: Resource path
            contents: Data to write (text is UTF-8 encoded)
            config: Write options; ``overwrite`` permits replacing an
                existing resource, other keys are backend metadata

        Returns:
            True if the underlying write reported success

        Raises:
            FileExistsConflictError: Target exists and overwrite is not set
        """
        ...

    def delete(self, path: str) -> bool:
        """Delete a resource."""
        ...

    def size(self, path: str) -> int:
        """Resource size in bytes, 0 when unknown."""
        ...

    def last_modified(self, path: str) -> int:
        """Last modification as a unix timestamp, 0 when unknown."""
        ...

    def path(self, path: str) -> str:
        """Resolve a backend-meaningful absolute locator.

        Raises:
            ResourceNotFoundError: Resource does not exist
        """
        ...

    def copy(self, source: str, destination: str) -> bool:
        """Copy a resource; False if the source does not exist."""
        ...

    def move(self, source: str, destination: str) -> bool:
        """Move a resource; False if the source does not exist. Not atomic."""
        ...

    def files(self, directory: str, recursive: bool = False) -> list[str]:
        """List files under a directory, sorted case-insensitively."""
        ...

    def directories(self, directory: str, recursive: bool = False) -> list[str]:
        """List directories under a directory, sorted case-insensitively."""
        ...

    def create_directory(self, path: str) -> bool:
        """Create a directory and any missing parents."""
        ...

    def delete_directory(self, path: str) -> bool:
        """Delete an empty directory.

        Raises:
            InvalidDirectoryError: Target is missing or not a directory
        """
        ...
