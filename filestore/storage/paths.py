"""Path normalization for rooted backends."""
import unicodedata
from typing import Any

from filestore.core.exceptions import InvalidPathError, PathTraversalError


def has_control_characters(path: str) -> bool:
    """Check for any Unicode "Other" (C*) category character."""
    return any(unicodedata.category(char).startswith("C") for char in path)


def normalize_path(raw: str, backend: Any = None) -> str:
    """Turn a caller path into a canonical, traversal-free relative path.

    Backslashes are accepted as separators. Empty and ``.`` segments are
    dropped and ``..`` pops the previous segment. Fails closed: control
    characters and any attempt to climb above the root raise instead of
    being stripped or clamped.

    Args:
        raw: Caller-supplied path
        backend: Backend to attach to raised errors

    Returns:
        ``/``-joined normalized path ("" for the root itself)

    Raises:
        InvalidPathError: Path contains control/format characters
        PathTraversalError: Path ascends past the root
    """
    path = raw.replace("\\", "/")

    if has_control_characters(path):
        raise InvalidPathError("Invalid path", backend=backend, details={"path": raw})

    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if not parts:
                raise PathTraversalError(
                    "Directory traversal detected",
                    backend=backend,
                    details={"path": raw},
                )
            parts.pop()
            continue
        parts.append(part)

    return "/".join(parts)
