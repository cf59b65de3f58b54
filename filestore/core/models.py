"""Domain models shared by the storage backends."""
from collections.abc import Mapping
from enum import Enum
from typing import Any

OVERWRITE = "overwrite"

# Per-call write options. Only ``overwrite`` is interpreted; everything else
# is backend metadata (headers for the object store, ignored locally).
WriteConfig = Mapping[str, Any]


class BackendType(str, Enum):
    """Available storage backends."""

    LOCAL = "local"
    S3 = "s3"


def split_write_config(config: WriteConfig | None) -> tuple[bool, dict[str, Any]]:
    """Split a write config into the overwrite flag and pass-through metadata."""
    if not config:
        return False, {}

    overwrite = bool(config.get(OVERWRITE, False))
    metadata = {key: value for key, value in config.items() if key != OVERWRITE}
    return overwrite, metadata


def to_bytes(data: bytes | str) -> bytes:
    """Encode text content as UTF-8; pass bytes through."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)
