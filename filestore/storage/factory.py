"""Build storage backends from settings."""
from filestore.core.config import Settings, settings
from filestore.core.exceptions import ConfigurationError
from filestore.core.logging import get_logger
from filestore.core.models import BackendType
from filestore.storage.base import StorageBackend
from filestore.storage.client import ObjectStoreClient
from filestore.storage.facade import Storage
from filestore.storage.local import LocalStorage
from filestore.storage.object import ObjectStorage

logger = get_logger(__name__)


def create_backend(config: Settings | None = None) -> StorageBackend:
    """Create the backend selected by ``storage_backend``.

    Args:
        config: Settings to read (defaults to the global settings)

    Raises:
        ConfigurationError: s3 selected without a bucket
    """
    config = config or settings
    if not config.uses_object_store:
        root = config.storage_path
        root.mkdir(parents=True, exist_ok=True)
        logger.info("Storage backend initialized", backend=BackendType.LOCAL.value, root=str(root))
        return LocalStorage(root)

    if not config.s3_bucket:
        raise ConfigurationError(
            "S3 bucket is required for the s3 storage backend",
            details={"storage_backend": BackendType.S3.value},
        )

    client = ObjectStoreClient.from_settings(config)
    logger.info(
        "Storage backend initialized",
        backend=BackendType.S3.value,
        bucket=config.s3_bucket,
        endpoint=config.s3_endpoint_url,
    )
    return ObjectStorage(config.s3_bucket, client)


def create_storage(config: Settings | None = None) -> Storage:
    """Create a Storage facade over the configured backend."""
    return Storage(create_backend(config))
