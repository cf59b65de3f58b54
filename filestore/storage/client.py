"""S3-compatible object store client.

Thin boundary over boto3: every call returns an ObjectResponse instead of
raising, so the object backend can apply its boolean-success convention.
Signing, transport and retries stay with botocore.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from filestore.core.config import Settings, settings
from filestore.core.logging import get_logger

logger = get_logger(__name__)

# HTTP-style header -> put_object parameter
HEADER_PARAMS = {
    "content-type": "ContentType",
    "cache-control": "CacheControl",
    "content-disposition": "ContentDisposition",
    "content-encoding": "ContentEncoding",
    "content-language": "ContentLanguage",
    "x-amz-acl": "ACL",
    "x-amz-storage-class": "StorageClass",
    "x-amz-server-side-encryption": "ServerSideEncryption",
}
PASSTHROUGH_PARAMS = frozenset(HEADER_PARAMS.values()) | {"Expires", "Tagging"}
META_PREFIX = "x-amz-meta-"


@dataclass
class ObjectResponse:
    """Outcome of a single object store call."""

    error: str | None = None
    code: int = 0
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None


def headers_to_params(headers: dict[str, Any]) -> dict[str, Any]:
    """Translate write metadata into put_object keyword arguments.

    Known HTTP headers map to their boto3 parameter, ``x-amz-meta-*`` and
    unrecognised headers become user metadata, and keys that already are
    boto3 parameter names pass through verbatim.
    """
    params: dict[str, Any] = {}
    metadata: dict[str, str] = {}

    for key, value in headers.items():
        lowered = key.lower()
        if key in PASSTHROUGH_PARAMS:
            params[key] = value
        elif key == "Metadata" and isinstance(value, Mapping):
            metadata.update({str(k): str(v) for k, v in value.items()})
        elif lowered in HEADER_PARAMS:
            params[HEADER_PARAMS[lowered]] = value
        elif lowered.startswith(META_PREFIX):
            metadata[lowered[len(META_PREFIX):]] = str(value)
        else:
            metadata[key] = str(value)

    if metadata:
        params["Metadata"] = metadata
    return params


class ObjectStoreClient:
    """Object store operations over a boto3 S3 client.

    Example:
        client = ObjectStoreClient.from_settings()
        response = client.get_object_info("my-bucket", "reports/q1.txt")

        if response.ok and response.code == 200:
            print(response.headers["content-length"])
    """

    def __init__(self, s3_client: Any) -> None:
        self.s3 = s3_client

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "ObjectStoreClient":
        """Build a client from endpoint, region and credential settings."""
        config = config or settings
        s3_client = boto3.client(
            "s3",
            endpoint_url=config.s3_endpoint_url,
            region_name=config.s3_region,
            aws_access_key_id=config.s3_access_key_id,
            aws_secret_access_key=config.s3_secret_access_key,
        )
        return cls(s3_client)

    def get_object(self, bucket: str, key: str) -> ObjectResponse:
        """Fetch an object's body."""
        try:
            result = self.s3.get_object(Bucket=bucket, Key=key)
            body = result["Body"].read()
        except (ClientError, BotoCoreError) as e:
            return self._failure("get_object", bucket, key, e)

        return self._success(result, body=body)

    def put_object(
        self,
        bucket: str,
        key: str,
        body: bytes,
        headers: dict[str, Any] | None = None,
    ) -> ObjectResponse:
        """Store an object, forwarding headers as put_object parameters."""
        params = headers_to_params(headers or {})
        try:
            result = self.s3.put_object(Bucket=bucket, Key=key, Body=body, **params)
        except (ClientError, BotoCoreError) as e:
            return self._failure("put_object", bucket, key, e)

        return self._success(result)

    def delete_object(self, bucket: str, key: str) -> ObjectResponse:
        """Delete an object."""
        try:
            result = self.s3.delete_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            return self._failure("delete_object", bucket, key, e)

        return self._success(result)

    def get_object_info(self, bucket: str, key: str) -> ObjectResponse:
        """Probe an object's status and headers without fetching its body."""
        try:
            result = self.s3.head_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            return self._failure("head_object", bucket, key, e)

        return self._success(result)

    @staticmethod
    def _success(result: dict[str, Any], body: bytes = b"") -> ObjectResponse:
        meta = result.get("ResponseMetadata", {})
        headers = {k.lower(): str(v) for k, v in meta.get("HTTPHeaders", {}).items()}
        return ObjectResponse(
            error=None,
            code=int(meta.get("HTTPStatusCode", 200)),
            body=body,
            headers=headers,
        )

    @staticmethod
    def _failure(
        operation: str, bucket: str, key: str, error: Exception
    ) -> ObjectResponse:
        if isinstance(error, ClientError):
            response = error.response
            code = int(response.get("ResponseMetadata", {}).get("HTTPStatusCode", 0))
            message = response.get("Error", {}).get("Code") or str(error)
        else:
            code = 0
            message = str(error)

        logger.debug(
            "Object store call failed",
            operation=operation,
            bucket=bucket,
            key=key,
            code=code,
            error=message,
        )
        return ObjectResponse(error=message, code=code)
