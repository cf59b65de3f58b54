"""Pytest configuration and fixtures."""
from collections.abc import Generator
from datetime import datetime, timezone
from email.utils import format_datetime
from pathlib import Path
from typing import Any

import pytest

from filestore.core.config import Settings
from filestore.core.logging import clear_log_context
from filestore.storage.client import ObjectResponse
from filestore.storage.facade import Storage
from filestore.storage.local import LocalStorage
from filestore.storage.object import ObjectStorage

BUCKET = "test-bucket"
MODIFIED_AT = datetime(2024, 3, 1, 12, 30, 0, tzinfo=timezone.utc)


class FakeObjectStoreClient:
    """In-memory stand-in for ObjectStoreClient.

    Records calls so tests can check how often the backend probes metadata.
    """

    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.put_headers: dict[tuple[str, str], dict[str, Any]] = {}
        self.info_calls: list[str] = []
        self.fail_puts = False
        self.fail_gets = False
        self.fail_deletes = False

    def get_object(self, bucket: str, key: str) -> ObjectResponse:
        if self.fail_gets:
            return ObjectResponse(error="InternalError", code=500)
        if (bucket, key) not in self.objects:
            return ObjectResponse(error="NoSuchKey", code=404)
        return ObjectResponse(code=200, body=self.objects[(bucket, key)])

    def put_object(
        self,
        bucket: str,
        key: str,
        body: bytes,
        headers: dict[str, Any] | None = None,
    ) -> ObjectResponse:
        if self.fail_puts:
            return ObjectResponse(error="AccessDenied", code=403)
        self.objects[(bucket, key)] = body
        self.put_headers[(bucket, key)] = dict(headers or {})
        return ObjectResponse(code=200)

    def delete_object(self, bucket: str, key: str) -> ObjectResponse:
        if self.fail_deletes:
            return ObjectResponse(error="AccessDenied", code=403)
        self.objects.pop((bucket, key), None)
        return ObjectResponse(code=204)

    def get_object_info(self, bucket: str, key: str) -> ObjectResponse:
        self.info_calls.append(key)
        if (bucket, key) not in self.objects:
            return ObjectResponse(error="404", code=404)
        return ObjectResponse(
            code=200,
            headers={
                "content-length": str(len(self.objects[(bucket, key)])),
                "last-modified": format_datetime(MODIFIED_AT, usegmt=True),
            },
        )


@pytest.fixture(autouse=True)
def reset_log_context() -> Generator[None, None, None]:
    """Keep bound log context from leaking between tests."""
    yield
    clear_log_context()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Test settings with safe defaults."""
    return Settings(
        storage_backend="local",
        storage_path=tmp_path / "data",
        s3_bucket="",
    )


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Empty root directory for the local backend."""
    root = tmp_path / "data"
    root.mkdir()
    return root


@pytest.fixture
def local_backend(storage_root: Path) -> LocalStorage:
    return LocalStorage(str(storage_root))


@pytest.fixture
def fake_client() -> FakeObjectStoreClient:
    return FakeObjectStoreClient()


@pytest.fixture
def object_backend(fake_client: FakeObjectStoreClient) -> ObjectStorage:
    return ObjectStorage(BUCKET, fake_client)  # type: ignore[arg-type]


@pytest.fixture(params=["local", "object"])
def storage(
    request: pytest.FixtureRequest,
    local_backend: LocalStorage,
    object_backend: ObjectStorage,
) -> Storage:
    """Storage facade over each backend in turn."""
    if request.param == "local":
        return Storage(local_backend)
    return Storage(object_backend)
