"""
Pytest configuration and fixtures for bucketlist tests.

HTTP tests run against FakeBucketStore, a small FastAPI app served in-process
through httpx.ASGITransport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from bucketlist.client import BucketApi
from bucketlist.models.bucket import BucketRecord
from bucketlist.models.image import ImageFile
from bucketlist.services.dialog import DialogSlot

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@dataclass
class FakeBucketStore:
    """In-memory bucket store with request logging and injectable failures."""

    buckets: dict[str, dict[str, Any]] = field(default_factory=dict)
    requests: list[tuple[str, str]] = field(default_factory=list)
    uploads: list[dict[str, Any]] = field(default_factory=list)
    fail_next: tuple[int, str | None] | None = None

    def add(self, bucket_id: str, title: str = "", **extra: Any) -> dict[str, Any]:
        bucket = {
            "id": bucket_id,
            "title": title,
            "imageUrl": None,
            "fixedTodoId": None,
            "todoAll": 0,
            "todoCompleted": 0,
        }
        bucket.update(extra)
        self.buckets[bucket_id] = bucket
        return bucket

    def _failure(self) -> Response | None:
        if self.fail_next is None:
            return None
        status, code = self.fail_next
        self.fail_next = None
        body = {"code": code} if code else {}
        return JSONResponse(body, status_code=status)


def create_store_app(store: FakeBucketStore) -> FastAPI:
    app = FastAPI()

    @app.get("/api/buckets")
    async def list_buckets(request: Request):
        store.requests.append(("GET", request.url.path))
        failure = store._failure()
        if failure:
            return failure
        return list(store.buckets.values())

    @app.patch("/api/buckets/{bucket_id}")
    async def update_bucket(bucket_id: str, request: Request):
        store.requests.append(("PATCH", request.url.path))
        failure = store._failure()
        if failure:
            return failure
        bucket = store.buckets.get(bucket_id)
        if bucket is None:
            return JSONResponse({"code": "BUCKET_NOT_FOUND"}, status_code=404)

        form = await request.form()
        upload: dict[str, Any] = {"authorization": request.headers.get("authorization")}
        if "title" in form:
            bucket["title"] = form["title"]
            upload["title"] = form["title"]
        if "file" in form:
            file = form["file"]
            data = await file.read()
            upload["filename"] = file.filename
            upload["content_type"] = file.content_type
            upload["size"] = len(data)
            bucket["imageUrl"] = f"https://img.example.com/{bucket_id}/{file.filename}"
        store.uploads.append(upload)
        return bucket

    @app.delete("/api/buckets/{bucket_id}")
    async def delete_bucket(bucket_id: str, request: Request):
        store.requests.append(("DELETE", request.url.path))
        failure = store._failure()
        if failure:
            return failure
        if store.buckets.pop(bucket_id, None) is None:
            return JSONResponse({"code": "BUCKET_NOT_FOUND"}, status_code=404)
        return Response(status_code=204)

    @app.delete("/api/buckets/{bucket_id}/image")
    async def delete_bucket_image(bucket_id: str, request: Request):
        store.requests.append(("DELETE", request.url.path))
        failure = store._failure()
        if failure:
            return failure
        bucket = store.buckets.get(bucket_id)
        if bucket is None or bucket["imageUrl"] is None:
            return JSONResponse({"code": "IMAGE_NOT_FOUND"}, status_code=404)
        bucket["imageUrl"] = None
        return Response(status_code=204)

    return app


@pytest.fixture
def store() -> FakeBucketStore:
    return FakeBucketStore()


@pytest_asyncio.fixture
async def api(store):
    """BucketApi wired to the fake store."""
    client = BucketApi(
        "http://test",
        token="test-token",
        transport=httpx.ASGITransport(app=create_store_app(store)),
    )
    yield client
    await client.close()


@pytest.fixture
def dialog() -> DialogSlot:
    return DialogSlot()


@pytest.fixture
def mock_api() -> AsyncMock:
    """BucketApi stand-in whose calls succeed immediately."""
    api = AsyncMock(spec=BucketApi)
    api.get_all.return_value = []
    api.update.return_value = None
    api.delete_item.return_value = None
    api.delete_image.return_value = None
    return api


@pytest.fixture
def record() -> BucketRecord:
    return BucketRecord(id="b1", title="Run 5k", todoAll=4, todoCompleted=2)


@pytest.fixture
def png() -> ImageFile:
    return ImageFile(filename="photo.png", content_type="image/png", data=PNG_BYTES)
