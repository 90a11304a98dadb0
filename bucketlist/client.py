"""HTTP client for the bucket store API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from bucketlist.config import settings
from bucketlist.models.bucket import BucketId, BucketRecord
from bucketlist.models.image import ImageFile

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """
    A failed call to the bucket store.

    status is the HTTP status, or None when the request never got a response.
    code is the application error code from the JSON body, if any.
    """

    def __init__(self, status: int | None, code: str | None = None, message: str = ""):
        self.status = status
        self.code = code
        super().__init__(message or f"bucket store error (status={status}, code={code})")


class BucketApi:
    """Async HTTP client for the bucket store."""

    def __init__(
        self,
        api_url: str | None = None,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ):
        self.api_url = (api_url or settings.API_URL).rstrip("/")
        self.token = token if token is not None else settings.API_TOKEN
        self.client = httpx.AsyncClient(
            base_url=self.api_url,
            transport=transport,
            timeout=timeout or settings.REQUEST_TIMEOUT,
        )

    def _headers(self) -> dict:
        """Build request headers."""
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            res = await self.client.request(method, path, headers=self._headers(), **kwargs)
            res.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                e.response.status_code,
                _error_code(e.response),
                f"{method} {path} failed with {e.response.status_code}",
            ) from e
        except httpx.RequestError as e:
            raise TransportError(None, None, f"{method} {path} failed: {e}") from e
        return res

    async def get_all(self) -> list[BucketRecord]:
        """Fetch every bucket of the current user."""
        res = await self._request("GET", "/api/buckets")
        return [BucketRecord.model_validate(item) for item in res.json()]

    async def update(
        self,
        bucket_id: BucketId,
        title: str | None = None,
        file: ImageFile | None = None,
    ) -> BucketRecord | None:
        """
        Update a bucket's title and/or image.

        Sent as a form: an optional 'title' text field and an optional
        'file' binary field. Returns the updated record when the server
        echoes one.
        """
        data = {"title": title} if title is not None else {}
        files = {"file": (file.filename, file.data, file.content_type)} if file is not None else None
        res = await self._request("PATCH", f"/api/buckets/{bucket_id}", data=data, files=files)
        if not res.content:
            return None
        return BucketRecord.model_validate(res.json())

    async def delete_item(self, bucket_id: BucketId) -> None:
        """Delete a whole bucket."""
        await self._request("DELETE", f"/api/buckets/{bucket_id}")

    async def delete_image(self, bucket_id: BucketId) -> None:
        """Delete only a bucket's image."""
        await self._request("DELETE", f"/api/buckets/{bucket_id}/image")

    async def close(self) -> None:
        """Close client."""
        await self.client.aclose()


def _error_code(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("code") is not None:
        return str(body["code"])
    return None
