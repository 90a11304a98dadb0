"""Tests for BucketApi against the in-process fake store."""

from __future__ import annotations

import httpx
import pytest

from bucketlist.client import BucketApi, TransportError


async def test_get_all_parses_records(api, store):
    store.add("b1", "Run 5k", fixedTodoId="t9", todoAll=4, todoCompleted=2)
    store.add("b2", None, imageUrl="https://img.example.com/b2.png")

    records = await api.get_all()

    assert [r.id for r in records] == ["b1", "b2"]
    assert records[0].title == "Run 5k"
    assert records[0].fixed_todo_id == "t9"
    assert (records[0].todo_all, records[0].todo_completed) == (4, 2)
    assert records[1].title == ""
    assert records[1].image_url == "https://img.example.com/b2.png"


async def test_update_title_only_sends_no_file(api, store):
    store.add("b1", "Old")

    record = await api.update("b1", title="New")

    assert record.title == "New"
    assert store.uploads[-1]["title"] == "New"
    assert "filename" not in store.uploads[-1]
    assert store.uploads[-1]["authorization"] == "Bearer test-token"


async def test_update_with_file_is_multipart(api, store, png):
    store.add("b1", "Trip")

    record = await api.update("b1", title="Trip", file=png)

    upload = store.uploads[-1]
    assert upload["filename"] == "photo.png"
    assert upload["content_type"] == "image/png"
    assert upload["size"] == png.size
    assert record.image_url.endswith("/b1/photo.png")


async def test_delete_item(api, store):
    store.add("b1", "Trip")

    await api.delete_item("b1")

    assert "b1" not in store.buckets
    assert store.requests[-1] == ("DELETE", "/api/buckets/b1")


async def test_delete_image(api, store):
    store.add("b1", "Trip", imageUrl="https://img.example.com/b1.png")

    await api.delete_image("b1")

    assert store.buckets["b1"]["imageUrl"] is None
    assert store.requests[-1] == ("DELETE", "/api/buckets/b1/image")


async def test_status_error_carries_status_and_code(api, store):
    with pytest.raises(TransportError) as exc_info:
        await api.delete_item("missing")

    assert exc_info.value.status == 404
    assert exc_info.value.code == "BUCKET_NOT_FOUND"


async def test_status_error_without_code(api, store):
    store.add("b1", "Trip")
    store.fail_next = (500, None)

    with pytest.raises(TransportError) as exc_info:
        await api.update("b1", title="x")

    assert exc_info.value.status == 500
    assert exc_info.value.code is None


async def test_connection_failure_has_no_status():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = BucketApi("http://test", token="", transport=httpx.MockTransport(refuse))
    try:
        with pytest.raises(TransportError) as exc_info:
            await client.get_all()
    finally:
        await client.close()

    assert exc_info.value.status is None
    assert exc_info.value.code is None


async def test_non_json_error_body():
    def bad_gateway(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>")

    client = BucketApi("http://test", token="", transport=httpx.MockTransport(bad_gateway))
    try:
        with pytest.raises(TransportError) as exc_info:
            await client.delete_image(1)
    finally:
        await client.close()

    assert exc_info.value.status == 502
    assert exc_info.value.code is None
