"""Unit tests for the Supabase Storage client."""

import json

import httpx
import pytest

from scribe.adapter.error import AssetStoreError
from scribe.adapter.storage import SupabaseAssetStore
from scribe.domain.error import StorageError

BASE_URL = "https://project.supabase.co"


def _store(handler) -> SupabaseAssetStore:
    return SupabaseAssetStore(
        base_url=BASE_URL + "/",
        service_key="service-key",
        bucket="post-images",
        transport=httpx.MockTransport(handler),
    )


class TestStore:
    """Tests for uploads."""

    @pytest.mark.asyncio
    async def test_upload_posts_bytes_and_returns_public_url(self):
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"Key": "post-images/u/a.png"})

        store = _store(handler)

        # Act
        url = await store.store("u/a.png", b"img", "image/png")

        # Assert
        assert url == f"{BASE_URL}/storage/v1/object/public/post-images/u/a.png"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/storage/v1/object/post-images/u/a.png"
        assert request.headers["Authorization"] == "Bearer service-key"
        assert request.headers["apikey"] == "service-key"
        assert request.headers["Content-Type"] == "image/png"
        assert request.content == b"img"

    @pytest.mark.asyncio
    async def test_upload_failure_raises_storage_error(self):
        store = _store(lambda request: httpx.Response(413, text="too large"))

        with pytest.raises(StorageError) as exc_info:
            await store.store("u/a.png", b"img", "image/png")

        assert isinstance(exc_info.value, AssetStoreError)
        assert exc_info.value.status_code == 413

    @pytest.mark.asyncio
    async def test_transport_error_raises_storage_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        store = _store(handler)

        with pytest.raises(AssetStoreError, match="HTTP error during upload"):
            await store.store("u/a.png", b"img", "image/png")


class TestDelete:
    """Tests for deletes."""

    @pytest.mark.asyncio
    async def test_delete_sends_prefixes(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        store = _store(handler)

        await store.delete("u/a.png")

        assert seen[0].method == "DELETE"
        assert str(seen[0].url) == f"{BASE_URL}/storage/v1/object/post-images"
        assert json.loads(seen[0].content) == {"prefixes": ["u/a.png"]}

    @pytest.mark.asyncio
    async def test_delete_failure_raises(self):
        store = _store(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(AssetStoreError) as exc_info:
            await store.delete("u/a.png")

        assert exc_info.value.status_code == 500


class TestUrlToPath:
    """Tests for url_to_path."""

    def test_public_url_maps_to_path(self):
        store = _store(lambda request: httpx.Response(200))

        url = f"{BASE_URL}/storage/v1/object/public/post-images/u/a.png"
        assert store.url_to_path(url) == "u/a.png"

    def test_foreign_value_passes_through(self):
        store = _store(lambda request: httpx.Response(200))

        assert store.url_to_path("u/a.png") == "u/a.png"
        assert store.url_to_path("https://elsewhere/x.png") == "https://elsewhere/x.png"
