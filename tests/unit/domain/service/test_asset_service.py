"""Unit tests for AssetService."""

import pytest

from scribe.adapter.storage import MockAssetStore
from scribe.config import StorageSettings
from scribe.domain.error import NotAuthorizedError, StorageError, ValidationError
from scribe.domain.service import AssetService
from tests.conftest import make_user_id


@pytest.fixture
def store() -> MockAssetStore:
    return MockAssetStore()


@pytest.fixture
def asset_service(store) -> AssetService:
    return AssetService(store, StorageSettings(max_upload_bytes=16))


class TestUpload:
    """Tests for upload."""

    @pytest.mark.asyncio
    async def test_upload_stores_under_owner_folder(self, asset_service, store):
        owner_id = make_user_id()

        url = await asset_service.upload(owner_id, b"\x89PNG", "image/png")

        path = asset_service.url_to_path(url)
        assert path.startswith(f"{owner_id}/")
        assert path.endswith(".png")
        assert store.objects[path] == (b"\x89PNG", "image/png")

    @pytest.mark.asyncio
    async def test_extension_follows_file_name(self, asset_service):
        url = await asset_service.upload(
            make_user_id(), b"jpeg", "image/jpeg", file_name="Holiday.JPEG"
        )

        assert url.endswith(".jpeg")

    @pytest.mark.asyncio
    async def test_rejects_unsupported_type(self, asset_service):
        with pytest.raises(ValidationError, match="Unsupported"):
            await asset_service.upload(make_user_id(), b"<svg/>", "image/svg+xml")

    @pytest.mark.asyncio
    async def test_rejects_empty_data(self, asset_service):
        with pytest.raises(ValidationError, match="empty"):
            await asset_service.upload(make_user_id(), b"", "image/png")

    @pytest.mark.asyncio
    async def test_rejects_oversized_data(self, asset_service, store):
        with pytest.raises(ValidationError, match="exceeds"):
            await asset_service.upload(make_user_id(), b"x" * 17, "image/png")

        assert store.objects == {}


class TestDiscard:
    """Tests for discard."""

    @pytest.mark.asyncio
    async def test_discard_by_url(self, asset_service, store):
        url = await asset_service.upload(make_user_id(), b"gif", "image/gif")

        assert await asset_service.discard(url) is True
        assert store.objects == {}

    @pytest.mark.asyncio
    async def test_discard_swallows_storage_errors(self, asset_service, store):
        store.fail_deletes = True

        assert await asset_service.discard("some/path.png") is False


class TestRemove:
    """Tests for remove."""

    @pytest.mark.asyncio
    async def test_owner_removes_by_url(self, asset_service, store):
        owner_id = make_user_id()
        url = await asset_service.upload(owner_id, b"gif", "image/gif")

        path = await asset_service.remove(owner_id, url)

        assert path.startswith(f"{owner_id}/")
        assert store.objects == {}
        assert store.deleted == [path]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "suffix", ["", "/", "/../someone-else/cover.png", "/a/../../x.png"]
    )
    async def test_paths_escaping_owner_folder_are_refused(
        self, asset_service, store, suffix
    ):
        owner_id = make_user_id()

        with pytest.raises(NotAuthorizedError):
            await asset_service.remove(owner_id, f"{owner_id}{suffix}")

        assert store.deleted == []

    @pytest.mark.asyncio
    async def test_other_users_image_is_refused(self, asset_service, store):
        url = await asset_service.upload(make_user_id(), b"gif", "image/gif")

        with pytest.raises(NotAuthorizedError):
            await asset_service.remove(make_user_id(), url)

        assert len(store.objects) == 1

    @pytest.mark.asyncio
    async def test_storage_errors_reach_the_caller(self, asset_service, store):
        owner_id = make_user_id()
        store.fail_deletes = True

        with pytest.raises(StorageError):
            await asset_service.remove(owner_id, f"{owner_id}/cover.png")
