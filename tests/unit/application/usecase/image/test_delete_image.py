"""Unit tests for DeleteImageUseCase."""

import base64

import pytest

from scribe.application.usecase.image import (
    DeleteImageRequest,
    DeleteImageUseCase,
    UploadImageRequest,
    UploadImageUseCase,
)
from scribe.domain.error import NotAuthorizedError, StorageError
from scribe.domain.service.asset_service import AssetStore
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _upload(unit_env, user_id) -> str:
    upload = await unit_env.get(UploadImageUseCase)
    result = await upload.execute(
        UploadImageRequest(
            user_id=str(user_id),
            data=base64.b64encode(b"GIF89a").decode(),
            content_type="image/gif",
        )
    )
    return result.url


class TestDeleteImageUseCase:
    """Tests for DeleteImageUseCase."""

    @pytest.mark.asyncio
    async def test_delete_own_upload(self, unit_env, user_id):
        # Arrange
        url = await _upload(unit_env, user_id)
        delete = await unit_env.get(DeleteImageUseCase)
        store = await unit_env.get(AssetStore)

        # Act
        result = await delete.execute(DeleteImageRequest(user_id=str(user_id), image=url))

        # Assert
        assert url.endswith(result.path)
        assert result.path not in store.objects

    @pytest.mark.asyncio
    async def test_delete_someone_elses_upload_raises(
        self, unit_env, user_id, other_user_id
    ):
        url = await _upload(unit_env, user_id)
        delete = await unit_env.get(DeleteImageUseCase)

        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteImageRequest(user_id=str(other_user_id), image=url)
            )

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self, unit_env, user_id):
        url = await _upload(unit_env, user_id)
        delete = await unit_env.get(DeleteImageUseCase)
        store = await unit_env.get(AssetStore)
        store.fail_deletes = True

        with pytest.raises(StorageError):
            await delete.execute(DeleteImageRequest(user_id=str(user_id), image=url))
