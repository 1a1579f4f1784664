"""Unit tests for UpdatePostUseCase."""

from uuid import uuid4

import pytest

from scribe.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.domain.model.post import PostPatch
from scribe.domain.value import PostStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_update_returns_post_with_current_tags(self, unit_env, user_id):
        # Arrange
        create = await unit_env.get(CreatePostUseCase)
        update = await unit_env.get(UpdatePostUseCase)
        created = await create.execute(
            CreatePostRequest(owner_id=str(user_id), title="Draft", tag_names=["old"])
        )

        # Act
        result = await update.execute(
            UpdatePostRequest(
                post_id=created.post_id,
                user_id=str(user_id),
                patch=PostPatch(status=PostStatus.PUBLISHED, tag_names=["new", "Fresh"]),
            )
        )

        # Assert
        assert result.status == PostStatus.PUBLISHED
        assert result.title == "Draft"
        assert [t.name for t in result.tags] == ["Fresh", "new"]
        assert result.updated_at > created.updated_at

    @pytest.mark.asyncio
    async def test_update_by_other_user_on_published_post(
        self, unit_env, user_id, other_user_id
    ):
        create = await unit_env.get(CreatePostUseCase)
        update = await unit_env.get(UpdatePostUseCase)
        created = await create.execute(
            CreatePostRequest(
                owner_id=str(user_id), title="Public", status=PostStatus.PUBLISHED
            )
        )

        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdatePostRequest(
                    post_id=created.post_id,
                    user_id=str(other_user_id),
                    patch=PostPatch(title="Mine"),
                )
            )

    @pytest.mark.asyncio
    async def test_update_missing_post(self, unit_env, user_id):
        update = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdatePostRequest(
                    post_id=str(uuid4()), user_id=str(user_id), patch=PostPatch(title="x")
                )
            )
