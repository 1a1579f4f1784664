"""Unit tests for tag use cases."""

from uuid import UUID, uuid4

import pytest

from scribe.application.usecase.post import CreatePostRequest, CreatePostUseCase
from scribe.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    GetOrCreateTagRequest,
    GetOrCreateTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
    SearchTagsRequest,
    SearchTagsUseCase,
)
from scribe.domain.error import DuplicateKeyError, NotFoundError
from scribe.domain.service import PostTagService
from scribe.domain.value import PostId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestTagUseCases:
    """Tests for tag create, lookup and search flows."""

    @pytest.mark.asyncio
    async def test_create_then_search(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateTagUseCase)
        search = await unit_env.get(SearchTagsUseCase)
        await create.execute(CreateTagRequest(name="Data Science"))
        await create.execute(CreateTagRequest(name="Databases"))
        await create.execute(CreateTagRequest(name="Go"))

        # Act
        result = await search.execute(SearchTagsRequest(term="data"))

        # Assert
        assert [t.name for t in result.tags] == ["Data Science", "Databases"]
        assert result.tags[0].slug == "data-science"

    @pytest.mark.asyncio
    async def test_create_duplicate_raises(self, unit_env):
        create = await unit_env.get(CreateTagUseCase)
        await create.execute(CreateTagRequest(name="Go"))

        with pytest.raises(DuplicateKeyError):
            await create.execute(CreateTagRequest(name="Go"))

    @pytest.mark.asyncio
    async def test_get_or_create_is_stable(self, unit_env):
        get_or_create = await unit_env.get(GetOrCreateTagUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)

        first = await get_or_create.execute(GetOrCreateTagRequest(name="Elixir"))
        second = await get_or_create.execute(GetOrCreateTagRequest(name="Elixir"))

        assert first.id == second.id
        assert len((await list_tags.execute(ListTagsRequest())).tags) == 1


class TestDeleteTagUseCase:
    """Tests for DeleteTagUseCase."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_posts(self, unit_env, user_id):
        # Arrange
        create_post = await unit_env.get(CreatePostUseCase)
        delete_tag = await unit_env.get(DeleteTagUseCase)
        post_tag_service = await unit_env.get(PostTagService)

        post = await create_post.execute(
            CreatePostRequest(owner_id=str(user_id), title="Post", tag_names=["x", "y"])
        )
        doomed = next(t for t in post.tags if t.name == "x")

        # Act
        result = await delete_tag.execute(DeleteTagRequest(tag_id=doomed.id))

        # Assert
        assert result.deleted is True
        remaining = await post_tag_service.fetch_for_post(PostId(UUID(post.post_id)))
        assert [t.name.root for t in remaining] == ["y"]

    @pytest.mark.asyncio
    async def test_delete_missing_tag(self, unit_env):
        delete_tag = await unit_env.get(DeleteTagUseCase)

        with pytest.raises(NotFoundError):
            await delete_tag.execute(DeleteTagRequest(tag_id=str(uuid4())))
