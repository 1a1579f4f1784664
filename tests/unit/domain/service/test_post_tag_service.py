"""Unit tests for PostTagService."""

import pytest

from scribe.domain.error import ValidationError
from scribe.domain.repository import PostTagRepository
from scribe.domain.service import PostService, PostTagService, TagService
from scribe.persistence.repository.inmemory import InMemoryDatabase
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReconcile:
    """Tests for reconcile."""

    @pytest.mark.asyncio
    async def test_reconcile_creates_missing_tags_and_sorts(self, unit_env, user_id):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_tag_service = await unit_env.get(PostTagService)
        post = await post_service.create_post(owner_id=user_id, title="Post")

        # Act
        tags = await post_tag_service.reconcile(post.id, ["zig", " Ada ", "  "])

        # Assert
        assert [t.name.root for t in tags] == ["Ada", "zig"]

    @pytest.mark.asyncio
    async def test_duplicates_produce_one_association(self, unit_env, user_id):
        post_service = await unit_env.get(PostService)
        post_tag_service = await unit_env.get(PostTagService)
        db = await unit_env.get(InMemoryDatabase)
        post = await post_service.create_post(owner_id=user_id, title="Post")

        tags = await post_tag_service.reconcile(post.id, ["Rust", "rust ", "Rust"])

        assert len(tags) == 1
        assert len(db.posts_tags) == 1
        assert len(db.tags) == 1

    @pytest.mark.asyncio
    async def test_reuses_existing_tags(self, unit_env, user_id):
        post_service = await unit_env.get(PostService)
        post_tag_service = await unit_env.get(PostTagService)
        tag_service = await unit_env.get(TagService)
        existing = await tag_service.create("Shared")
        post = await post_service.create_post(owner_id=user_id, title="Post")

        tags = await post_tag_service.reconcile(post.id, ["Shared"])

        assert tags[0].id == existing.id

    @pytest.mark.asyncio
    async def test_invalid_name_raises(self, unit_env, user_id):
        post_service = await unit_env.get(PostService)
        post_tag_service = await unit_env.get(PostTagService)
        post = await post_service.create_post(owner_id=user_id, title="Post")

        db = await unit_env.get(InMemoryDatabase)

        with pytest.raises(ValidationError):
            await post_tag_service.reconcile(post.id, ["ok", "###"])

        # The valid name before the bad one was not created either
        assert db.tags == {}

    @pytest.mark.asyncio
    async def test_empty_list_clears(self, unit_env, user_id):
        post_service = await unit_env.get(PostService)
        post_tag_service = await unit_env.get(PostTagService)
        post = await post_service.create_post(
            owner_id=user_id, title="Post", tag_names=["a"]
        )

        tags = await post_tag_service.reconcile(post.id, [])

        assert tags == []
        assert await post_tag_service.fetch_for_post(post.id) == []


class TestFetchForPosts:
    """Tests for fetch_for_posts."""

    @pytest.mark.asyncio
    async def test_batch_lookup_covers_every_post(self, unit_env, user_id):
        post_service = await unit_env.get(PostService)
        post_tag_service = await unit_env.get(PostTagService)
        tagged = await post_service.create_post(
            owner_id=user_id, title="Tagged", tag_names=["b", "a"]
        )
        bare = await post_service.create_post(owner_id=user_id, title="Bare")

        tags_by_post = await post_tag_service.fetch_for_posts([tagged.id, bare.id])

        assert [t.name.root for t in tags_by_post[tagged.id]] == ["a", "b"]
        assert tags_by_post[bare.id] == []

    @pytest.mark.asyncio
    async def test_empty_input_skips_lookup(self, unit_env):
        post_tag_service = await unit_env.get(PostTagService)
        repo = await unit_env.get(PostTagRepository)

        assert await post_tag_service.fetch_for_posts([]) == {}
        assert await repo.find_tags_for_posts([]) == {}
