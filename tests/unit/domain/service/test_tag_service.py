"""Unit tests for TagService."""

import asyncio
from uuid import uuid4

import pytest

from scribe.domain.error import DuplicateKeyError, NotFoundError, ValidationError
from scribe.domain.model.tag import Tag
from scribe.domain.repository import TagRepository
from scribe.domain.service import TagService
from scribe.domain.value import Slug, TagId, TagName
from scribe.persistence.repository.inmemory import InMemoryDatabase, InMemoryTagRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class RacingTagRepository(InMemoryTagRepository):
    """Tag repository whose lookups miss until an insert has been attempted.

    Reproduces two callers that both checked before either inserted.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        super().__init__(db)
        self.insert_attempts = 0

    async def find_by_name(self, name):
        if self.insert_attempts == 0:
            await asyncio.sleep(0)
            return None
        return await super().find_by_name(name)

    async def find_by_slug(self, slug):
        if self.insert_attempts == 0:
            await asyncio.sleep(0)
            return None
        return await super().find_by_slug(slug)

    async def insert(self, tag: Tag) -> Tag:
        self.insert_attempts += 1
        return await super().insert(tag)


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_trims_name_and_derives_slug(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)

        # Act
        tag = await tag_service.create("  Machine Learning ")

        # Assert
        assert tag.name.root == "Machine Learning"
        assert tag.slug.root == "machine-learning"

    @pytest.mark.asyncio
    async def test_create_duplicate_name_raises(self, unit_env):
        tag_service = await unit_env.get(TagService)
        await tag_service.create("Rust")

        with pytest.raises(DuplicateKeyError) as exc_info:
            await tag_service.create("Rust")

        assert exc_info.value.field == "name"

    @pytest.mark.asyncio
    async def test_create_same_slug_different_case_raises(self, unit_env):
        tag_service = await unit_env.get(TagService)
        await tag_service.create("Rust")

        with pytest.raises(DuplicateKeyError) as exc_info:
            await tag_service.create("rust")

        assert exc_info.value.field == "slug"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "!!!"])
    async def test_create_invalid_name_raises(self, unit_env, name):
        tag_service = await unit_env.get(TagService)

        with pytest.raises(ValidationError):
            await tag_service.create(name)


class TestGetOrCreate:
    """Tests for get_or_create."""

    @pytest.mark.asyncio
    async def test_creates_missing_tag(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)

        tag = await tag_service.get_or_create("Python")

        assert await tag_repo.find_by_id(tag.id) == tag

    @pytest.mark.asyncio
    async def test_returns_existing_tag(self, unit_env):
        tag_service = await unit_env.get(TagService)
        first = await tag_service.get_or_create("Python")

        second = await tag_service.get_or_create(" Python ")

        assert second.id == first.id

    @pytest.mark.asyncio
    async def test_case_variant_resolves_by_slug(self, unit_env):
        tag_service = await unit_env.get(TagService)
        first = await tag_service.get_or_create("Rust")

        second = await tag_service.get_or_create("rust")

        assert second.id == first.id
        assert second.name.root == "Rust"

    @pytest.mark.asyncio
    async def test_concurrent_calls_return_the_same_tag(self):
        """Two callers racing on one name both get the single stored tag."""
        # Arrange
        db = InMemoryDatabase()
        tag_service = TagService(RacingTagRepository(db))

        # Act
        first, second = await asyncio.gather(
            tag_service.get_or_create("Async"),
            tag_service.get_or_create("Async"),
        )

        # Assert
        assert first.id == second.id
        assert len(db.tags) == 1

    @pytest.mark.asyncio
    async def test_conflict_without_matching_row_raises(self):
        """If the insert conflicts but nothing can be re-read, surface it."""

        class GhostConflictRepository(RacingTagRepository):
            async def find_by_name(self, name):
                return None

            async def find_by_slug(self, slug):
                return None

        db = InMemoryDatabase()
        db.insert_tag(
            Tag(id=TagId(uuid4()), name=TagName("Ghost"), slug=Slug("ghost"))
        )
        tag_service = TagService(GhostConflictRepository(db))

        with pytest.raises(DuplicateKeyError):
            await tag_service.get_or_create("Ghost")


class TestSearch:
    """Tests for search and list_all."""

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, unit_env):
        tag_service = await unit_env.get(TagService)
        for name in ["Python", "Rust", "CPython internals", "Ruby"]:
            await tag_service.create(name)

        tags = await tag_service.search("PYTH")

        assert [t.name.root for t in tags] == ["CPython internals", "Python"]

    @pytest.mark.asyncio
    async def test_blank_search_lists_all_sorted(self, unit_env):
        tag_service = await unit_env.get(TagService)
        for name in ["b", "c", "a"]:
            await tag_service.create(name)

        tags = await tag_service.search("  ")

        assert [t.name.root for t in tags] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_search_respects_limit(self):
        db = InMemoryDatabase()
        tag_service = TagService(InMemoryTagRepository(db), search_limit=2)
        for name in ["tag1", "tag2", "tag3"]:
            await tag_service.create(name)

        tags = await tag_service.search("tag")

        assert len(tags) == 2

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, unit_env):
        tag_service = await unit_env.get(TagService)
        await tag_service.create("100 percent")

        assert await tag_service.search("%") == []


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_removes_tag(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag = await tag_service.create("Temp")

        await tag_service.delete(tag.id)

        with pytest.raises(NotFoundError):
            await tag_service.get_by_id(tag.id)

    @pytest.mark.asyncio
    async def test_delete_missing_tag_raises(self, unit_env):
        tag_service = await unit_env.get(TagService)

        with pytest.raises(NotFoundError):
            await tag_service.delete(TagId(uuid4()))
