"""Tag domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from scribe.domain.error import DuplicateKeyError, NotFoundError, ValidationError
from scribe.domain.model.tag import Tag
from scribe.domain.repository.tag import TagRepository
from scribe.domain.value import Slug, TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations.

    Tag names are unique as given (after trimming) and so are the slugs
    derived from them. Two spellings that slugify alike ("Rust", "rust ")
    therefore resolve to the same tag: whichever was created first.
    """

    def __init__(self, tag_repository: TagRepository, search_limit: int = 100) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            search_limit: Maximum number of tags returned by a search
        """
        self.tag_repository = tag_repository
        self.search_limit = search_limit

    @staticmethod
    def parse_name(name: str) -> TagName:
        """Trim and validate a raw tag name.

        Raises:
            ValidationError: If the name is blank or has no slug-able characters
        """
        try:
            return TagName(name)
        except ValueError as e:
            raise ValidationError(f"Invalid tag name: {name!r}") from e

    async def search(self, term: str | None) -> list[Tag]:
        """Search tags by a case-insensitive substring of their name.

        A blank term lists tags from the start of the alphabet.

        Args:
            term: Substring to search for

        Returns:
            Up to ``search_limit`` tags ordered by name
        """
        term = (term or "").strip()
        with logfire.span("tag_service.search", term=term, limit=self.search_limit):
            if not term:
                tags = await self.tag_repository.find_all(limit=self.search_limit)
            else:
                tags = await self.tag_repository.search(term, limit=self.search_limit)
            logfire.info("Tags searched", term=term, count=len(tags))
            return tags

    async def list_all(self) -> list[Tag]:
        """Every tag, ordered by name."""
        with logfire.span("tag_service.list_all"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_by_id(self, tag_id: TagId) -> Tag:
        with logfire.span("tag_service.get_by_id", tag_id=str(tag_id)):
            tag = await self.tag_repository.find_by_id(tag_id)
            if not tag:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            return tag

    async def create(self, name: str) -> Tag:
        """Create a new tag.

        Args:
            name: Tag name, trimmed before storing

        Returns:
            Created tag

        Raises:
            ValidationError: If the name is invalid
            DuplicateKeyError: If the name or its slug is already taken
        """
        tag_name = self.parse_name(name)
        slug = Slug.from_name(tag_name)

        with logfire.span("tag_service.create", tag_name=tag_name.root, slug=slug.root):
            if await self.tag_repository.find_by_name(tag_name):
                logfire.warn("Duplicate tag name", tag_name=tag_name.root)
                raise DuplicateKeyError("tag", "name", tag_name.root)
            if await self.tag_repository.find_by_slug(slug):
                logfire.warn("Duplicate tag slug", tag_name=tag_name.root, slug=slug.root)
                raise DuplicateKeyError("tag", "slug", slug.root)

            try:
                tag = await self.tag_repository.insert(self._new_tag(tag_name, slug))
            except IntegrityError:
                # Lost a race with a concurrent insert of the same name
                logfire.warn("Tag insert hit unique constraint", tag_name=tag_name.root)
                raise DuplicateKeyError("tag", "name", tag_name.root)

            logfire.info("Tag created", tag_id=str(tag.id), tag_name=tag_name.root)
            return tag

    async def get_or_create(self, name: str) -> Tag:
        """Return the tag with this name, creating it if needed.

        Safe under concurrency: the unique constraints decide the winner and
        the loser re-reads the row the winner inserted.

        Args:
            name: Tag name, trimmed before use

        Returns:
            Existing or newly created tag

        Raises:
            ValidationError: If the name is invalid
        """
        tag_name = self.parse_name(name)
        slug = Slug.from_name(tag_name)

        with logfire.span(
            "tag_service.get_or_create", tag_name=tag_name.root, slug=slug.root
        ):
            existing = await self._find_existing(tag_name, slug)
            if existing:
                return existing

            try:
                tag = await self.tag_repository.insert(self._new_tag(tag_name, slug))
                logfire.info("Tag created", tag_id=str(tag.id), tag_name=tag_name.root)
                return tag
            except IntegrityError:
                logfire.info(
                    "Concurrent tag insert detected, re-fetching", tag_name=tag_name.root
                )

            existing = await self._find_existing(tag_name, slug)
            if existing is None:
                logfire.error(
                    "Tag insert conflicted but no matching tag found",
                    tag_name=tag_name.root,
                )
                raise DuplicateKeyError("tag", "name", tag_name.root)
            return existing

    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag. Its post associations are removed with it.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("tag_service.delete", tag_id=str(tag_id)):
            deleted = await self.tag_repository.delete(tag_id)
            if not deleted:
                logfire.warn("Tag not found for deletion", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            logfire.info("Tag deleted", tag_id=str(tag_id))

    async def _find_existing(self, name: TagName, slug: Slug) -> Tag | None:
        tag = await self.tag_repository.find_by_name(name)
        if tag is None:
            tag = await self.tag_repository.find_by_slug(slug)
        return tag

    @staticmethod
    def _new_tag(name: TagName, slug: Slug) -> Tag:
        return Tag(id=TagId(uuid4()), name=name, slug=slug)
