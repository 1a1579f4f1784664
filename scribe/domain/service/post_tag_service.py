"""Post-tag association domain service."""

import logfire

from scribe.domain.model.tag import Tag
from scribe.domain.repository.post_tag import PostTagRepository
from scribe.domain.value import PostId, TagId, TagName

from .base import Service
from .tag_service import TagService


class PostTagService(Service):
    """Keeps a post's tag set in sync with a list of tag names."""

    def __init__(
        self, post_tag_repository: PostTagRepository, tag_service: TagService
    ) -> None:
        """Initialize post-tag service.

        Args:
            post_tag_repository: Association repository
            tag_service: Tag domain service, used to resolve names to tags
        """
        self.post_tag_repository = post_tag_repository
        self.tag_service = tag_service

    @staticmethod
    def parse_names(tag_names: list[str]) -> list[TagName]:
        """Validate tag names without touching storage.

        Blank names are skipped, as ``reconcile`` skips them.

        Raises:
            ValidationError: If any name is not a valid tag name
        """
        return [TagService.parse_name(raw) for raw in tag_names if raw.strip()]

    async def reconcile(self, post_id: PostId, tag_names: list[str]) -> list[Tag]:
        """Replace the tags of a post with the given names.

        Names are trimmed and blank ones skipped. Missing tags are created.
        Names that resolve to the same tag produce a single association.
        The old associations are deleted and the new ones inserted; tags
        that end up unused are kept.

        Args:
            post_id: Post to retag
            tag_names: Complete new set of tag names, empty to clear

        Returns:
            The post's tags ordered by name
        """
        with logfire.span(
            "post_tag_service.reconcile", post_id=str(post_id), tag_count=len(tag_names)
        ):
            # Every name is checked before the first tag is created
            names = self.parse_names(tag_names)
            tags: list[Tag] = []
            seen: set[TagId] = set()

            # Sequential on purpose: every lookup shares the request session
            for name in names:
                tag = await self.tag_service.get_or_create(name.root)
                if tag.id in seen:
                    continue
                seen.add(tag.id)
                tags.append(tag)

            await self.post_tag_repository.replace(post_id, [t.id for t in tags])
            logfire.info(
                "Post tags reconciled",
                post_id=str(post_id),
                tags=[t.name.root for t in tags],
            )
            return sorted(tags, key=lambda t: t.name.root)

    async def fetch_for_post(self, post_id: PostId) -> list[Tag]:
        """Tags of a single post, ordered by name."""
        with logfire.span("post_tag_service.fetch_for_post", post_id=str(post_id)):
            return await self.post_tag_repository.find_tags_for_post(post_id)

    async def fetch_for_posts(self, post_ids: list[PostId]) -> dict[PostId, list[Tag]]:
        """Tags for a page of posts, batched into one lookup."""
        with logfire.span("post_tag_service.fetch_for_posts", count=len(post_ids)):
            if not post_ids:
                return {}
            return await self.post_tag_repository.find_tags_for_posts(post_ids)
