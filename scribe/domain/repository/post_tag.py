"""Post-tag association repository interface."""

from abc import ABC, abstractmethod

from scribe.domain.model.tag import Tag
from scribe.domain.value import PostId, TagId


class PostTagRepository(ABC):
    """Repository for the posts_tags join table."""

    @abstractmethod
    async def replace(self, post_id: PostId, tag_ids: list[TagId]) -> None:
        """Replace every association of a post.

        Existing rows are deleted and one row per tag id is inserted.
        An empty list leaves the post untagged.

        Args:
            post_id: Post whose tags are rewritten
            tag_ids: Distinct tag ids to associate
        """
        pass

    @abstractmethod
    async def find_tags_for_post(self, post_id: PostId) -> list[Tag]:
        """Tags associated with a post, ordered by name."""
        pass

    @abstractmethod
    async def find_tags_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, list[Tag]]:
        """Tags for several posts in one query.

        Args:
            post_ids: Posts to look up

        Returns:
            Mapping of post id to its tags ordered by name. Every requested
            id is present, untagged posts map to an empty list.
        """
        pass
