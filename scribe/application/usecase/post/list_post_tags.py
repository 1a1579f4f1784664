"""List post tags use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.application.usecase.tag.item import TagItem, TagListResponse
from scribe.domain.service import PostService, PostTagService
from scribe.domain.value import PostId

from .item import optional_user_id


class ListPostTagsRequest(BaseModel):
    """List post tags request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class ListPostTagsUseCase:
    """Use case for the tags of one post.

    The post must be visible to the caller; tags of a hidden draft are
    as hidden as the draft itself.
    """

    def __init__(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> None:
        """Initialize list post tags use case.

        Args:
            post_service: Post domain service
            post_tag_service: Post-tag association service
        """
        self.post_service = post_service
        self.post_tag_service = post_tag_service

    async def execute(self, request: ListPostTagsRequest) -> TagListResponse:
        with logfire.span("list_post_tags.execute", post_id=request.post_id):
            post = await self.post_service.get_post(
                PostId(UUID(request.post_id)), optional_user_id(request.user_id)
            )
            tags = await self.post_tag_service.fetch_for_post(post.id)
            return TagListResponse(tags=[TagItem.from_tag(t) for t in tags])
