"""Get post use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import PostService, PostTagService
from scribe.domain.value import PostId

from .item import PostItem, optional_user_id


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPostUseCase:
    """Use case for reading a post as the caller sees it.

    Owners see their drafts and archived posts; everyone else only sees
    published ones.
    """

    def __init__(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            post_tag_service: Post-tag association service
        """
        self.post_service = post_service
        self.post_tag_service = post_tag_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post is missing or hidden from the caller
        """
        with logfire.span("get_post.execute", post_id=request.post_id):
            post = await self.post_service.get_post(
                PostId(UUID(request.post_id)), optional_user_id(request.user_id)
            )
            tags = await self.post_tag_service.fetch_for_post(post.id)
            return PostItem.from_post(post, tags)


class GetPublicPostRequest(BaseModel):
    """Get public post request."""

    post_id: str  # UUID string


class GetPublicPostUseCase:
    """Use case for reading a post through its public page.

    Only published posts are returned, even to their owner.
    """

    def __init__(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> None:
        """Initialize get public post use case.

        Args:
            post_service: Post domain service
            post_tag_service: Post-tag association service
        """
        self.post_service = post_service
        self.post_tag_service = post_tag_service

    async def execute(self, request: GetPublicPostRequest) -> PostItem:
        with logfire.span("get_public_post.execute", post_id=request.post_id):
            post = await self.post_service.get_public_post(PostId(UUID(request.post_id)))
            tags = await self.post_tag_service.fetch_for_post(post.id)
            return PostItem.from_post(post, tags)
