"""List posts use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from scribe.domain.model.post import Post
from scribe.domain.service import PostService, PostTagService
from scribe.domain.value import UserId

from .item import PostItem, PostListResponse, optional_user_id


async def _with_tags(
    post_tag_service: PostTagService, posts: list[Post]
) -> PostListResponse:
    tags_by_post = await post_tag_service.fetch_for_posts([p.id for p in posts])
    return PostListResponse(
        posts=[PostItem.from_post(p, tags_by_post.get(p.id, [])) for p in posts]
    )


class ListPostsRequest(BaseModel):
    """List published posts request."""

    limit: int | None = Field(default=None, ge=1, le=200)


class ListPostsUseCase:
    """Use case for the public post listing."""

    def __init__(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            post_tag_service: Post-tag association service
        """
        self.post_service = post_service
        self.post_tag_service = post_tag_service

    async def execute(self, request: ListPostsRequest) -> PostListResponse:
        """Published posts, newest first, with their tags."""
        with logfire.span("list_posts.execute", limit=request.limit):
            posts = await self.post_service.list_published(limit=request.limit)
            return await _with_tags(self.post_tag_service, posts)


class ListMyPostsRequest(BaseModel):
    """List own posts request."""

    user_id: str  # Current user ID
    owner_id: str | None = None  # Defaults to the current user
    limit: int | None = Field(default=None, ge=1, le=200)


class ListMyPostsUseCase:
    """Use case for the author dashboard: every post the caller owns."""

    def __init__(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> None:
        """Initialize list my posts use case.

        Args:
            post_service: Post domain service
            post_tag_service: Post-tag association service
        """
        self.post_service = post_service
        self.post_tag_service = post_tag_service

    async def execute(self, request: ListMyPostsRequest) -> PostListResponse:
        """Execute list own posts flow.

        Raises:
            NotAuthorizedError: If ``owner_id`` is someone else
        """
        requesting_user = optional_user_id(request.user_id)
        owner_id = UserId(UUID(request.owner_id or request.user_id))

        with logfire.span("list_my_posts.execute", owner_id=str(owner_id)):
            posts = await self.post_service.list_owned(
                owner_id, requesting_user, limit=request.limit
            )
            return await _with_tags(self.post_tag_service, posts)
