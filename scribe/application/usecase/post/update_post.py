"""Update post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.model.post import PostPatch
from scribe.domain.service import PostService, PostTagService
from scribe.domain.value import PostId

from .item import PostItem, optional_user_id


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)
    patch: PostPatch


class UpdatePostUseCase:
    """Use case for partially updating a post."""

    def __init__(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            post_tag_service: Post-tag association service
        """
        self.post_service = post_service
        self.post_tag_service = post_tag_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Args:
            request: Post ID, caller and the fields to change

        Returns:
            Updated post details

        Raises:
            NotFoundError: If the post is missing or hidden from the caller
            NotAuthorizedError: If the caller doesn't own the post
            ValidationError: If the patch is invalid
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span(
            "update_post.execute",
            post_id=request.post_id,
            fields=sorted(request.patch.model_fields_set),
        ):
            post = await self.post_service.update_post(
                post_id, optional_user_id(request.user_id), request.patch
            )
            tags = await self.post_tag_service.fetch_for_post(post_id)
            return PostItem.from_post(post, tags)
