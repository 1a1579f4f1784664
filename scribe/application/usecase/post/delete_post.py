"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import PostService
from scribe.domain.value import PostId

from .item import optional_user_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool


class DeletePostUseCase:
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete a post, its tag links and (best effort) its featured image.

        Raises:
            NotFoundError: If the post is missing or hidden from the caller
            NotAuthorizedError: If the caller doesn't own the post
        """
        with logfire.span("delete_post.execute", post_id=request.post_id):
            await self.post_service.delete_post(
                PostId(UUID(request.post_id)), optional_user_id(request.user_id)
            )
            return DeletePostResponse(post_id=request.post_id, deleted=True)
