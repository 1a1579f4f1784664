"""Count posts use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import PostService
from scribe.domain.value import UserId


class CountMyPostsRequest(BaseModel):
    """Count own posts request."""

    user_id: str  # Current user ID


class CountMyPostsResponse(BaseModel):
    """Count own posts response."""

    count: int


class CountMyPostsUseCase:
    """Use case for counting the caller's posts in every status."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize count posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CountMyPostsRequest) -> CountMyPostsResponse:
        with logfire.span("count_my_posts.execute", user_id=request.user_id):
            count = await self.post_service.count_owned(UserId(UUID(request.user_id)))
            return CountMyPostsResponse(count=count)
