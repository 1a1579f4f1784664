"""Create post use case."""

import logfire
from pydantic import BaseModel

from scribe.domain.service import PostService, PostTagService
from scribe.domain.value import PostStatus

from .item import PostItem, optional_user_id


class CreatePostRequest(BaseModel):
    """Create post request."""

    owner_id: str  # User ID from authenticated user
    title: str
    body: str | None = None
    status: PostStatus | None = None
    featured_image: str | None = None
    tag_names: list[str] | None = None


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            post_tag_service: Post-tag association service
        """
        self.post_service = post_service
        self.post_tag_service = post_tag_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Steps:
        1. Create the post row (draft unless a status is given)
        2. Resolve tag names, creating missing tags, and link them
        3. Read back the tags as stored

        All of it runs in the request transaction.

        Args:
            request: Create post request

        Returns:
            The created post with its tags

        Raises:
            ValidationError: If the title is blank or a tag name is invalid
        """
        with logfire.span(
            "create_post.execute",
            owner_id=request.owner_id,
            tags=request.tag_names or [],
        ):
            post = await self.post_service.create_post(
                owner_id=optional_user_id(request.owner_id),
                title=request.title,
                body=request.body,
                status=request.status,
                featured_image=request.featured_image,
                tag_names=request.tag_names,
            )
            tags = await self.post_tag_service.fetch_for_post(post.id)
            return PostItem.from_post(post, tags)
