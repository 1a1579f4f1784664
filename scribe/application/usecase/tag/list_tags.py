"""List tags use case."""

import logfire
from pydantic import BaseModel

from scribe.domain.service import TagService

from .item import TagItem, TagListResponse


class ListTagsRequest(BaseModel):
    """List tags request."""

    pass


class ListTagsUseCase:
    """Use case for listing every tag."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> TagListResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            All tags ordered by name
        """
        with logfire.span("list_tags.execute"):
            tags = await self.tag_service.list_all()
            return TagListResponse(tags=[TagItem.from_tag(t) for t in tags])
