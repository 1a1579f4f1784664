"""Search tags use case."""

import logfire
from pydantic import BaseModel

from scribe.domain.service import TagService

from .item import TagItem, TagListResponse


class SearchTagsRequest(BaseModel):
    """Search tags request."""

    term: str | None = None


class SearchTagsUseCase:
    """Use case for tag autocomplete."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize search tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: SearchTagsRequest) -> TagListResponse:
        """Find tags whose name contains the term, ignoring case.

        Args:
            request: Search request; a blank term lists the first tags by name

        Returns:
            Matching tags ordered by name
        """
        with logfire.span("search_tags.execute", term=request.term):
            tags = await self.tag_service.search(request.term)
            return TagListResponse(tags=[TagItem.from_tag(t) for t in tags])
