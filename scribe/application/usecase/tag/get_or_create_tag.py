"""Get-or-create tag use case."""

import logfire
from pydantic import BaseModel

from scribe.domain.service import TagService

from .item import TagItem


class GetOrCreateTagRequest(BaseModel):
    """Get-or-create tag request."""

    name: str


class GetOrCreateTagUseCase:
    """Use case for resolving a tag name, creating the tag on first use."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize get-or-create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: GetOrCreateTagRequest) -> TagItem:
        with logfire.span("get_or_create_tag.execute", name=request.name):
            tag = await self.tag_service.get_or_create(request.name)
            return TagItem.from_tag(tag)
