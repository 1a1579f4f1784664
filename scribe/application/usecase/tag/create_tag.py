"""Create tag use case."""

import logfire
from pydantic import BaseModel

from scribe.domain.service import TagService

from .item import TagItem


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str


class CreateTagUseCase:
    """Use case for explicitly creating a tag."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> TagItem:
        """Create a tag.

        Raises:
            ValidationError: If the name is blank
            DuplicateKeyError: If the name or its slug already exists
        """
        with logfire.span("create_tag.execute", name=request.name):
            tag = await self.tag_service.create(request.name)
            return TagItem.from_tag(tag)
