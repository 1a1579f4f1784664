"""Delete tag use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import TagService
from scribe.domain.value import TagId


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    tag_id: str  # UUID string


class DeleteTagResponse(BaseModel):
    """Delete tag response."""

    tag_id: str
    deleted: bool


class DeleteTagUseCase:
    """Use case for deleting a tag.

    Posts keep existing; only their association with the tag is removed.
    """

    def __init__(self, tag_service: TagService) -> None:
        """Initialize delete tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: DeleteTagRequest) -> DeleteTagResponse:
        """Delete a tag.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("delete_tag.execute", tag_id=request.tag_id):
            await self.tag_service.delete(TagId(UUID(request.tag_id)))
            return DeleteTagResponse(tag_id=request.tag_id, deleted=True)
