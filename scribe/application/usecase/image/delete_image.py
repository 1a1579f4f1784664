"""Delete image use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import AssetService
from scribe.domain.value import UserId


class DeleteImageRequest(BaseModel):
    """Delete image request."""

    user_id: str  # Current user ID
    image: str  # Public URL or object path


class DeleteImageResponse(BaseModel):
    """Delete image response."""

    path: str


class DeleteImageUseCase:
    """Use case for deleting an upload that never made it into a post.

    Unlike the cleanup after deleting a post, storage failures reach the
    caller.
    """

    def __init__(self, asset_service: AssetService) -> None:
        """Initialize delete image use case.

        Args:
            asset_service: Asset domain service
        """
        self.asset_service = asset_service

    async def execute(self, request: DeleteImageRequest) -> DeleteImageResponse:
        """Delete the image.

        Raises:
            NotAuthorizedError: If the image is not in the caller's folder
            StorageError: If the asset store fails
        """
        with logfire.span("delete_image.execute", user_id=request.user_id):
            path = await self.asset_service.remove(
                UserId(UUID(request.user_id)), request.image
            )
            return DeleteImageResponse(path=path)
