"""Upload image use case."""

import base64
import binascii
from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.error import ValidationError
from scribe.domain.service import AssetService
from scribe.domain.value import UserId


class UploadImageRequest(BaseModel):
    """Upload image request.

    ``data`` is base64, optionally as a ``data:<type>;base64,`` URL.
    """

    user_id: str  # Current user ID
    data: str
    file_name: str | None = None
    content_type: str


class UploadImageResponse(BaseModel):
    """Upload image response."""

    url: str
    path: str


class UploadImageUseCase:
    """Use case for uploading a featured image before saving a post."""

    def __init__(self, asset_service: AssetService) -> None:
        """Initialize upload image use case.

        Args:
            asset_service: Asset domain service
        """
        self.asset_service = asset_service

    async def execute(self, request: UploadImageRequest) -> UploadImageResponse:
        """Decode and store the image.

        Raises:
            ValidationError: If the data is not base64 or the image is rejected
            StorageError: If the asset store fails
        """
        with logfire.span(
            "upload_image.execute",
            user_id=request.user_id,
            content_type=request.content_type,
        ):
            data = self._decode(request.data)
            url = await self.asset_service.upload(
                UserId(UUID(request.user_id)),
                data,
                request.content_type,
                file_name=request.file_name,
            )
            return UploadImageResponse(url=url, path=self.asset_service.url_to_path(url))

    @staticmethod
    def _decode(data: str) -> bytes:
        if data.startswith("data:") and "," in data:
            data = data.split(",", 1)[1]
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error as e:
            raise ValidationError("Image data is not valid base64") from e
