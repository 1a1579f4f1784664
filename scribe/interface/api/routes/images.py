"""Image upload and removal routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from scribe.application.usecase.image import (
    DeleteImageRequest,
    DeleteImageResponse,
    DeleteImageUseCase,
    UploadImageRequest,
    UploadImageResponse,
    UploadImageUseCase,
)
from scribe.domain.service import IdentityService
from scribe.interface.api.auth import access_token

router = APIRouter(prefix="/images", tags=["images"], route_class=DishkaRoute)


class UploadImageAPIRequest(BaseModel):
    """API request for an image upload."""

    data: str = Field(min_length=1, description="Base64 image data")
    file_name: str | None = None
    content_type: str


@router.post("", response_model=UploadImageResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    request: UploadImageAPIRequest,
    upload_image_use_case: FromDishka[UploadImageUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> UploadImageResponse:
    """Upload a featured image. Returns its public URL."""
    user_id = identity_service.require_user(token)
    return await upload_image_use_case.execute(
        UploadImageRequest(
            user_id=str(user_id),
            data=request.data,
            file_name=request.file_name,
            content_type=request.content_type,
        )
    )


@router.delete("", response_model=DeleteImageResponse)
async def delete_image(
    delete_image_use_case: FromDishka[DeleteImageUseCase],
    identity_service: FromDishka[IdentityService],
    path: str = Query(min_length=1, description="Public URL or object path"),
    token: str | None = Depends(access_token),
) -> DeleteImageResponse:
    """Delete an uploaded image from the caller's folder.

    For images removed from a form before the post was saved.
    """
    user_id = identity_service.require_user(token)
    return await delete_image_use_case.execute(
        DeleteImageRequest(user_id=str(user_id), image=path)
    )
