"""Tag routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from scribe.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagResponse,
    DeleteTagUseCase,
    GetOrCreateTagRequest,
    GetOrCreateTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
    SearchTagsRequest,
    SearchTagsUseCase,
    TagItem,
    TagListResponse,
)
from scribe.domain.service import IdentityService
from scribe.interface.api.auth import access_token

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


class TagNameAPIRequest(BaseModel):
    """API request carrying a tag name."""

    name: str = Field(min_length=1, max_length=100)


@router.get("", response_model=TagListResponse)
async def search_tags(
    search_tags_use_case: FromDishka[SearchTagsUseCase],
    q: str | None = Query(default=None, description="Substring of the tag name"),
) -> TagListResponse:
    """Autocomplete tags by name (case-insensitive)."""
    return await search_tags_use_case.execute(SearchTagsRequest(term=q))


@router.get("/all", response_model=TagListResponse)
async def list_tags(list_tags_use_case: FromDishka[ListTagsUseCase]) -> TagListResponse:
    """Every tag, ordered by name."""
    return await list_tags_use_case.execute(ListTagsRequest())


@router.post("", response_model=TagItem, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: TagNameAPIRequest,
    create_tag_use_case: FromDishka[CreateTagUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> TagItem:
    """Create a tag. 409 if the name or its slug is taken."""
    identity_service.require_user(token)
    return await create_tag_use_case.execute(CreateTagRequest(name=request.name))


@router.post("/get-or-create", response_model=TagItem)
async def get_or_create_tag(
    request: TagNameAPIRequest,
    get_or_create_tag_use_case: FromDishka[GetOrCreateTagUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> TagItem:
    """Return the tag with this name, creating it on first use."""
    identity_service.require_user(token)
    return await get_or_create_tag_use_case.execute(
        GetOrCreateTagRequest(name=request.name)
    )


@router.delete("/{tag_id}", response_model=DeleteTagResponse)
async def delete_tag(
    tag_id: UUID,
    delete_tag_use_case: FromDishka[DeleteTagUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> DeleteTagResponse:
    """Delete a tag and its post associations."""
    identity_service.require_user(token)
    return await delete_tag_use_case.execute(DeleteTagRequest(tag_id=str(tag_id)))
