"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from scribe.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    GetPublicPostRequest,
    GetPublicPostUseCase,
    ListPostTagsRequest,
    ListPostTagsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostItem,
    PostListResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from scribe.application.usecase.tag import TagListResponse
from scribe.domain.model.post import PostPatch
from scribe.domain.service import IdentityService
from scribe.domain.value import PostStatus
from scribe.interface.api.auth import access_token

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1)
    body: str | None = None
    status: PostStatus | None = None
    featured_image: str | None = None
    tag_names: list[str] | None = None


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post.

    Omitted fields are left alone; fields sent as null are cleared where
    that is allowed.
    """

    title: str | None = None
    body: str | None = None
    status: PostStatus | None = None
    featured_image: str | None = None
    tag_names: list[str] | None = None


@router.get("", response_model=PostListResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int | None = Query(default=None, ge=1, le=200),
) -> PostListResponse:
    """List published posts, newest first."""
    return await list_posts_use_case.execute(ListPostsRequest(limit=limit))


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> PostItem:
    """Create a new post owned by the caller.

    Requires authentication. Unknown tag names are created.
    """
    user_id = identity_service.require_user(token)

    return await create_post_use_case.execute(
        CreatePostRequest(
            owner_id=str(user_id),
            title=request.title,
            body=request.body,
            status=request.status,
            featured_image=request.featured_image,
            tag_names=request.tag_names,
        )
    )


@router.get("/public/{post_id}", response_model=PostItem)
async def get_public_post(
    post_id: UUID,
    get_public_post_use_case: FromDishka[GetPublicPostUseCase],
) -> PostItem:
    """Get a published post. Drafts are 404 even for their owner."""
    return await get_public_post_use_case.execute(
        GetPublicPostRequest(post_id=str(post_id))
    )


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> PostItem:
    """Get a post by ID.

    Owners also see their unpublished posts. An invalid token is treated
    as anonymous.
    """
    user_id = identity_service.current_user_id(token)
    return await get_post_use_case.execute(
        GetPostRequest(post_id=str(post_id), user_id=str(user_id) if user_id else None)
    )


@router.get("/{post_id}/tags", response_model=TagListResponse)
async def list_post_tags(
    post_id: UUID,
    list_post_tags_use_case: FromDishka[ListPostTagsUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> TagListResponse:
    """Tags of a post, ordered by name."""
    user_id = identity_service.current_user_id(token)
    return await list_post_tags_use_case.execute(
        ListPostTagsRequest(
            post_id=str(post_id), user_id=str(user_id) if user_id else None
        )
    )


@router.patch("/{post_id}", response_model=PostItem)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> PostItem:
    """Partially update a post. Only the owner can edit.

    Sending ``tag_names`` replaces the whole tag set; ``[]`` clears it.
    """
    user_id = identity_service.require_user(token)

    patch = PostPatch(**request.model_dump(exclude_unset=True))
    return await update_post_use_case.execute(
        UpdatePostRequest(post_id=str(post_id), user_id=str(user_id), patch=patch)
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> DeletePostResponse:
    """Delete a post. Only the owner can delete."""
    user_id = identity_service.require_user(token)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=str(user_id))
    )
