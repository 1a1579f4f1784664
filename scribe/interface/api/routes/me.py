"""Routes scoped to the signed-in user."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from scribe.application.usecase.post import (
    CountMyPostsRequest,
    CountMyPostsResponse,
    CountMyPostsUseCase,
    ListMyPostsRequest,
    ListMyPostsUseCase,
    PostListResponse,
)
from scribe.domain.service import IdentityService
from scribe.interface.api.auth import access_token

router = APIRouter(prefix="/me", tags=["me"], route_class=DishkaRoute)


@router.get("/posts", response_model=PostListResponse)
async def list_my_posts(
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
    limit: int | None = Query(default=None, ge=1, le=200),
) -> PostListResponse:
    """Every post the caller owns, in any status, newest first."""
    user_id = identity_service.require_user(token)
    return await list_my_posts_use_case.execute(
        ListMyPostsRequest(user_id=str(user_id), limit=limit)
    )


@router.get("/posts/count", response_model=CountMyPostsResponse)
async def count_my_posts(
    count_my_posts_use_case: FromDishka[CountMyPostsUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> CountMyPostsResponse:
    """Number of posts the caller owns."""
    user_id = identity_service.require_user(token)
    return await count_my_posts_use_case.execute(
        CountMyPostsRequest(user_id=str(user_id))
    )
