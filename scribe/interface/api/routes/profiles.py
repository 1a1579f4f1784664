"""Profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from scribe.application.usecase.profile import (
    EnsureProfileRequest,
    EnsureProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ProfileItem,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from scribe.domain.service import IdentityService
from scribe.interface.api.auth import access_token

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class ProfileAPIRequest(BaseModel):
    """API request for profile writes. Omit ``name`` to keep the stored one."""

    name: str | None = None


@router.put("/me", response_model=ProfileItem)
async def upsert_my_profile(
    request: ProfileAPIRequest,
    upsert_profile_use_case: FromDishka[UpsertProfileUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> ProfileItem:
    """Create or update the caller's profile."""
    user_id = identity_service.require_user(token)
    return await upsert_profile_use_case.execute(
        UpsertProfileRequest(user_id=str(user_id), name=request.name)
    )


@router.post("/me/ensure", response_model=ProfileItem | None)
async def ensure_my_profile(
    request: ProfileAPIRequest,
    ensure_profile_use_case: FromDishka[EnsureProfileUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> ProfileItem | None:
    """Called after sign-in: returns the profile, creating it if a name is given."""
    user_id = identity_service.require_user(token)
    return await ensure_profile_use_case.execute(
        EnsureProfileRequest(user_id=str(user_id), name=request.name)
    )


@router.get("/{user_id}", response_model=ProfileItem | None)
async def get_profile(
    user_id: UUID,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileItem | None:
    """A user's profile, or null if they never set one up."""
    return await get_profile_use_case.execute(GetProfileRequest(user_id=str(user_id)))
