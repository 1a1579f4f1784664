"""Profile use cases."""

from .ensure_profile import EnsureProfileRequest, EnsureProfileUseCase
from .get_profile import GetProfileRequest, GetProfileUseCase
from .item import ProfileItem
from .upsert_profile import UpsertProfileRequest, UpsertProfileUseCase

__all__ = [
    "EnsureProfileRequest",
    "EnsureProfileUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileItem",
    "UpsertProfileRequest",
    "UpsertProfileUseCase",
]
