"""Domain services."""

from .asset_service import AssetService, AssetStore
from .base import Service
from .identity_service import IdentityService
from .post_service import PostService
from .post_tag_service import PostTagService
from .profile_service import ProfileService
from .tag_service import TagService

__all__ = [
    "AssetService",
    "AssetStore",
    "IdentityService",
    "PostService",
    "PostTagService",
    "ProfileService",
    "Service",
    "TagService",
]
