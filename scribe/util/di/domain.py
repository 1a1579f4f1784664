"""Domain layer DI providers."""

from dishka import Scope, provide

from scribe.config import AuthSettings, ListingSettings, StorageSettings
from scribe.domain.repository import (
    AfterCommit,
    PostRepository,
    PostTagRepository,
    ProfileRepository,
    TagRepository,
)
from scribe.domain.service import (
    AssetService,
    AssetStore,
    IdentityService,
    PostService,
    PostTagService,
    ProfileService,
    TagService,
)
from scribe.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide identity domain service. Stateless, so shared app-wide."""
        return IdentityService(auth_settings=auth_settings)

    @provide
    def get_asset_service(
        self, asset_store: AssetStore, storage_settings: StorageSettings
    ) -> AssetService:
        """Provide asset domain service."""
        return AssetService(asset_store=asset_store, storage_settings=storage_settings)

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, listing_settings: ListingSettings
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository,
            search_limit=listing_settings.tag_search_limit,
        )

    @provide
    def get_post_tag_service(
        self, post_tag_repository: PostTagRepository, tag_service: TagService
    ) -> PostTagService:
        """Provide post-tag association domain service."""
        return PostTagService(
            post_tag_repository=post_tag_repository, tag_service=tag_service
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        post_tag_service: PostTagService,
        asset_service: AssetService,
        after_commit: AfterCommit,
        listing_settings: ListingSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            post_tag_service=post_tag_service,
            asset_service=asset_service,
            after_commit=after_commit,
            list_limit=listing_settings.post_limit,
        )

    @provide
    def get_profile_service(self, profile_repository: ProfileRepository) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)
