"""Application layer DI providers."""

from dishka import Scope, provide

from scribe.application.usecase.image import DeleteImageUseCase, UploadImageUseCase
from scribe.application.usecase.post import (
    CountMyPostsUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    GetPublicPostUseCase,
    ListMyPostsUseCase,
    ListPostTagsUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from scribe.application.usecase.profile import (
    EnsureProfileUseCase,
    GetProfileUseCase,
    UpsertProfileUseCase,
)
from scribe.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetOrCreateTagUseCase,
    ListTagsUseCase,
    SearchTagsUseCase,
)
from scribe.domain.service import (
    AssetService,
    PostService,
    PostTagService,
    ProfileService,
    TagService,
)
from scribe.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_get_post_use_case(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, post_tag_service=post_tag_service)

    @provide
    def get_get_public_post_use_case(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> GetPublicPostUseCase:
        """Provide get public post use case."""
        return GetPublicPostUseCase(
            post_service=post_service, post_tag_service=post_tag_service
        )

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service, post_tag_service=post_tag_service
        )

    @provide
    def get_list_my_posts_use_case(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> ListMyPostsUseCase:
        """Provide list my posts use case."""
        return ListMyPostsUseCase(
            post_service=post_service, post_tag_service=post_tag_service
        )

    @provide
    def get_count_my_posts_use_case(self, post_service: PostService) -> CountMyPostsUseCase:
        """Provide count my posts use case."""
        return CountMyPostsUseCase(post_service=post_service)

    @provide
    def get_create_post_use_case(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service, post_tag_service=post_tag_service
        )

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, post_tag_service=post_tag_service
        )

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_list_post_tags_use_case(
        self, post_service: PostService, post_tag_service: PostTagService
    ) -> ListPostTagsUseCase:
        """Provide list post tags use case."""
        return ListPostTagsUseCase(
            post_service=post_service, post_tag_service=post_tag_service
        )

    # Tag use cases
    @provide
    def get_search_tags_use_case(self, tag_service: TagService) -> SearchTagsUseCase:
        """Provide search tags use case."""
        return SearchTagsUseCase(tag_service=tag_service)

    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    @provide
    def get_get_or_create_tag_use_case(
        self, tag_service: TagService
    ) -> GetOrCreateTagUseCase:
        """Provide get-or-create tag use case."""
        return GetOrCreateTagUseCase(tag_service=tag_service)

    @provide
    def get_delete_tag_use_case(self, tag_service: TagService) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(tag_service=tag_service)

    # Profile use cases
    @provide
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide
    def get_upsert_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpsertProfileUseCase:
        """Provide upsert profile use case."""
        return UpsertProfileUseCase(profile_service=profile_service)

    @provide
    def get_ensure_profile_use_case(
        self, profile_service: ProfileService
    ) -> EnsureProfileUseCase:
        """Provide ensure profile use case."""
        return EnsureProfileUseCase(profile_service=profile_service)

    # Image use cases
    @provide
    def get_upload_image_use_case(
        self, asset_service: AssetService
    ) -> UploadImageUseCase:
        """Provide upload image use case."""
        return UploadImageUseCase(asset_service=asset_service)

    @provide
    def get_delete_image_use_case(
        self, asset_service: AssetService
    ) -> DeleteImageUseCase:
        """Provide delete image use case."""
        return DeleteImageUseCase(asset_service=asset_service)
