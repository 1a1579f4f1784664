"""Post use cases."""

from .count_posts import CountMyPostsRequest, CountMyPostsResponse, CountMyPostsUseCase
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import (
    GetPostRequest,
    GetPostUseCase,
    GetPublicPostRequest,
    GetPublicPostUseCase,
)
from .item import PostItem, PostListResponse
from .list_post_tags import ListPostTagsRequest, ListPostTagsUseCase
from .list_posts import (
    ListMyPostsRequest,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CountMyPostsRequest",
    "CountMyPostsResponse",
    "CountMyPostsUseCase",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "GetPublicPostRequest",
    "GetPublicPostUseCase",
    "ListMyPostsRequest",
    "ListMyPostsUseCase",
    "ListPostTagsRequest",
    "ListPostTagsUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PostItem",
    "PostListResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
