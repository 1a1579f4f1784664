"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagResponse, DeleteTagUseCase
from .get_or_create_tag import GetOrCreateTagRequest, GetOrCreateTagUseCase
from .item import TagItem, TagListResponse
from .list_tags import ListTagsRequest, ListTagsUseCase
from .search_tags import SearchTagsRequest, SearchTagsUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagResponse",
    "DeleteTagUseCase",
    "GetOrCreateTagRequest",
    "GetOrCreateTagUseCase",
    "ListTagsRequest",
    "ListTagsUseCase",
    "SearchTagsRequest",
    "SearchTagsUseCase",
    "TagItem",
    "TagListResponse",
]
