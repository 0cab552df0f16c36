"""Tag use cases."""

from .list_tags import ListTagsResponse, ListTagsUseCase, TagItem
from .search_tags import SearchTagsRequest, SearchTagsResponse, SearchTagsUseCase

__all__ = [
    "ListTagsResponse",
    "ListTagsUseCase",
    "SearchTagsRequest",
    "SearchTagsResponse",
    "SearchTagsUseCase",
    "TagItem",
]
