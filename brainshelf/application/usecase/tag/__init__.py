"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagUseCase
from .get_tag import GetTagRequest, GetTagUseCase
from .list_tags import (
    ListTagsRequest,
    ListTagsUseCase,
    TagItem,
    TagListView,
    TagUsageItem,
)
from .merge_tags import MergeTagsRequest, MergeTagsResponse, MergeTagsUseCase
from .rename_tag import RenameTagRequest, RenameTagUseCase
from .tag_statistics import TagStatisticsResponse, TagStatisticsUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagUseCase",
    "GetTagRequest",
    "GetTagUseCase",
    "ListTagsRequest",
    "ListTagsUseCase",
    "MergeTagsRequest",
    "MergeTagsResponse",
    "MergeTagsUseCase",
    "RenameTagRequest",
    "RenameTagUseCase",
    "TagItem",
    "TagListView",
    "TagStatisticsResponse",
    "TagStatisticsUseCase",
    "TagUsageItem",
]
