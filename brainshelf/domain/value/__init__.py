"""Domain value objects."""

from brainshelf.domain.value.common import RootValueObject, ValueObject
from brainshelf.domain.value.identifiers import (
    EntryId,
    MetadataId,
    ProjectId,
    TagId,
    TemplateId,
)
from brainshelf.domain.value.search import (
    DATE_RANGE_ERROR,
    SearchQuery,
    SearchSort,
    is_inverted_range,
    sanitize_search_query,
    search_tokens,
)
from brainshelf.domain.value.types import (
    DEFAULT_PROJECT_COLOR,
    MAX_PAGE_SIZE,
    MAX_TAG_NAME_LENGTH,
    EntryType,
    PageRequest,
    ProjectColor,
    TagName,
)

__all__ = [
    # Base classes
    "ValueObject",
    "RootValueObject",
    # Identifiers
    "EntryId",
    "MetadataId",
    "ProjectId",
    "TagId",
    "TemplateId",
    # Types
    "DEFAULT_PROJECT_COLOR",
    "EntryType",
    "MAX_PAGE_SIZE",
    "MAX_TAG_NAME_LENGTH",
    "PageRequest",
    "ProjectColor",
    "TagName",
    # Search
    "DATE_RANGE_ERROR",
    "SearchQuery",
    "SearchSort",
    "is_inverted_range",
    "sanitize_search_query",
    "search_tokens",
]
