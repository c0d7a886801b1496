"""List tags use case."""

from datetime import datetime
from enum import Enum
from typing import Optional

import logfire
from pydantic import field_validator

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.model.tag import Tag, TagUsage
from brainshelf.domain.service import TagService
from brainshelf.domain.value import MAX_PAGE_SIZE


class TagItem(CamelModel):
    """Tag in responses."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(
            id=str(tag.id),
            name=tag.name.root,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )


class TagUsageItem(TagItem):
    """Tag with its usage in responses."""

    usage_count: int
    last_used_at: Optional[datetime] = None

    @classmethod
    def from_usage(cls, usage: TagUsage) -> "TagUsageItem":
        return cls(
            **TagItem.from_tag(usage.tag).model_dump(),
            usage_count=usage.usage_count,
            last_used_at=usage.last_used_at,
        )


class TagListView(str, Enum):
    """Which tag listing to produce."""

    ALL = "all"  # Alphabetical, optional substring search
    POPULAR = "popular"  # Usage count descending
    RECENT = "recent"  # Most recently used first
    UNUSED = "unused"  # No entries, alphabetical


class ListTagsRequest(CamelModel):
    """List tags request."""

    view: TagListView = TagListView.ALL
    search: Optional[str] = None
    limit: int = 20

    @field_validator("limit")
    @classmethod
    def clamp_limit(cls, v: int) -> int:
        """Clamp out-of-range limits to 1..MAX_PAGE_SIZE."""
        return min(max(1, v), MAX_PAGE_SIZE)


class ListTagsUseCase(BaseUseCase):
    """Use case for the tag listings."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> list[TagUsageItem]:
        """Execute list tags flow.

        Args:
            request: Listing to produce

        Returns:
            Tags with usage
        """
        with logfire.span(
            "list_tags.execute",
            view=request.view.value,
            search=request.search,
            limit=request.limit,
        ):
            if request.view == TagListView.POPULAR:
                usages = await self.tag_service.get_popular_tags(limit=request.limit)
            elif request.view == TagListView.RECENT:
                usages = await self.tag_service.get_recent_tags(limit=request.limit)
            elif request.view == TagListView.UNUSED:
                usages = await self.tag_service.get_unused_tags()
            else:
                usages = await self.tag_service.list_tags(search=request.search)

            logfire.info("Tags listed", view=request.view.value, count=len(usages))
            return [TagUsageItem.from_usage(usage) for usage in usages]
