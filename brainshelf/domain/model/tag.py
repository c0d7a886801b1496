"""Tag entity for labelling entries."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from brainshelf.domain.model.common import DomainModel, utc_now
from brainshelf.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags form a flat, global vocabulary. The name is the uniqueness key and
    is always stored normalized (trimmed, lower-case). How often a tag is used
    is never stored, see TagUsage.
    """

    id: TagId
    name: TagName
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class TagUsage(DomainModel):
    """Tag with its usage derived from entry associations at read time."""

    tag: Tag
    usage_count: int = 0
    last_used_at: Optional[datetime] = None  # Most recent updated_at of its entries


class TagStatistics(DomainModel):
    """Aggregate tag statistics."""

    total_tags: int
    total_usages: int  # Sum of per-tag usage (an entry with 3 tags counts 3 times)
    most_used: list[TagUsage]
    recently_used: list[TagUsage]
    unused: list[TagUsage]


class MergeResult(DomainModel):
    """Outcome of merging one tag into another."""

    source_id: TagId
    target: Tag
    reassigned_entries: int
