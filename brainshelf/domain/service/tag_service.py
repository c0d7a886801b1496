"""Tag domain service."""

from typing import Iterable, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from brainshelf.domain.error import NotFoundError, ValidationError
from brainshelf.domain.model.tag import Tag, TagStatistics, TagUsage
from brainshelf.domain.repository.tag import TagRepository
from brainshelf.domain.value import TagId, TagName

from .base import Service

STATISTICS_LIST_SIZE = 10


def parse_tag_name(value: str, field: str = "name") -> TagName:
    """Normalize a raw tag name.

    Args:
        value: Raw tag name from the caller
        field: Field name reported in validation errors

    Returns:
        Normalized tag name

    Raises:
        ValidationError: If the name is blank or too long
    """
    try:
        return TagName(value)
    except PydanticValidationError as e:
        messages = [error["msg"].removeprefix("Value error, ") for error in e.errors()]
        raise ValidationError(messages[0], errors={field: messages}) from e


def parse_tag_names(values: Iterable[str], field: str = "tags") -> list[TagName]:
    """Normalize and de-duplicate raw tag names, keeping first-seen order.

    Blank names are skipped.
    """
    names: dict[TagName, None] = {}
    for value in values:
        if not value or not value.strip():
            continue
        names[parse_tag_name(value, field=field)] = None
    return list(names)


class TagService(Service):
    """Domain service for the tag store."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def create_tag(self, name: str) -> Tag:
        """Create a tag, returning the existing one if the name is taken.

        Args:
            name: Raw tag name (normalized here)

        Returns:
            The created or existing tag

        Raises:
            ValidationError: If the name is blank or too long
        """
        tag_name = parse_tag_name(name)
        with logfire.span("tag_service.create_tag", tag_name=tag_name.root):
            tag = await self.tag_repository.create_if_absent(tag_name)
            logfire.info("Tag ensured", tag_id=str(tag.id), tag_name=tag_name.root)
            return tag

    async def resolve_tags(self, names: list[TagName]) -> list[Tag]:
        """Resolve tag names, batch-creating any that don't exist yet.

        Args:
            names: Normalized tag names

        Returns:
            Tags in the order of `names`
        """
        with logfire.span("tag_service.resolve_tags", tags=[n.root for n in names]):
            if not names:
                return []
            tags = await self.tag_repository.ensure_tags(names)
            logfire.info("Tags resolved", count=len(tags))
            return tags

    async def get_tag(self, tag_id: TagId) -> TagUsage:
        """Get a tag with its usage.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("tag_service.get_tag", tag_id=str(tag_id)):
            usage = await self.tag_repository.find_usage(tag_id)
            if usage is None:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            return usage

    async def list_tags(self, search: Optional[str] = None) -> list[TagUsage]:
        """List tags alphabetically, optionally filtered by substring.

        Args:
            search: Case-insensitive substring, blank for all tags

        Returns:
            Matching tags with usage
        """
        search = search.strip().lower() if search else None
        with logfire.span("tag_service.list_tags", search=search):
            tags = await self.tag_repository.find_all(search=search or None)
            logfire.info("Tags listed", count=len(tags))
            return tags

    async def get_popular_tags(self, limit: int = 20) -> list[TagUsage]:
        """Most used tags first."""
        with logfire.span("tag_service.get_popular_tags", limit=limit):
            return await self.tag_repository.find_by_usage(limit=limit)

    async def get_recent_tags(self, limit: int = 20) -> list[TagUsage]:
        """Tags whose entries were updated most recently first."""
        with logfire.span("tag_service.get_recent_tags", limit=limit):
            return await self.tag_repository.find_recently_used(limit=limit)

    async def get_unused_tags(self) -> list[TagUsage]:
        """Tags no entry refers to, alphabetically."""
        with logfire.span("tag_service.get_unused_tags"):
            return await self.tag_repository.find_unused()

    async def delete_tag(self, tag_id: TagId) -> None:
        """Delete a tag. Entries that used it keep their other tags.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("tag_service.delete_tag", tag_id=str(tag_id)):
            deleted = await self.tag_repository.delete(tag_id)
            if not deleted:
                logfire.warn("Tag not found for deletion", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            logfire.info("Tag deleted", tag_id=str(tag_id))

    async def get_statistics(self) -> TagStatistics:
        """Collect tag totals and the popular, recent and unused lists."""
        with logfire.span("tag_service.get_statistics"):
            total_tags, total_usages = await self.tag_repository.usage_totals()
            statistics = TagStatistics(
                total_tags=total_tags,
                total_usages=total_usages,
                most_used=await self.tag_repository.find_by_usage(
                    limit=STATISTICS_LIST_SIZE
                ),
                recently_used=await self.tag_repository.find_recently_used(
                    limit=STATISTICS_LIST_SIZE
                ),
                unused=await self.tag_repository.find_unused(),
            )
            logfire.info(
                "Tag statistics computed",
                total_tags=total_tags,
                total_usages=total_usages,
            )
            return statistics
