"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brainshelf.domain.model.tag import Tag, TagUsage
from brainshelf.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for the Tag store.

    Usage counts are derived from entry associations on every read.
    """

    @abstractmethod
    async def create_if_absent(self, name: TagName) -> Tag:
        """Create a tag unless one with the same name exists.

        Args:
            name: Normalized tag name

        Returns:
            The existing or newly created tag
        """
        pass

    @abstractmethod
    async def ensure_tags(self, names: list[TagName]) -> list[Tag]:
        """Resolve names to tags, batch-creating the missing ones.

        Args:
            names: Normalized, de-duplicated tag names

        Returns:
            Tags in the order of `names`
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_usage(self, tag_id: TagId) -> Optional[TagUsage]:
        """Find a tag together with its usage.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag usage if the tag exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, search: Optional[str] = None) -> list[TagUsage]:
        """Find tags whose name contains `search` (case-insensitive).

        Args:
            search: Substring to match, None or blank for all tags

        Returns:
            Matching tags ordered by name
        """
        pass

    @abstractmethod
    async def find_by_usage(self, limit: Optional[int] = None) -> list[TagUsage]:
        """Find tags ordered by usage count (descending, then name).

        Args:
            limit: Maximum number of tags to return, None for all

        Returns:
            List of tag usages
        """
        pass

    @abstractmethod
    async def find_recently_used(self, limit: int = 20) -> list[TagUsage]:
        """Find used tags ordered by their most recently updated entry.

        Args:
            limit: Maximum number of tags to return

        Returns:
            Tags with at least one entry, most recent first
        """
        pass

    @abstractmethod
    async def find_unused(self) -> list[TagUsage]:
        """Find tags without any entry, ordered by name.

        Returns:
            List of unused tags
        """
        pass

    @abstractmethod
    async def usage_totals(self) -> tuple[int, int]:
        """Count tags and tag usages.

        Returns:
            (total tags, sum of per-tag usage counts)
        """
        pass

    @abstractmethod
    async def rename(self, tag_id: TagId, new_name: TagName) -> Optional[Tag]:
        """Rename a tag.

        Args:
            tag_id: Tag identifier
            new_name: New normalized name

        Returns:
            Renamed tag, None if the tag does not exist

        Raises:
            ConflictError: If another tag already has `new_name`
        """
        pass

    @abstractmethod
    async def merge(self, source_id: TagId, target_id: TagId) -> int:
        """Atomically move every association of `source_id` to `target_id`.

        Entries already tagged with the target are not tagged twice. Every
        affected entry has its updated_at bumped. The source tag is deleted.
        Either all of this happens or none of it does.

        Args:
            source_id: Tag to merge away
            target_id: Tag to keep

        Returns:
            Number of entries that referenced the source tag

        Raises:
            NotFoundError: If either tag does not exist
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: TagId) -> bool:
        """Delete a tag and its entry associations (never the entries).

        Args:
            tag_id: Tag identifier

        Returns:
            True if a tag was deleted
        """
        pass
