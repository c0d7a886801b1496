"""Entry repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import Field

from brainshelf.domain.model.entry import Entry
from brainshelf.domain.value import (
    EntryId,
    EntryType,
    PageRequest,
    ProjectId,
    TagName,
    ValueObject,
)


class EntryFilter(ValueObject):
    """Structural filter for entry listings.

    All set criteria are AND-combined; `tag_names` matches entries carrying
    ANY of the listed tags.
    """

    project_id: Optional[ProjectId] = None
    type: Optional[EntryType] = None
    tag_names: list[TagName] = Field(default_factory=list)


class EntryRepository(ABC):
    """Repository for the Entry aggregate.

    Entries are returned with tag names, metadata and project name populated.
    """

    @abstractmethod
    async def find_by_id(self, entry_id: EntryId) -> Optional[Entry]:
        """Find an entry by ID.

        Args:
            entry_id: The entry's unique identifier

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        entry_filter: EntryFilter = EntryFilter(),
        page: PageRequest = PageRequest(),
    ) -> list[Entry]:
        """Find entries, newest first.

        Args:
            entry_filter: Filter criteria
            page: Page to return

        Returns:
            Entries ordered by created_at DESC
        """
        pass

    @abstractmethod
    async def count(self, entry_filter: EntryFilter = EntryFilter()) -> int:
        """Count entries matching the filter.

        Args:
            entry_filter: Filter criteria

        Returns:
            Total number of matching entries
        """
        pass

    @abstractmethod
    async def save(self, entry: Entry) -> Entry:
        """Save an entry (create or update).

        The tag set is replaced with the tags named in `entry.tag_names`,
        which must already exist in the tag store. Write timestamps are
        applied here.

        Args:
            entry: Entry to save

        Returns:
            The saved entry
        """
        pass

    @abstractmethod
    async def delete(self, entry_id: EntryId) -> bool:
        """Delete an entry with its metadata and tag associations.

        Args:
            entry_id: Entry identifier

        Returns:
            True if an entry was deleted
        """
        pass
