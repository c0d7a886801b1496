"""Metadata repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.value import EntryId


class MetadataRepository(ABC):
    """Repository for extracted link metadata (one record per entry)."""

    @abstractmethod
    async def find_by_entry_id(self, entry_id: EntryId) -> Optional[Metadata]:
        """Find metadata for an entry.

        Args:
            entry_id: Entry identifier

        Returns:
            Metadata if present, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, metadata: Metadata) -> Metadata:
        """Create or overwrite the metadata of `metadata.entry_id`.

        An existing record keeps its id and created_at.

        Args:
            metadata: Metadata to store

        Returns:
            Stored metadata
        """
        pass
