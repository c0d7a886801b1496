"""In-memory implementation of Metadata repository for testing."""

from typing import Optional

from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.repository.metadata import MetadataRepository
from brainshelf.domain.value import EntryId

from .database import InMemoryDatabase


class InMemoryMetadataRepository(MetadataRepository):
    """In-memory implementation of MetadataRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_entry_id(self, entry_id: EntryId) -> Optional[Metadata]:
        """Find the metadata of an entry."""
        return self.database.metadata.get(entry_id)

    async def upsert(self, metadata: Metadata) -> Metadata:
        """Insert or overwrite the entry's metadata, keeping id and created_at."""
        now = self.database.clock()
        existing = self.database.metadata.get(metadata.entry_id)
        if existing:
            metadata = metadata.model_copy(
                update={
                    "id": existing.id,
                    "created_at": existing.created_at,
                    "updated_at": now,
                }
            )
        else:
            metadata = metadata.model_copy(
                update={"created_at": now, "updated_at": now}
            )
        self.database.metadata[metadata.entry_id] = metadata
        return metadata
