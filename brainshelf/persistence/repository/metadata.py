"""PostgreSQL implementation of Metadata repository."""

from typing import Callable, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from brainshelf.domain.model.common import utc_now
from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.repository.metadata import MetadataRepository
from brainshelf.domain.value import EntryId
from brainshelf.persistence.mappers import metadata_to_dict, row_to_metadata
from brainshelf.persistence.tables import entry_metadata_table


class PostgresMetadataRepository(MetadataRepository):
    """PostgreSQL implementation of MetadataRepository."""

    def __init__(self, session: AsyncSession, clock: Callable = utc_now) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            clock: Source of write timestamps
        """
        self.session = session
        self.clock = clock

    async def find_by_entry_id(self, entry_id: EntryId) -> Optional[Metadata]:
        """Find the metadata of an entry."""
        stmt = select(entry_metadata_table).where(
            entry_metadata_table.c.entry_id == entry_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_metadata(row._asdict()) if row else None

    async def upsert(self, metadata: Metadata) -> Metadata:
        """Insert the entry's metadata or overwrite the existing record.

        The existing record keeps its id and created_at.
        """
        with logfire.span(
            "metadata_repository.upsert", entry_id=str(metadata.entry_id)
        ):
            now = self.clock()
            values = metadata_to_dict(
                metadata.model_copy(update={"created_at": now, "updated_at": now})
            )
            stmt = pg_insert(entry_metadata_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[entry_metadata_table.c.entry_id],
                set_={
                    column: stmt.excluded[column]
                    for column in values
                    if column not in ("id", "entry_id", "created_at")
                },
            ).returning(entry_metadata_table)

            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_metadata(row._asdict())
