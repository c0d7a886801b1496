"""PostgreSQL implementation of Entry repository."""

from collections import defaultdict
from typing import Any, Callable, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import Row, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from brainshelf.domain.error import ConflictError
from brainshelf.domain.model.common import stamp_on_write, utc_now
from brainshelf.domain.model.entry import Entry
from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.repository.entry import EntryFilter, EntryRepository
from brainshelf.domain.value import EntryId, PageRequest
from brainshelf.persistence.mappers import entry_to_dict, row_to_entry, row_to_metadata
from brainshelf.persistence.tables import (
    entries_table,
    entry_metadata_table,
    entry_tags_table,
    projects_table,
    tags_table,
)


async def load_entries(session: AsyncSession, rows: Sequence[Row[Any]]) -> list[Entry]:
    """Build Entry models for entry rows, with tags, metadata and project name.

    Fetches the related data for all rows in one query per relation and
    keeps the order of `rows`.

    Args:
        session: Async database session
        rows: Rows selected from the entries table

    Returns:
        Hydrated entries
    """
    if not rows:
        return []

    entry_ids = [row.id for row in rows]
    project_ids = list({row.project_id for row in rows})

    tag_result = await session.execute(
        select(entry_tags_table.c.entry_id, tags_table.c.name)
        .select_from(entry_tags_table)
        .join(tags_table, entry_tags_table.c.tag_id == tags_table.c.id)
        .where(entry_tags_table.c.entry_id.in_(entry_ids))
        .order_by(tags_table.c.name)
    )
    tag_map: dict[UUID, list[str]] = defaultdict(list)
    for row in tag_result.fetchall():
        tag_map[row.entry_id].append(row.name)

    metadata_result = await session.execute(
        select(entry_metadata_table).where(
            entry_metadata_table.c.entry_id.in_(entry_ids)
        )
    )
    metadata_map: dict[UUID, Metadata] = {
        row.entry_id: row_to_metadata(row._asdict())
        for row in metadata_result.fetchall()
    }

    project_result = await session.execute(
        select(projects_table.c.id, projects_table.c.name).where(
            projects_table.c.id.in_(project_ids)
        )
    )
    project_names = {row.id: row.name for row in project_result.fetchall()}

    return [
        row_to_entry(
            row._asdict(),
            tag_names=tag_map.get(row.id, []),
            metadata=metadata_map.get(row.id),
            project_name=project_names.get(row.project_id),
        )
        for row in rows
    ]


def _apply_filter(stmt, entry_filter: EntryFilter):
    if entry_filter.project_id:
        stmt = stmt.where(entries_table.c.project_id == entry_filter.project_id)
    if entry_filter.type:
        stmt = stmt.where(entries_table.c.type == entry_filter.type.value)
    if entry_filter.tag_names:
        # Any of the tags matches
        tagged = (
            select(entry_tags_table.c.entry_id)
            .join(tags_table, entry_tags_table.c.tag_id == tags_table.c.id)
            .where(tags_table.c.name.in_([t.root for t in entry_filter.tag_names]))
        )
        stmt = stmt.where(entries_table.c.id.in_(tagged))
    return stmt


class PostgresEntryRepository(EntryRepository):
    """PostgreSQL implementation of EntryRepository."""

    def __init__(self, session: AsyncSession, clock: Callable = utc_now) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            clock: Source of write timestamps
        """
        self.session = session
        self.clock = clock

    async def find_by_id(self, entry_id: EntryId) -> Optional[Entry]:
        """Find an entry by ID."""
        with logfire.span("entry_repository.find_by_id", entry_id=str(entry_id)):
            stmt = select(entries_table).where(entries_table.c.id == entry_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            entries = await load_entries(self.session, [row])
            return entries[0]

    async def find_all(
        self,
        entry_filter: EntryFilter = EntryFilter(),
        page: PageRequest = PageRequest(),
    ) -> list[Entry]:
        """Find entries newest first."""
        with logfire.span(
            "entry_repository.find_all", page=page.number, page_size=page.size
        ):
            stmt = _apply_filter(select(entries_table), entry_filter)
            stmt = (
                stmt.order_by(entries_table.c.created_at.desc(), entries_table.c.id)
                .limit(page.size)
                .offset(page.offset)
            )

            result = await self.session.execute(stmt)
            entries = await load_entries(self.session, result.fetchall())
            logfire.info("Found entries", count=len(entries))
            return entries

    async def count(self, entry_filter: EntryFilter = EntryFilter()) -> int:
        """Count entries matching the filter."""
        with logfire.span("entry_repository.count"):
            stmt = _apply_filter(
                select(func.count()).select_from(entries_table), entry_filter
            )
            return await self.session.scalar(stmt) or 0

    async def save(self, entry: Entry) -> Entry:
        """Insert or update an entry and replace its tag set."""
        with logfire.span("entry_repository.save", entry_id=str(entry.id)):
            existing = await self.session.scalar(
                select(entries_table.c.created_at).where(
                    entries_table.c.id == entry.id
                )
            )
            now = self.clock()

            if existing is None:
                entry = stamp_on_write(entry, is_new=True, now=now)
                await self.session.execute(
                    insert(entries_table).values(**entry_to_dict(entry))
                )
            else:
                entry = stamp_on_write(
                    entry.model_copy(update={"created_at": existing}),
                    is_new=False,
                    now=now,
                )
                await self.session.execute(
                    update(entries_table)
                    .where(entries_table.c.id == entry.id)
                    .values(**entry_to_dict(entry))
                )

            await self._replace_tags(entry)
            await self.session.flush()

            saved = await self.find_by_id(entry.id)
            logfire.info(
                "Entry saved", entry_id=str(entry.id), created=existing is None
            )
            return saved or entry

    async def delete(self, entry_id: EntryId) -> bool:
        """Delete an entry; metadata and tag associations cascade."""
        with logfire.span("entry_repository.delete", entry_id=str(entry_id)):
            stmt = delete(entries_table).where(entries_table.c.id == entry_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0

    async def _replace_tags(self, entry: Entry) -> None:
        await self.session.execute(
            delete(entry_tags_table).where(entry_tags_table.c.entry_id == entry.id)
        )
        if not entry.tag_names:
            return

        tag_ids = (
            await self.session.execute(
                select(tags_table.c.id).where(
                    tags_table.c.name.in_([t.root for t in entry.tag_names])
                )
            )
        ).scalars().all()
        if len(tag_ids) != len(entry.tag_names):
            logfire.warn(
                "Entry references tags that do not exist",
                entry_id=str(entry.id),
                tags=[t.root for t in entry.tag_names],
                found=len(tag_ids),
            )
            raise ConflictError(
                "One or more tags were removed while the entry was being saved"
            )

        await self.session.execute(
            insert(entry_tags_table).values(
                [{"entry_id": entry.id, "tag_id": tag_id} for tag_id in tag_ids]
            )
        )
