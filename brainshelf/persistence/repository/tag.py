"""PostgreSQL implementation of Tag repository."""

from typing import Callable, Optional
from uuid import uuid4

import logfire
from sqlalchemy import Select, delete, func, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from brainshelf.domain.error import ConflictError, NotFoundError
from brainshelf.domain.model.common import utc_now
from brainshelf.domain.model.tag import Tag, TagUsage
from brainshelf.domain.repository.tag import TagRepository
from brainshelf.domain.value import TagId, TagName
from brainshelf.persistence.mappers import row_to_tag, row_to_tag_usage
from brainshelf.persistence.tables import entries_table, entry_tags_table, tags_table


def _usage_subquery():
    """Per-tag usage count and last entry update, derived from entry_tags."""
    return (
        select(
            entry_tags_table.c.tag_id,
            func.count(entry_tags_table.c.entry_id).label("usage_count"),
            func.max(entries_table.c.updated_at).label("last_used_at"),
        )
        .select_from(entry_tags_table)
        .join(entries_table, entry_tags_table.c.entry_id == entries_table.c.id)
        .group_by(entry_tags_table.c.tag_id)
        .subquery("usage")
    )


def _usage_select() -> Select:
    usage = _usage_subquery()
    return select(
        tags_table,
        func.coalesce(usage.c.usage_count, 0).label("usage_count"),
        usage.c.last_used_at,
    ).select_from(tags_table.outerjoin(usage, usage.c.tag_id == tags_table.c.id))


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository.

    Usage is never stored: every read that reports it aggregates entry_tags.
    """

    def __init__(self, session: AsyncSession, clock: Callable = utc_now) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            clock: Source of write timestamps
        """
        self.session = session
        self.clock = clock

    async def create_if_absent(self, name: TagName) -> Tag:
        """Insert a tag unless the name exists; return the stored tag."""
        with logfire.span("tag_repository.create_if_absent", tag_name=name.root):
            tags = await self.ensure_tags([name])
            return tags[0]

    async def ensure_tags(self, names: list[TagName]) -> list[Tag]:
        """Batch-create missing tags and return all of them in input order."""
        with logfire.span(
            "tag_repository.ensure_tags", tags=[name.root for name in names]
        ):
            if not names:
                return []

            now = self.clock()
            stmt = (
                pg_insert(tags_table)
                .values(
                    [
                        {
                            "id": uuid4(),
                            "name": name.root,
                            "created_at": now,
                            "updated_at": now,
                        }
                        for name in dict.fromkeys(names)
                    ]
                )
                .on_conflict_do_nothing(index_elements=[tags_table.c.name])
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            logfire.debug("Tags inserted", inserted=result.rowcount)

            by_name = {tag.name: tag for tag in await self.find_by_names(names)}
            return [by_name[name] for name in names if name in by_name]

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by normalized name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_usage(self, tag_id: TagId) -> Optional[TagUsage]:
        """Find a tag with its usage."""
        with logfire.span("tag_repository.find_usage", tag_id=str(tag_id)):
            stmt = _usage_select().where(tags_table.c.id == tag_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_tag_usage(row._asdict()) if row else None

    async def find_all(self, search: Optional[str] = None) -> list[TagUsage]:
        """List tags alphabetically, optionally filtered by name substring."""
        with logfire.span("tag_repository.find_all", search=search):
            stmt = _usage_select()
            if search:
                stmt = stmt.where(tags_table.c.name.icontains(search, autoescape=True))
            stmt = stmt.order_by(tags_table.c.name)

            result = await self.session.execute(stmt)
            return [row_to_tag_usage(row._asdict()) for row in result.fetchall()]

    async def find_by_usage(self, limit: Optional[int] = None) -> list[TagUsage]:
        """Tags by usage count descending, ties by name."""
        with logfire.span("tag_repository.find_by_usage", limit=limit):
            stmt = _usage_select()
            stmt = stmt.order_by(
                stmt.selected_columns.usage_count.desc(), tags_table.c.name
            )
            if limit is not None:
                stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            return [row_to_tag_usage(row._asdict()) for row in result.fetchall()]

    async def find_recently_used(self, limit: int = 20) -> list[TagUsage]:
        """Used tags ordered by their most recently updated entry."""
        with logfire.span("tag_repository.find_recently_used", limit=limit):
            stmt = _usage_select()
            last_used_at = stmt.selected_columns.last_used_at
            stmt = (
                stmt.where(last_used_at.is_not(None))
                .order_by(last_used_at.desc(), tags_table.c.name)
                .limit(limit)
            )

            result = await self.session.execute(stmt)
            return [row_to_tag_usage(row._asdict()) for row in result.fetchall()]

    async def find_unused(self) -> list[TagUsage]:
        """Tags with no entry associations, alphabetically."""
        with logfire.span("tag_repository.find_unused"):
            used = select(entry_tags_table.c.tag_id)
            stmt = (
                select(tags_table)
                .where(tags_table.c.id.not_in(used))
                .order_by(tags_table.c.name)
            )

            result = await self.session.execute(stmt)
            return [
                TagUsage(tag=row_to_tag(row._asdict()))
                for row in result.fetchall()
            ]

    async def usage_totals(self) -> tuple[int, int]:
        """Number of tags and number of entry-tag associations."""
        with logfire.span("tag_repository.usage_totals"):
            total_tags = await self.session.scalar(
                select(func.count()).select_from(tags_table)
            )
            total_usages = await self.session.scalar(
                select(func.count()).select_from(entry_tags_table)
            )
            return total_tags or 0, total_usages or 0

    async def rename(self, tag_id: TagId, new_name: TagName) -> Optional[Tag]:
        """Rename a tag; entries follow the tag id so nothing else changes."""
        with logfire.span(
            "tag_repository.rename", tag_id=str(tag_id), new_name=new_name.root
        ):
            try:
                async with self.session.begin_nested():
                    stmt = (
                        update(tags_table)
                        .where(tags_table.c.id == tag_id)
                        .values(name=new_name.root, updated_at=self.clock())
                        .returning(tags_table)
                    )
                    result = await self.session.execute(stmt)
                    row = result.fetchone()
            except IntegrityError as e:
                logfire.warn(
                    "Tag rename hit unique constraint",
                    tag_id=str(tag_id),
                    new_name=new_name.root,
                )
                raise ConflictError(
                    f"Tag '{new_name.root}' already exists. Use merge instead."
                ) from e

            return row_to_tag(row._asdict()) if row else None

    async def merge(self, source_id: TagId, target_id: TagId) -> int:
        """Move every association of the source tag onto the target and drop the source.

        Runs inside a savepoint with both tag rows locked (in id order, so
        two concurrent merges over the same pair cannot deadlock).

        Returns:
            Number of entries that were tagged with the source
        """
        with logfire.span(
            "tag_repository.merge", source_id=str(source_id), target_id=str(target_id)
        ):
            async with self.session.begin_nested():
                locked = await self.session.execute(
                    select(tags_table.c.id)
                    .where(tags_table.c.id.in_([source_id, target_id]))
                    .order_by(tags_table.c.id)
                    .with_for_update()
                )
                if len(locked.fetchall()) < 2:
                    raise NotFoundError("Tag", f"{source_id} or {target_id}")

                source_entries = select(entry_tags_table.c.entry_id).where(
                    entry_tags_table.c.tag_id == source_id
                )
                affected = list(
                    (await self.session.execute(source_entries)).scalars().all()
                )

                await self.session.execute(
                    pg_insert(entry_tags_table)
                    .from_select(
                        ["entry_id", "tag_id"],
                        select(
                            entry_tags_table.c.entry_id,
                            literal(target_id, UUID),
                        ).where(entry_tags_table.c.tag_id == source_id),
                    )
                    .on_conflict_do_nothing()
                )

                if affected:
                    await self.session.execute(
                        update(entries_table)
                        .where(entries_table.c.id.in_(affected))
                        .values(updated_at=self.clock())
                    )

                # Cascades the source's remaining entry_tags rows
                await self.session.execute(
                    delete(tags_table).where(tags_table.c.id == source_id)
                )

            logfire.info("Tag associations moved", reassigned=len(affected))
            return len(affected)

    async def delete(self, tag_id: TagId) -> bool:
        """Delete a tag and its associations."""
        with logfire.span("tag_repository.delete", tag_id=str(tag_id)):
            stmt = delete(tags_table).where(tags_table.c.id == tag_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
