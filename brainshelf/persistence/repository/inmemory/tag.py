"""In-memory implementation of Tag repository for testing."""

from typing import Optional
from uuid import uuid4

from brainshelf.domain.error import ConflictError, NotFoundError
from brainshelf.domain.model.common import stamp_on_write
from brainshelf.domain.model.tag import Tag, TagUsage
from brainshelf.domain.repository.tag import TagRepository
from brainshelf.domain.value import EntryId, TagId, TagName

from .database import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    def _usage(self, tag: Tag) -> TagUsage:
        entries = [
            self.database.entries[entry_id]
            for entry_id, tag_id in self.database.entry_tags
            if tag_id == tag.id and entry_id in self.database.entries
        ]
        return TagUsage(
            tag=tag,
            usage_count=len(entries),
            last_used_at=max((e.updated_at for e in entries), default=None),
        )

    def _all_usage(self) -> list[TagUsage]:
        return sorted(
            (self._usage(tag) for tag in self.database.tags.values()),
            key=lambda usage: usage.tag.name.root,
        )

    async def create_if_absent(self, name: TagName) -> Tag:
        """Insert a tag unless the name exists; return the stored tag."""
        existing = self.database.tag_by_name(name)
        if existing:
            return existing
        tag = stamp_on_write(
            Tag(id=TagId(uuid4()), name=name), is_new=True, now=self.database.clock()
        )
        self.database.tags[tag.id] = tag
        return tag

    async def ensure_tags(self, names: list[TagName]) -> list[Tag]:
        """Create missing tags and return all of them in input order."""
        return [await self.create_if_absent(name) for name in dict.fromkeys(names)]

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self.database.tags.get(tag_id)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        return self.database.tag_by_name(name)

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        wanted = set(names)
        return [tag for tag in self.database.tags.values() if tag.name in wanted]

    async def find_usage(self, tag_id: TagId) -> Optional[TagUsage]:
        """Find a tag with its usage."""
        tag = self.database.tags.get(tag_id)
        return self._usage(tag) if tag else None

    async def find_all(self, search: Optional[str] = None) -> list[TagUsage]:
        """List tags alphabetically, optionally filtered by name substring."""
        usages = self._all_usage()
        if search:
            needle = search.lower()
            usages = [u for u in usages if needle in u.tag.name.root]
        return usages

    async def find_by_usage(self, limit: Optional[int] = None) -> list[TagUsage]:
        """Tags by usage count descending, ties by name."""
        usages = sorted(self._all_usage(), key=lambda u: u.usage_count, reverse=True)
        return usages[:limit] if limit is not None else usages

    async def find_recently_used(self, limit: int = 20) -> list[TagUsage]:
        """Used tags ordered by their most recently updated entry."""
        usages = [u for u in self._all_usage() if u.last_used_at is not None]
        usages.sort(key=lambda u: u.last_used_at, reverse=True)
        return usages[:limit]

    async def find_unused(self) -> list[TagUsage]:
        """Tags with no entry links, alphabetically."""
        return [u for u in self._all_usage() if u.usage_count == 0]

    async def usage_totals(self) -> tuple[int, int]:
        """Number of tags and number of entry-tag links."""
        return len(self.database.tags), len(self.database.entry_tags)

    async def rename(self, tag_id: TagId, new_name: TagName) -> Optional[Tag]:
        """Rename a tag."""
        tag = self.database.tags.get(tag_id)
        if tag is None:
            return None
        clash = self.database.tag_by_name(new_name)
        if clash is not None and clash.id != tag_id:
            raise ConflictError(
                f"Tag '{new_name.root}' already exists. Use merge instead."
            )

        renamed = stamp_on_write(
            tag.model_copy(update={"name": new_name}),
            is_new=False,
            now=self.database.clock(),
        )
        self.database.tags[tag_id] = renamed
        return renamed

    async def merge(self, source_id: TagId, target_id: TagId) -> int:
        """Move the source tag's links onto the target and drop the source.

        All-or-nothing: a failure in any step restores the store.
        """
        with self.database.atomic():
            if source_id not in self.database.tags:
                raise NotFoundError("Tag", str(source_id))
            if target_id not in self.database.tags:
                raise NotFoundError("Tag", str(target_id))

            affected = [
                entry_id
                for entry_id, tag_id in self.database.entry_tags
                if tag_id == source_id
            ]
            self._link_entries(affected, target_id)
            self._touch_entries(affected)
            self.database.delete_tag(source_id)
            return len(affected)

    async def delete(self, tag_id: TagId) -> bool:
        """Delete a tag and its links."""
        return self.database.delete_tag(tag_id)

    def _link_entries(self, entry_ids: list[EntryId], tag_id: TagId) -> None:
        for entry_id in entry_ids:
            self.database.entry_tags.add((entry_id, tag_id))

    def _touch_entries(self, entry_ids: list[EntryId]) -> None:
        now = self.database.clock()
        for entry_id in entry_ids:
            entry = self.database.entries.get(entry_id)
            if entry is not None:
                self.database.entries[entry_id] = entry.model_copy(
                    update={"updated_at": now}
                )
