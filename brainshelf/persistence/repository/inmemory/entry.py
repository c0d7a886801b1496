"""In-memory implementation of Entry repository for testing."""

from typing import Optional

from brainshelf.domain.error import ConflictError
from brainshelf.domain.model.common import stamp_on_write
from brainshelf.domain.model.entry import Entry
from brainshelf.domain.repository.entry import EntryFilter, EntryRepository
from brainshelf.domain.value import EntryId, PageRequest

from .database import InMemoryDatabase


class InMemoryEntryRepository(EntryRepository):
    """In-memory implementation of EntryRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    def _matching(self, entry_filter: EntryFilter) -> list[Entry]:
        entries = [self.database.hydrate(e) for e in self.database.entries.values()]
        if entry_filter.project_id:
            entries = [e for e in entries if e.project_id == entry_filter.project_id]
        if entry_filter.type:
            entries = [e for e in entries if e.type == entry_filter.type]
        if entry_filter.tag_names:
            wanted = set(entry_filter.tag_names)
            entries = [e for e in entries if wanted.intersection(e.tag_names)]
        return entries

    async def find_by_id(self, entry_id: EntryId) -> Optional[Entry]:
        """Find an entry by ID."""
        entry = self.database.entries.get(entry_id)
        return self.database.hydrate(entry) if entry else None

    async def find_all(
        self,
        entry_filter: EntryFilter = EntryFilter(),
        page: PageRequest = PageRequest(),
    ) -> list[Entry]:
        """Find entries newest first."""
        entries = sorted(self._matching(entry_filter), key=lambda e: str(e.id))
        entries.sort(key=lambda e: e.created_at, reverse=True)
        return entries[page.offset : page.offset + page.size]

    async def count(self, entry_filter: EntryFilter = EntryFilter()) -> int:
        """Count entries matching the filter."""
        return len(self._matching(entry_filter))

    async def save(self, entry: Entry) -> Entry:
        """Insert or update an entry and replace its tag links."""
        tags = [self.database.tag_by_name(name) for name in entry.tag_names]
        if any(tag is None for tag in tags):
            raise ConflictError(
                "One or more tags were removed while the entry was being saved"
            )

        existing = self.database.entries.get(entry.id)
        if existing:
            entry = entry.model_copy(update={"created_at": existing.created_at})
        entry = stamp_on_write(
            entry, is_new=existing is None, now=self.database.clock()
        )

        self.database.entries[entry.id] = entry.model_copy(
            update={"tag_names": [], "metadata": None, "project_name": None}
        )
        self.database.entry_tags = {
            link for link in self.database.entry_tags if link[0] != entry.id
        }
        for tag in tags:
            self.database.entry_tags.add((entry.id, tag.id))

        return self.database.hydrate(self.database.entries[entry.id])

    async def delete(self, entry_id: EntryId) -> bool:
        """Delete an entry with its metadata and tag links."""
        return self.database.delete_entry(entry_id)
