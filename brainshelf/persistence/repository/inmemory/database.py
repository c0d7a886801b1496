"""Shared in-memory store backing the in-memory repositories."""

import re
import unicodedata
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from brainshelf.domain.model.common import utc_now
from brainshelf.domain.model.entry import Entry
from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.model.project import Project
from brainshelf.domain.model.tag import Tag
from brainshelf.domain.model.template import Template
from brainshelf.domain.value import EntryId, ProjectId, TagId, TagName, TemplateId

_WORD = re.compile(r"\w+")


def fold(text: Optional[str]) -> str:
    """Lower-case text and strip diacritics ("Café" -> "cafe")."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


def fold_tokens(text: Optional[str]) -> list[str]:
    """Folded word tokens of a text."""
    return _WORD.findall(fold(text))


class InMemoryDatabase:
    """Tables of the in-memory store.

    Entries are stored bare: tag links live only in `entry_tags` and
    metadata only in `metadata`, like their Postgres counterparts.
    Repositories built over the same database see each other's writes.
    """

    def __init__(self, clock: Callable = utc_now) -> None:
        """Initialize an empty store.

        Args:
            clock: Source of write timestamps
        """
        self.clock = clock
        self.projects: dict[ProjectId, Project] = {}
        self.entries: dict[EntryId, Entry] = {}
        self.tags: dict[TagId, Tag] = {}
        self.entry_tags: set[tuple[EntryId, TagId]] = set()
        self.metadata: dict[EntryId, Metadata] = {}
        self.templates: dict[TemplateId, Template] = {}

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Restore every table to its state at entry if the block raises."""
        snapshot = (
            dict(self.projects),
            dict(self.entries),
            dict(self.tags),
            set(self.entry_tags),
            dict(self.metadata),
            dict(self.templates),
        )
        try:
            yield
        except BaseException:
            (
                self.projects,
                self.entries,
                self.tags,
                self.entry_tags,
                self.metadata,
                self.templates,
            ) = snapshot
            raise

    def tag_by_name(self, name: TagName) -> Optional[Tag]:
        """Look up a tag by normalized name."""
        for tag in self.tags.values():
            if tag.name == name:
                return tag
        return None

    def tag_names_of(self, entry_id: EntryId) -> list[TagName]:
        """Sorted names of an entry's tags."""
        names = [
            self.tags[tag_id].name
            for linked_id, tag_id in self.entry_tags
            if linked_id == entry_id and tag_id in self.tags
        ]
        return sorted(names, key=lambda name: name.root)

    def hydrate(self, entry: Entry) -> Entry:
        """Attach tags, metadata and project name to a stored entry."""
        project = self.projects.get(entry.project_id)
        return entry.model_copy(
            update={
                "tag_names": self.tag_names_of(entry.id),
                "metadata": self.metadata.get(entry.id),
                "project_name": project.name if project else None,
            }
        )

    def delete_entry(self, entry_id: EntryId) -> bool:
        """Delete an entry with its metadata and tag links."""
        if self.entries.pop(entry_id, None) is None:
            return False
        self.metadata.pop(entry_id, None)
        self.entry_tags = {link for link in self.entry_tags if link[0] != entry_id}
        return True

    def delete_tag(self, tag_id: TagId) -> bool:
        """Delete a tag with its entry links."""
        if self.tags.pop(tag_id, None) is None:
            return False
        self.entry_tags = {link for link in self.entry_tags if link[1] != tag_id}
        return True

    def delete_project(self, project_id: ProjectId) -> bool:
        """Delete a project with its entries; its templates become global."""
        if self.projects.pop(project_id, None) is None:
            return False
        for entry_id in [
            e.id for e in self.entries.values() if e.project_id == project_id
        ]:
            self.delete_entry(entry_id)
        for template in list(self.templates.values()):
            if template.project_id == project_id:
                self.templates[template.id] = template.model_copy(
                    update={"project_id": None}
                )
        return True
