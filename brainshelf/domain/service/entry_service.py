"""Entry domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import Field

from brainshelf.domain.error import (
    DomainError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)
from brainshelf.domain.event import EntryLinkChanged, EventPublisher
from brainshelf.domain.model.entry import Entry
from brainshelf.domain.repository.entry import EntryFilter, EntryRepository
from brainshelf.domain.repository.project import ProjectRepository
from brainshelf.domain.value import (
    EntryId,
    EntryType,
    PageRequest,
    ProjectId,
    ValueObject,
)

from .base import Service
from .tag_service import TagService, parse_tag_names


class EntryDraft(ValueObject):
    """Caller-supplied entry fields for create and update."""

    project_id: ProjectId
    title: str
    description: Optional[str] = None
    type: EntryType
    content: Optional[str] = None
    url: Optional[str] = None
    tag_names: list[str] = Field(default_factory=list)


class BulkResult(ValueObject):
    """Outcome of a bulk operation; failures don't stop the other items."""

    processed: int
    requested: int
    errors: list[str] = Field(default_factory=list)


class EntryService(Service):
    """Domain service for entry lifecycle.

    Tag names are normalized and resolved (created when missing) on every
    write. Link entries emit EntryLinkChanged after a write that introduces
    or changes their URL.
    """

    def __init__(
        self,
        entry_repository: EntryRepository,
        project_repository: ProjectRepository,
        tag_service: TagService,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize entry service.

        Args:
            entry_repository: Entry repository
            project_repository: Project repository
            tag_service: Tag domain service
            event_publisher: Publisher for entry events
        """
        self.entry_repository = entry_repository
        self.project_repository = project_repository
        self.tag_service = tag_service
        self.event_publisher = event_publisher

    async def list_entries(
        self, entry_filter: EntryFilter, page: PageRequest
    ) -> tuple[list[Entry], int]:
        """List entries newest first.

        Returns:
            (entries on the page, total matching entries)
        """
        with logfire.span(
            "entry_service.list_entries",
            project_id=(
                str(entry_filter.project_id) if entry_filter.project_id else None
            ),
            type=entry_filter.type.value if entry_filter.type else None,
            tags=[t.root for t in entry_filter.tag_names],
            page=page.number,
            page_size=page.size,
        ):
            total = await self.entry_repository.count(entry_filter)
            entries = await self.entry_repository.find_all(entry_filter, page)
            logfire.info("Entries listed", count=len(entries), total=total)
            return entries, total

    async def get_entry(self, entry_id: EntryId) -> Entry:
        """Get an entry.

        Raises:
            NotFoundError: If the entry does not exist
        """
        with logfire.span("entry_service.get_entry", entry_id=str(entry_id)):
            entry = await self.entry_repository.find_by_id(entry_id)
            if entry is None:
                logfire.warn("Entry not found", entry_id=str(entry_id))
                raise NotFoundError("Entry", str(entry_id))
            return entry

    async def create_entry(self, draft: EntryDraft) -> Entry:
        """Create an entry, creating any tags it names that don't exist.

        Args:
            draft: Entry fields

        Returns:
            The created entry

        Raises:
            ValidationError: If the project does not exist or a tag name is invalid
        """
        with logfire.span(
            "entry_service.create_entry",
            project_id=str(draft.project_id),
            type=draft.type.value,
        ):
            await self._require_project(draft.project_id)
            tag_names = parse_tag_names(draft.tag_names)

            entry = Entry(
                id=EntryId(uuid4()),
                project_id=draft.project_id,
                title=draft.title,
                description=draft.description,
                type=draft.type,
                content=draft.content,
                url=draft.url,
                tag_names=tag_names,
            )

            await self.tag_service.resolve_tags(tag_names)
            saved = await self.entry_repository.save(entry)

            if saved.has_link:
                self._publish_link_changed(saved)

            logfire.info(
                "Entry created",
                entry_id=str(saved.id),
                tags=[t.root for t in saved.tag_names],
            )
            return saved

    async def update_entry(self, entry_id: EntryId, draft: EntryDraft) -> Entry:
        """Replace an entry's fields and tag set.

        Args:
            entry_id: Entry to update
            draft: New entry fields (replaced wholesale)

        Returns:
            The updated entry

        Raises:
            NotFoundError: If the entry does not exist
            ValidationError: If the project does not exist or a tag name is invalid
        """
        with logfire.span("entry_service.update_entry", entry_id=str(entry_id)):
            existing = await self.get_entry(entry_id)
            if draft.project_id != existing.project_id:
                await self._require_project(draft.project_id)
            tag_names = parse_tag_names(draft.tag_names)

            updated = Entry(
                id=existing.id,
                project_id=draft.project_id,
                title=draft.title,
                description=draft.description,
                type=draft.type,
                content=draft.content,
                url=draft.url,
                tag_names=tag_names,
                created_at=existing.created_at,
                updated_at=existing.updated_at,
            )

            await self.tag_service.resolve_tags(tag_names)
            saved = await self.entry_repository.save(updated)

            url_changed = (existing.url or "").strip() != (saved.url or "").strip()
            if saved.has_link and (url_changed or not existing.has_link):
                self._publish_link_changed(saved)

            logfire.info(
                "Entry updated",
                entry_id=str(entry_id),
                url_changed=url_changed,
                tags=[t.root for t in saved.tag_names],
            )
            return saved

    async def delete_entry(self, entry_id: EntryId) -> None:
        """Delete an entry with its metadata and tag associations.

        Raises:
            NotFoundError: If the entry does not exist
        """
        with logfire.span("entry_service.delete_entry", entry_id=str(entry_id)):
            deleted = await self.entry_repository.delete(entry_id)
            if not deleted:
                logfire.warn("Entry not found for deletion", entry_id=str(entry_id))
                raise NotFoundError("Entry", str(entry_id))
            logfire.info("Entry deleted", entry_id=str(entry_id))

    async def duplicate_entry(
        self, entry_id: EntryId, new_title: Optional[str] = None
    ) -> Entry:
        """Copy an entry (fields and tags) into a new entry.

        Args:
            entry_id: Entry to copy
            new_title: Title of the copy, defaults to "<title> (Copy)"

        Returns:
            The new entry
        """
        with logfire.span("entry_service.duplicate_entry", entry_id=str(entry_id)):
            source = await self.get_entry(entry_id)
            title = f"{source.title} (Copy)"
            if new_title and new_title.strip():
                title = new_title
            return await self.create_entry(
                EntryDraft(
                    project_id=source.project_id,
                    title=title,
                    description=source.description,
                    type=source.type,
                    content=source.content,
                    url=source.url,
                    tag_names=[t.root for t in source.tag_names],
                )
            )

    async def bulk_delete(self, entry_ids: list[EntryId]) -> BulkResult:
        """Delete several entries, reporting the ones that don't exist."""
        with logfire.span("entry_service.bulk_delete", requested=len(entry_ids)):
            processed = 0
            errors: list[str] = []
            for entry_id in entry_ids:
                try:
                    await self.delete_entry(entry_id)
                    processed += 1
                except DomainError as e:
                    errors.append(str(e))
            logfire.info(
                "Bulk delete finished", processed=processed, failed=len(errors)
            )
            return BulkResult(
                processed=processed, requested=len(entry_ids), errors=errors
            )

    async def bulk_tag(
        self, entry_ids: list[EntryId], tag_names: list[str]
    ) -> BulkResult:
        """Add tags to several entries, keeping the tags they already have."""
        with logfire.span(
            "entry_service.bulk_tag", requested=len(entry_ids), tags=tag_names
        ):
            new_names = parse_tag_names(tag_names)
            if not new_names:
                raise ValidationError(
                    "At least one tag is required", errors={"tags": ["Required"]}
                )
            await self.tag_service.resolve_tags(new_names)

            processed = 0
            errors: list[str] = []
            for entry_id in entry_ids:
                entry = await self.entry_repository.find_by_id(entry_id)
                if entry is None:
                    errors.append(str(NotFoundError("Entry", str(entry_id))))
                    continue
                merged = list(dict.fromkeys([*entry.tag_names, *new_names]))
                await self.entry_repository.save(
                    entry.model_copy(update={"tag_names": merged})
                )
                processed += 1

            logfire.info("Bulk tag finished", processed=processed, failed=len(errors))
            return BulkResult(
                processed=processed, requested=len(entry_ids), errors=errors
            )

    async def request_metadata(self, entry_id: EntryId) -> Entry:
        """Queue metadata extraction for a link entry.

        Raises:
            NotFoundError: If the entry does not exist
            InvalidOperationError: If the entry is not a link with a URL
        """
        with logfire.span("entry_service.request_metadata", entry_id=str(entry_id)):
            entry = await self.get_entry(entry_id)
            if not entry.has_link:
                logfire.warn(
                    "Metadata requested for non-link entry", entry_id=str(entry_id)
                )
                raise InvalidOperationError(
                    "Only link entries with a URL can have metadata extracted"
                )
            self._publish_link_changed(entry)
            return entry

    async def _require_project(self, project_id: ProjectId) -> None:
        project = await self.project_repository.find_by_id(project_id)
        if project is None:
            logfire.warn("Entry references unknown project", project_id=str(project_id))
            raise ValidationError(
                f"Project not found: {project_id}",
                errors={"projectId": [f"Project {project_id} does not exist"]},
            )

    def _publish_link_changed(self, entry: Entry) -> None:
        self.event_publisher.publish(
            EntryLinkChanged(entry_id=entry.id, url=(entry.url or "").strip())
        )
        logfire.info("Metadata extraction requested", entry_id=str(entry.id))
