"""Unit tests for EntryService."""

from uuid import uuid4

import pydantic
import pytest

from brainshelf.domain.error import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)
from brainshelf.domain.event import EntryLinkChanged
from brainshelf.domain.model.entry import Entry
from brainshelf.domain.repository import (
    EntryFilter,
    EntryRepository,
    ProjectRepository,
    TagRepository,
)
from brainshelf.domain.service import EntryDraft, EntryService
from brainshelf.domain.value import (
    EntryId,
    EntryType,
    PageRequest,
    ProjectId,
    TagName,
)
from tests.harness import create_env_fixture, make_project

# Unit test fixture - in-memory store, no database needed
unit_env = create_env_fixture()


async def saved_project_id(env) -> ProjectId:
    project = await (await env.get(ProjectRepository)).save(make_project())
    return project.id


def note_draft(project_id: ProjectId, **overrides) -> EntryDraft:
    fields = {
        "project_id": project_id,
        "title": "Redis notes",
        "type": EntryType.NOTE,
        "content": "Use SCAN, not KEYS",
    }
    fields.update(overrides)
    return EntryDraft(**fields)


def link_draft(project_id: ProjectId, url: str = "https://redis.io", **overrides):
    return note_draft(
        project_id, type=EntryType.LINK, content=None, url=url, **overrides
    )


class TestCreateEntry:
    """Tests for create_entry method."""

    @pytest.mark.asyncio
    async def test_create_entry_creates_missing_tags(self, unit_env):
        """Tags are normalized and created on first use."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        tag_repo = await unit_env.get(TagRepository)
        project_id = await saved_project_id(unit_env)

        # Act
        entry = await entry_service.create_entry(
            note_draft(project_id, tag_names=["Redis", "cache", "redis "])
        )

        # Assert
        assert sorted(name.root for name in entry.tag_names) == ["cache", "redis"]
        assert await tag_repo.find_by_name(TagName("redis")) is not None
        assert entry.project_name == "Research"
        assert unit_env.events.events == []

    @pytest.mark.asyncio
    async def test_create_entry_for_unknown_project_raises_validation_error(
        self, unit_env
    ):
        """The missing project is reported under projectId."""
        # Arrange
        entry_service = await unit_env.get(EntryService)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await entry_service.create_entry(note_draft(ProjectId(uuid4())))

        assert "projectId" in exc_info.value.errors

    @pytest.mark.asyncio
    async def test_create_note_without_content_is_rejected(self, unit_env):
        """Non-link entries need content."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        project_id = await saved_project_id(unit_env)

        # Act & Assert
        with pytest.raises(pydantic.ValidationError, match="Content is required"):
            await entry_service.create_entry(note_draft(project_id, content="  "))

    @pytest.mark.asyncio
    async def test_create_link_with_non_http_url_is_rejected(self, unit_env):
        """Link entries need an absolute http(s) URL."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        project_id = await saved_project_id(unit_env)

        # Act & Assert
        with pytest.raises(pydantic.ValidationError, match="http"):
            await entry_service.create_entry(
                link_draft(project_id, url="ftp://example.com")
            )

    @pytest.mark.asyncio
    async def test_create_link_publishes_link_changed(self, unit_env):
        """A new link entry requests metadata extraction."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        project_id = await saved_project_id(unit_env)

        # Act
        entry = await entry_service.create_entry(
            link_draft(project_id, url=" https://redis.io/docs ")
        )

        # Assert
        assert unit_env.events.events == [
            EntryLinkChanged(
                entry_id=entry.id,
                url="https://redis.io/docs",
                occurred_at=unit_env.events.events[0].occurred_at,
            )
        ]


class TestUpdateEntry:
    """Tests for update_entry method."""

    @pytest.mark.asyncio
    async def test_update_replaces_tags_and_keeps_created_at(self, unit_env):
        """Tags are replaced wholesale; creation time survives."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        project_id = await saved_project_id(unit_env)
        entry = await entry_service.create_entry(
            note_draft(project_id, tag_names=["a", "b"])
        )

        # Act
        updated = await entry_service.update_entry(
            entry.id, note_draft(project_id, title="Renamed", tag_names=["c"])
        )

        # Assert
        assert updated.title == "Renamed"
        assert [name.root for name in updated.tag_names] == ["c"]
        assert updated.created_at == entry.created_at
        assert updated.updated_at > entry.updated_at

    @pytest.mark.asyncio
    async def test_update_publishes_only_when_url_changes(self, unit_env):
        """Same URL: no event. New URL: one event."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        project_id = await saved_project_id(unit_env)
        entry = await entry_service.create_entry(link_draft(project_id))
        unit_env.events.events.clear()

        # Act
        await entry_service.update_entry(
            entry.id, link_draft(project_id, title="New title")
        )
        unchanged_events = list(unit_env.events.events)
        await entry_service.update_entry(
            entry.id, link_draft(project_id, url="https://valkey.io")
        )

        # Assert
        assert unchanged_events == []
        assert [e.url for e in unit_env.events.events] == ["https://valkey.io"]

    @pytest.mark.asyncio
    async def test_update_unknown_entry_raises_not_found(self, unit_env):
        """Updating an entry that does not exist is a not-found error."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        project_id = await saved_project_id(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await entry_service.update_entry(
                EntryId(uuid4()), note_draft(project_id)
            )


class TestDeleteAndDuplicate:
    """Tests for delete_entry and duplicate_entry."""

    @pytest.mark.asyncio
    async def test_delete_entry_removes_it(self, unit_env):
        """A deleted entry can no longer be fetched."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        entry = await entry_service.create_entry(
            note_draft(await saved_project_id(unit_env))
        )

        # Act
        await entry_service.delete_entry(entry.id)

        # Assert
        with pytest.raises(NotFoundError):
            await entry_service.get_entry(entry.id)

    @pytest.mark.asyncio
    async def test_duplicate_copies_fields_and_tags(self, unit_env):
        """The copy gets a new id and a "(Copy)" title."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        entry = await entry_service.create_entry(
            note_draft(await saved_project_id(unit_env), tag_names=["redis"])
        )

        # Act
        copy = await entry_service.duplicate_entry(entry.id)

        # Assert
        assert copy.id != entry.id
        assert copy.title == "Redis notes (Copy)"
        assert copy.content == entry.content
        assert copy.tag_names == entry.tag_names

    @pytest.mark.asyncio
    async def test_duplicate_with_new_title(self, unit_env):
        """An explicit title replaces the default one."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        entry = await entry_service.create_entry(
            note_draft(await saved_project_id(unit_env))
        )

        # Act
        copy = await entry_service.duplicate_entry(entry.id, new_title="Redis v2")

        # Assert
        assert copy.title == "Redis v2"


class TestBulkOperations:
    """Tests for bulk_delete and bulk_tag."""

    @pytest.mark.asyncio
    async def test_bulk_delete_reports_missing_entries(self, unit_env):
        """Unknown ids are reported while the others are deleted."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        entry = await entry_service.create_entry(
            note_draft(await saved_project_id(unit_env))
        )
        missing = EntryId(uuid4())

        # Act
        result = await entry_service.bulk_delete([entry.id, missing])

        # Assert
        assert result.processed == 1
        assert result.requested == 2
        assert result.errors == [f"Entry not found: {missing}"]

    @pytest.mark.asyncio
    async def test_bulk_tag_adds_tags_and_keeps_existing_ones(self, unit_env):
        """Existing tags stay; new ones are appended once."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        entry_repo = await unit_env.get(EntryRepository)
        project_id = await saved_project_id(unit_env)
        first = await entry_service.create_entry(
            note_draft(project_id, tag_names=["redis"])
        )
        second = await entry_service.create_entry(note_draft(project_id))

        # Act
        result = await entry_service.bulk_tag(
            [first.id, second.id], ["Cache", "redis"]
        )

        # Assert
        assert result.processed == 2
        assert result.errors == []
        stored_first = await entry_repo.find_by_id(first.id)
        assert sorted(n.root for n in stored_first.tag_names) == ["cache", "redis"]
        stored_second = await entry_repo.find_by_id(second.id)
        assert sorted(n.root for n in stored_second.tag_names) == ["cache", "redis"]

    @pytest.mark.asyncio
    async def test_bulk_tag_without_tags_raises_validation_error(self, unit_env):
        """Blank tag lists are rejected."""
        # Arrange
        entry_service = await unit_env.get(EntryService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await entry_service.bulk_tag([EntryId(uuid4())], ["  "])


class TestListAndMetadataRequest:
    """Tests for list_entries and request_metadata."""

    @pytest.mark.asyncio
    async def test_list_entries_filters_by_any_tag(self, unit_env):
        """Entries carrying any listed tag match, newest first."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        project_id = await saved_project_id(unit_env)
        older = await entry_service.create_entry(
            note_draft(project_id, title="Older", tag_names=["go"])
        )
        newer = await entry_service.create_entry(
            note_draft(project_id, title="Newer", tag_names=["python"])
        )
        await entry_service.create_entry(
            note_draft(project_id, title="Other", tag_names=["rust"])
        )

        # Act
        entries, total = await entry_service.list_entries(
            EntryFilter(tag_names=[TagName("go"), TagName("python")]),
            PageRequest(number=1, size=20),
        )

        # Assert
        assert total == 2
        assert [e.id for e in entries] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_request_metadata_for_note_raises_invalid_operation(
        self, unit_env
    ):
        """Only link entries can have metadata extracted."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        entry = await entry_service.create_entry(
            note_draft(await saved_project_id(unit_env))
        )

        # Act & Assert
        with pytest.raises(InvalidOperationError):
            await entry_service.request_metadata(entry.id)

    @pytest.mark.asyncio
    async def test_request_metadata_for_link_publishes_event(self, unit_env):
        """A refresh request re-publishes the entry's current URL."""
        # Arrange
        entry_service = await unit_env.get(EntryService)
        entry = await entry_service.create_entry(
            link_draft(await saved_project_id(unit_env))
        )
        unit_env.events.events.clear()

        # Act
        await entry_service.request_metadata(entry.id)

        # Assert
        assert [(e.entry_id, e.url) for e in unit_env.events.events] == [
            (entry.id, "https://redis.io")
        ]


class TestSaveWithMissingTag:
    """Tests for saving an entry whose tag no longer exists."""

    @pytest.mark.asyncio
    async def test_save_with_vanished_tag_raises_conflict(self, unit_env):
        """An entry is never stored with fewer tags than it was given."""
        # Arrange
        entry_repo = await unit_env.get(EntryRepository)
        project_id = await saved_project_id(unit_env)
        entry = Entry(
            id=EntryId(uuid4()),
            project_id=project_id,
            title="Redis notes",
            type=EntryType.NOTE,
            content="body",
            tag_names=[TagName("ghost")],
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await entry_repo.save(entry)

        assert await entry_repo.find_by_id(entry.id) is None
