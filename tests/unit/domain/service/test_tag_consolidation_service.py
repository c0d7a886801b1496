"""Unit tests for TagConsolidationService."""

from uuid import uuid4

import pytest

from brainshelf.domain.error import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)
from brainshelf.domain.model.entry import Entry
from brainshelf.domain.repository import (
    EntryRepository,
    ProjectRepository,
    TagRepository,
)
from brainshelf.domain.service import TagConsolidationService, TagService
from brainshelf.domain.value import EntryId, EntryType, TagId, TagName
from tests.harness import create_env_fixture, make_project

# Unit test fixture - in-memory store, no database needed
unit_env = create_env_fixture()


async def save_entry(env, title: str, *tags: str) -> Entry:
    """Store a note carrying the given tags, creating the tags."""
    project_repo = await env.get(ProjectRepository)
    project = await project_repo.save(make_project())
    tag_names = [TagName(tag) for tag in tags]
    await (await env.get(TagService)).resolve_tags(tag_names)
    return await (await env.get(EntryRepository)).save(
        Entry(
            id=EntryId(uuid4()),
            project_id=project.id,
            title=title,
            type=EntryType.NOTE,
            content="body",
            tag_names=tag_names,
        )
    )


async def tag_named(env, name: str):
    return await (await env.get(TagRepository)).find_by_name(TagName(name))


class TestRenameTag:
    """Tests for rename_tag method."""

    @pytest.mark.asyncio
    async def test_rename_tag_updates_name_seen_by_entries(self, unit_env):
        """Entries report the tag under its new name."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)
        entry_repo = await unit_env.get(EntryRepository)
        entry = await save_entry(unit_env, "Note", "golang")
        tag = await tag_named(unit_env, "golang")

        # Act
        renamed = await service.rename_tag(tag.id, "  Go-Lang ")

        # Assert
        assert renamed.id == tag.id
        assert renamed.name.root == "go-lang"
        stored = await entry_repo.find_by_id(entry.id)
        assert [name.root for name in stored.tag_names] == ["go-lang"]

    @pytest.mark.asyncio
    async def test_rename_onto_existing_name_raises_conflict(self, unit_env):
        """A collision is rejected and leaves both tags unchanged."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)
        tag_service = await unit_env.get(TagService)
        go = await tag_service.create_tag("go")
        golang = await tag_service.create_tag("golang")

        # Act & Assert
        with pytest.raises(ConflictError, match="merge"):
            await service.rename_tag(golang.id, "Go")

        tag_repo = await unit_env.get(TagRepository)
        assert (await tag_repo.find_by_id(go.id)).name.root == "go"
        assert (await tag_repo.find_by_id(golang.id)).name.root == "golang"

    @pytest.mark.asyncio
    async def test_rename_to_same_normalized_name_is_noop(self, unit_env):
        """Renaming "go" to "GO" returns the tag untouched."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)
        tag = await (await unit_env.get(TagService)).create_tag("go")

        # Act
        result = await service.rename_tag(tag.id, "GO")

        # Assert
        assert result == tag

    @pytest.mark.asyncio
    async def test_rename_unknown_tag_raises_not_found(self, unit_env):
        """Renaming a tag that does not exist is a not-found error."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.rename_tag(TagId(uuid4()), "anything")

    @pytest.mark.asyncio
    async def test_rename_to_blank_name_raises_validation_error(self, unit_env):
        """The new name is reported under newName."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)
        tag = await (await unit_env.get(TagService)).create_tag("go")

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await service.rename_tag(tag.id, " ")

        assert "newName" in exc_info.value.errors


class TestMergeTags:
    """Tests for merge_tags method."""

    @pytest.mark.asyncio
    async def test_merge_moves_entries_and_deletes_source(self, unit_env):
        """Entries end up with the target once and are marked updated."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)
        entry_repo = await unit_env.get(EntryRepository)
        only_golang = await save_entry(unit_env, "E", "golang")
        both = await save_entry(unit_env, "F", "go", "golang")
        go = await tag_named(unit_env, "go")
        golang = await tag_named(unit_env, "golang")

        # Act
        result = await service.merge_tags(golang.id, go.id)

        # Assert
        assert result.reassigned_entries == 2
        assert result.target.id == go.id
        assert await tag_named(unit_env, "golang") is None

        stored = await entry_repo.find_by_id(only_golang.id)
        assert [name.root for name in stored.tag_names] == ["go"]
        assert stored.updated_at > only_golang.updated_at

        stored_both = await entry_repo.find_by_id(both.id)
        assert [name.root for name in stored_both.tag_names] == ["go"]

    @pytest.mark.asyncio
    async def test_merge_tag_into_itself_raises_invalid_operation(self, unit_env):
        """Self-merge is rejected and the tag keeps its entries."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)
        tag_repo = await unit_env.get(TagRepository)
        entry_repo = await unit_env.get(EntryRepository)
        entry = await save_entry(unit_env, "Note", "x")
        tag = await tag_named(unit_env, "x")

        # Act & Assert
        with pytest.raises(InvalidOperationError):
            await service.merge_tags(tag.id, tag.id)

        usage = await tag_repo.find_usage(tag.id)
        assert usage.usage_count == 1
        stored = await entry_repo.find_by_id(entry.id)
        assert [name.root for name in stored.tag_names] == ["x"]

    @pytest.mark.asyncio
    async def test_merge_with_unknown_target_raises_not_found(self, unit_env):
        """Both tags must exist."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)
        tag = await (await unit_env.get(TagService)).create_tag("go")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.merge_tags(tag.id, TagId(uuid4()))

    @pytest.mark.asyncio
    async def test_merge_failure_restores_tags_and_links(self, unit_env, monkeypatch):
        """A failure after re-linking leaves the store as it was."""
        # Arrange
        service = await unit_env.get(TagConsolidationService)
        tag_repo = await unit_env.get(TagRepository)
        entry_repo = await unit_env.get(EntryRepository)
        entry = await save_entry(unit_env, "E", "golang")
        await (await unit_env.get(TagService)).create_tag("go")
        go = await tag_named(unit_env, "go")
        golang = await tag_named(unit_env, "golang")
        links_before = set(unit_env.database.entry_tags)

        def fail(entry_ids):
            raise RuntimeError("disk full")

        monkeypatch.setattr(tag_repo, "_touch_entries", fail)

        # Act
        with pytest.raises(RuntimeError, match="disk full"):
            await service.merge_tags(golang.id, go.id)

        # Assert
        assert unit_env.database.entry_tags == links_before
        assert await tag_named(unit_env, "golang") is not None
        stored = await entry_repo.find_by_id(entry.id)
        assert [name.root for name in stored.tag_names] == ["golang"]
        assert stored.updated_at == entry.updated_at
