"""Unit tests for SearchService."""

from uuid import uuid4

import pydantic
import pytest

from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.repository import MetadataRepository, ProjectRepository
from brainshelf.domain.service import EntryDraft, EntryService, SearchService
from brainshelf.domain.value import (
    EntryType,
    MetadataId,
    PageRequest,
    ProjectId,
    SearchQuery,
    SearchSort,
)
from tests.harness import create_env_fixture, make_project

# Unit test fixture - in-memory store, no database needed
unit_env = create_env_fixture()


async def new_project(env, name: str = "P") -> ProjectId:
    project = await (await env.get(ProjectRepository)).save(make_project(name))
    return project.id


async def add_note(env, project_id, title, content="plain body", tags=(), **extra):
    entry_service = await env.get(EntryService)
    return await entry_service.create_entry(
        EntryDraft(
            project_id=project_id,
            title=title,
            type=extra.pop("type", EntryType.NOTE),
            content=content,
            tag_names=list(tags),
            **extra,
        )
    )


class TestSearch:
    """Tests for search method."""

    @pytest.mark.asyncio
    async def test_text_and_blank_queries_in_project(self, unit_env):
        """Text narrows to matching entries; blank lists by recent update."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        project_id = await new_project(unit_env)
        redis = await add_note(
            unit_env, project_id, "Redis notes", "SCAN is cheap", ["cache", "db"]
        )
        go = await add_note(
            unit_env, project_id, "Go concurrency", "channels", ["go"]
        )

        # Act
        by_text, text_total = await search_service.search(
            SearchQuery(text="go", project_id=project_id)
        )
        by_type, type_total = await search_service.search(
            SearchQuery(text="", project_id=project_id, type=EntryType.NOTE)
        )

        # Assert
        assert [e.id for e in by_text] == [go.id]
        assert text_total == 1
        assert [e.id for e in by_type] == [go.id, redis.id]
        assert type_total == 2

    @pytest.mark.asyncio
    async def test_every_word_must_match(self, unit_env):
        """Multi-word queries are AND-combined."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        project_id = await new_project(unit_env)
        both = await add_note(unit_env, project_id, "Redis cache eviction")
        await add_note(unit_env, project_id, "Redis streams")

        # Act
        entries, total = await search_service.search(
            SearchQuery(text="redis eviction")
        )

        # Assert
        assert [e.id for e in entries] == [both.id]
        assert total == 1

    @pytest.mark.asyncio
    async def test_operator_only_query_is_treated_as_blank(self, unit_env):
        """"&&&" has no searchable words, so only the filters apply."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        project_id = await new_project(unit_env)
        await add_note(unit_env, project_id, "One")
        await add_note(unit_env, project_id, "Two")

        # Act
        entries, total = await search_service.search(SearchQuery(text="&&&"))

        # Assert
        assert total == 2
        assert len(entries) == 2

    @pytest.mark.asyncio
    async def test_accents_are_folded(self, unit_env):
        """"cafe" finds "Café" and the other way round."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        project_id = await new_project(unit_env)
        entry = await add_note(unit_env, project_id, "Café society")

        # Act
        plain, _ = await search_service.search(SearchQuery(text="cafe"))
        accented, _ = await search_service.search(SearchQuery(text="CAFÉ"))

        # Assert
        assert [e.id for e in plain] == [entry.id]
        assert [e.id for e in accented] == [entry.id]

    @pytest.mark.asyncio
    async def test_tag_name_fragment_matches(self, unit_env):
        """A query contained in a tag name finds the tagged entry."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        project_id = await new_project(unit_env)
        entry = await add_note(
            unit_env, project_id, "Indexes", tags=["databases"]
        )

        # Act
        entries, _ = await search_service.search(SearchQuery(text="DATA"))

        # Assert
        assert [e.id for e in entries] == [entry.id]

    @pytest.mark.asyncio
    async def test_link_metadata_is_searched(self, unit_env):
        """Words only present in extracted metadata still match."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        metadata_repo = await unit_env.get(MetadataRepository)
        project_id = await new_project(unit_env)
        link = await add_note(
            unit_env,
            project_id,
            "Bookmark",
            content=None,
            type=EntryType.LINK,
            url="https://example.com/post",
        )
        await metadata_repo.upsert(
            Metadata(
                id=MetadataId(uuid4()),
                entry_id=link.id,
                title="Understanding vector clocks",
            )
        )

        # Act
        entries, _ = await search_service.search(SearchQuery(text="clocks"))

        # Assert
        assert [e.id for e in entries] == [link.id]
        assert entries[0].metadata.title == "Understanding vector clocks"

    @pytest.mark.asyncio
    async def test_date_bounds_are_inclusive(self, unit_env):
        """Entries created exactly on either bound are included."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        project_id = await new_project(unit_env)
        first = await add_note(unit_env, project_id, "First")
        second = await add_note(unit_env, project_id, "Second")
        await add_note(unit_env, project_id, "Third")

        # Act
        entries, total = await search_service.search(
            SearchQuery(from_date=first.created_at, to_date=second.created_at)
        )

        # Assert
        assert total == 2
        assert {e.id for e in entries} == {first.id, second.id}

    @pytest.mark.asyncio
    async def test_relevance_prefers_title_matches(self, unit_env):
        """Recent ordering follows updates; relevance follows field weight."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        project_id = await new_project(unit_env)
        in_title = await add_note(unit_env, project_id, "Redis", "a database")
        in_body = await add_note(
            unit_env, project_id, "Caching", "we chose redis for this"
        )

        # Act
        recent, _ = await search_service.search(SearchQuery(text="redis"))
        relevant, _ = await search_service.search(
            SearchQuery(text="redis", sort=SearchSort.RELEVANCE)
        )

        # Assert
        assert [e.id for e in recent] == [in_body.id, in_title.id]
        assert [e.id for e in relevant] == [in_title.id, in_body.id]

    @pytest.mark.asyncio
    async def test_paging_reports_total(self, unit_env):
        """Total counts every match, not just the page."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        project_id = await new_project(unit_env)
        await add_note(unit_env, project_id, "Older")
        newest = await add_note(unit_env, project_id, "Newer")

        # Act
        entries, total = await search_service.search(
            SearchQuery(page=PageRequest(number=1, size=1))
        )

        # Assert
        assert total == 2
        assert [e.id for e in entries] == [newest.id]

    def test_inverted_date_range_is_rejected(self):
        """fromDate after toDate is a validation error."""
        # Arrange
        first = make_project().created_at

        # Act & Assert
        with pytest.raises(pydantic.ValidationError, match="fromDate"):
            SearchQuery(from_date=first.replace(year=2030), to_date=first)
