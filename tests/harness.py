"""Test harness for unit and integration tests.

Unit tests run every repository over an in-memory database. Integration
tests unmock persistence and need a PostgreSQL database with migrations
applied, named by BRAINSHELF_TEST_DATABASE_URL.
"""

import os
from datetime import datetime, timedelta, timezone
from typing import Literal, Optional
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from brainshelf.domain.model.project import Project
from brainshelf.domain.repository import (
    EntryRepository,
    ProjectRepository,
    SearchRepository,
    TagRepository,
    TemplateRepository,
)
from brainshelf.domain.service import (
    EntryService,
    ProjectService,
    SearchService,
    TagConsolidationService,
    TagService,
    TemplateService,
)
from brainshelf.domain.value import ProjectId
from brainshelf.persistence.database import create_session_factory
from brainshelf.persistence.repository.inmemory import InMemoryDatabase
from tests.di import (
    RecordingPublisher,
    inmemory_repositories,
    postgres_repositories,
)

Component = Literal["persistence"]

TEST_DATABASE_URL_ENV = "BRAINSHELF_TEST_DATABASE_URL"


def make_project(name: str = "Research") -> Project:
    """Build an unsaved project."""
    return Project(id=ProjectId(uuid4()), name=name)


class TickingClock:
    """Clock that moves forward one second on every read.

    Makes write ordering observable without sleeping.
    """

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


class TestEnvironment:
    """Services and repositories wired over one store."""

    __test__ = False

    def __init__(
        self,
        repositories: dict[type, object],
        database: Optional[InMemoryDatabase] = None,
    ) -> None:
        self.database = database
        self.events = RecordingPublisher()
        self._components = dict(repositories)

        tag_service = TagService(repositories[TagRepository])
        self._components.update(
            {
                TagService: tag_service,
                TagConsolidationService: TagConsolidationService(
                    repositories[TagRepository]
                ),
                ProjectService: ProjectService(repositories[ProjectRepository]),
                EntryService: EntryService(
                    entry_repository=repositories[EntryRepository],
                    project_repository=repositories[ProjectRepository],
                    tag_service=tag_service,
                    event_publisher=self.events,
                ),
                TemplateService: TemplateService(
                    repositories[TemplateRepository],
                    repositories[ProjectRepository],
                ),
                SearchService: SearchService(repositories[SearchRepository]),
            }
        )

    async def get(self, kind: type):
        """Resolve a service or repository by type."""
        return self._components[kind]


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields a TestEnvironment

    Usage:
        # Unit tests - in-memory store, no database needed
        unit_env = create_env_fixture()

        # Integration tests - Postgres repositories, rolled back afterwards
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_tag(unit_env):
            service = await unit_env.get(TagService)
            tag = await service.create_tag("Go")
            assert tag.name.root == "go"
    """
    unmock = unmock or set()

    @pytest_asyncio.fixture
    async def _test_environment():
        if "persistence" not in unmock:
            database = InMemoryDatabase(clock=TickingClock())
            yield TestEnvironment(inmemory_repositories(database), database)
            return

        url = os.environ.get(TEST_DATABASE_URL_ENV)
        if not url:
            pytest.skip(f"{TEST_DATABASE_URL_ENV} is not set")

        engine = create_async_engine(url)
        session_factory = create_session_factory(engine)
        try:
            async with session_factory() as session:
                try:
                    yield TestEnvironment(postgres_repositories(session))
                finally:
                    await session.rollback()
        finally:
            await engine.dispose()

    return _test_environment
