"""Persistence infrastructure dependencies.

One AsyncSession per request. The session dependency commits when the
request succeeds and rolls back on any exception; the request's event
outbox is flushed only after the commit and discarded on rollback.

Tests replace the repository dependencies with in-memory ones through
`app.dependency_overrides`, which takes the session out of the graph.
"""

from collections.abc import AsyncIterator
from typing import Annotated

import logfire
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from brainshelf.application.worker import EventDispatcher, EventOutbox
from brainshelf.domain.repository import (
    EntryRepository,
    ProjectRepository,
    SearchRepository,
    TagRepository,
    TemplateRepository,
)
from brainshelf.persistence.repository import (
    PostgresEntryRepository,
    PostgresProjectRepository,
    PostgresSearchRepository,
    PostgresTagRepository,
    PostgresTemplateRepository,
)
from brainshelf.util.di.core import SettingsDep


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Provide the application's session factory."""
    return request.app.state.session_factory


def get_event_dispatcher(request: Request) -> EventDispatcher:
    """Provide the dispatcher committed events are handed to."""
    return request.app.state.event_dispatcher


async def get_event_outbox(
    dispatcher: Annotated[EventDispatcher, Depends(get_event_dispatcher)],
) -> AsyncIterator[EventOutbox]:
    """Provide the request's event outbox.

    Set up before the session, so it is torn down after the session has
    committed (or rolled back).
    """
    outbox = EventOutbox(dispatcher)
    try:
        yield outbox
    except Exception:
        outbox.discard()
        raise
    outbox.flush()


EventOutboxDep = Annotated[EventOutbox, Depends(get_event_outbox)]


async def get_session(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
    outbox: EventOutboxDep,
) -> AsyncIterator[AsyncSession]:
    """Provide database session for request scope.

    Commits at the end of the request if no exception occurred, otherwise
    rolls back and re-raises.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
            logfire.info("Session committed", pending_events=len(outbox.pending))
        except Exception as e:
            logfire.warn("Session rollback", error=str(e))
            await session.rollback()
            raise


SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_tag_repository(session: SessionDep) -> TagRepository:
    """Provide Tag repository."""
    return PostgresTagRepository(session)


def get_entry_repository(session: SessionDep) -> EntryRepository:
    """Provide Entry repository."""
    return PostgresEntryRepository(session)


def get_project_repository(session: SessionDep) -> ProjectRepository:
    """Provide Project repository."""
    return PostgresProjectRepository(session)


def get_template_repository(session: SessionDep) -> TemplateRepository:
    """Provide Template repository."""
    return PostgresTemplateRepository(session)


def get_search_repository(
    session: SessionDep, settings: SettingsDep
) -> SearchRepository:
    """Provide Search repository over the configured languages."""
    return PostgresSearchRepository(session, languages=settings.search.languages)


TagRepositoryDep = Annotated[TagRepository, Depends(get_tag_repository)]
EntryRepositoryDep = Annotated[EntryRepository, Depends(get_entry_repository)]
ProjectRepositoryDep = Annotated[ProjectRepository, Depends(get_project_repository)]
TemplateRepositoryDep = Annotated[
    TemplateRepository, Depends(get_template_repository)
]
SearchRepositoryDep = Annotated[SearchRepository, Depends(get_search_repository)]
