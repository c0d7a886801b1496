"""Metadata extraction wiring for the background worker."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from brainshelf.adapter.web.metadata import HttpMetadataExtractor
from brainshelf.application.worker import MetadataExtractionWorker
from brainshelf.config import Settings
from brainshelf.domain.service import MetadataExtractor, MetadataService
from brainshelf.persistence.database import session_scope
from brainshelf.persistence.repository import (
    PostgresEntryRepository,
    PostgresMetadataRepository,
)


def postgres_metadata_scope(
    session_factory: async_sessionmaker[AsyncSession], extractor: MetadataExtractor
):
    """Build a per-job scope yielding a MetadataService over its own session."""

    @asynccontextmanager
    async def scope() -> AsyncIterator[MetadataService]:
        async with session_scope(session_factory) as session:
            yield MetadataService(
                entry_repository=PostgresEntryRepository(session),
                metadata_repository=PostgresMetadataRepository(session),
                metadata_extractor=extractor,
            )

    return scope


def create_metadata_worker(
    settings: Settings, session_factory: async_sessionmaker[AsyncSession]
) -> MetadataExtractionWorker:
    """Create the metadata worker backed by PostgreSQL and HTTP extraction."""
    extractor = HttpMetadataExtractor(settings.metadata)
    return MetadataExtractionWorker(
        postgres_metadata_scope(session_factory, extractor),
        queue_size=settings.metadata.queue_size,
    )
