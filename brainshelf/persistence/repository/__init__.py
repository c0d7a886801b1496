"""PostgreSQL repository implementations."""

from brainshelf.persistence.repository.entry import PostgresEntryRepository
from brainshelf.persistence.repository.metadata import PostgresMetadataRepository
from brainshelf.persistence.repository.project import PostgresProjectRepository
from brainshelf.persistence.repository.search import PostgresSearchRepository
from brainshelf.persistence.repository.tag import PostgresTagRepository
from brainshelf.persistence.repository.template import PostgresTemplateRepository

__all__ = [
    "PostgresEntryRepository",
    "PostgresMetadataRepository",
    "PostgresProjectRepository",
    "PostgresSearchRepository",
    "PostgresTagRepository",
    "PostgresTemplateRepository",
]
