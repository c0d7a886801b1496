"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .entry import InMemoryEntryRepository
from .metadata import InMemoryMetadataRepository
from .project import InMemoryProjectRepository
from .search import InMemorySearchRepository
from .tag import InMemoryTagRepository
from .template import InMemoryTemplateRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryEntryRepository",
    "InMemoryMetadataRepository",
    "InMemoryProjectRepository",
    "InMemorySearchRepository",
    "InMemoryTagRepository",
    "InMemoryTemplateRepository",
]
