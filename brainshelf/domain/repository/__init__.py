"""Repository interfaces for BrainShelf domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from brainshelf.domain.repository.entry import EntryFilter, EntryRepository
from brainshelf.domain.repository.metadata import MetadataRepository
from brainshelf.domain.repository.project import ProjectRepository
from brainshelf.domain.repository.search import SearchRepository
from brainshelf.domain.repository.tag import TagRepository
from brainshelf.domain.repository.template import TemplateRepository

__all__ = [
    "EntryFilter",
    "EntryRepository",
    "MetadataRepository",
    "ProjectRepository",
    "SearchRepository",
    "TagRepository",
    "TemplateRepository",
]
