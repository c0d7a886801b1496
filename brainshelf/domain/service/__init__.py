"""Domain services."""

from .base import Service
from .entry_service import BulkResult, EntryDraft, EntryService
from .metadata_service import (
    ExtractedMetadata,
    MetadataExtractor,
    MetadataService,
)
from .project_service import ProjectService
from .search_service import SearchService
from .tag_consolidation_service import TagConsolidationService
from .tag_service import TagService, parse_tag_name, parse_tag_names
from .template_service import TemplateDraft, TemplateService

__all__ = [
    "BulkResult",
    "EntryDraft",
    "EntryService",
    "ExtractedMetadata",
    "MetadataExtractor",
    "MetadataService",
    "ProjectService",
    "SearchService",
    "Service",
    "TagConsolidationService",
    "TagService",
    "TemplateDraft",
    "TemplateService",
    "parse_tag_name",
    "parse_tag_names",
]
