"""Domain model entities for BrainShelf."""

from brainshelf.domain.model.common import DomainModel, stamp_on_write, utc_now
from brainshelf.domain.model.entry import Entry
from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.model.project import Project
from brainshelf.domain.model.tag import MergeResult, Tag, TagStatistics, TagUsage
from brainshelf.domain.model.template import Template

__all__ = [
    "DomainModel",
    "Entry",
    "MergeResult",
    "Metadata",
    "Project",
    "Tag",
    "TagStatistics",
    "TagUsage",
    "Template",
    "stamp_on_write",
    "utc_now",
]
