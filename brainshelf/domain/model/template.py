"""Template entity for pre-filling new entries."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from brainshelf.domain.model.common import DomainModel, utc_now
from brainshelf.domain.value import EntryType, ProjectId, TagName, TemplateId


class Template(DomainModel):
    """Entry template.

    Templates without a project are global; project templates are offered
    alongside the global ones for that project.
    """

    id: TemplateId
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    type: EntryType
    title: Optional[str] = Field(default=None, max_length=500)
    content: Optional[str] = None
    tag_names: list[TagName] = Field(default_factory=list)
    is_default: bool = False
    project_id: Optional[ProjectId] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
