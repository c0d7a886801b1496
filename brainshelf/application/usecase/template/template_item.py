"""Template request and response models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from brainshelf.application.usecase.base import CamelModel
from brainshelf.domain.model.template import Template
from brainshelf.domain.service import TemplateDraft
from brainshelf.domain.value import EntryType, ProjectId


class TemplateItem(CamelModel):
    """Template in responses."""

    id: str
    name: str
    description: Optional[str] = None
    type: EntryType
    title: Optional[str] = None
    content: Optional[str] = None
    tags: list[str]
    is_default: bool
    project_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_template(cls, template: Template) -> "TemplateItem":
        return cls(
            id=str(template.id),
            name=template.name,
            description=template.description,
            type=template.type,
            title=template.title,
            content=template.content,
            tags=[name.root for name in template.tag_names],
            is_default=template.is_default,
            project_id=str(template.project_id) if template.project_id else None,
            created_at=template.created_at,
            updated_at=template.updated_at,
        )


class TemplateFields(CamelModel):
    """Writable template fields."""

    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    type: EntryType
    title: Optional[str] = Field(default=None, max_length=500)
    content: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    is_default: bool = False
    project_id: Optional[ProjectId] = None

    def to_draft(self) -> TemplateDraft:
        return TemplateDraft(
            name=self.name,
            description=self.description,
            type=self.type,
            title=self.title,
            content=self.content,
            tag_names=self.tags,
            is_default=self.is_default,
            project_id=self.project_id,
        )
