"""Project response model."""

from datetime import datetime
from typing import Optional

from brainshelf.application.usecase.base import CamelModel
from brainshelf.domain.model.project import Project


class ProjectItem(CamelModel):
    """Project in responses."""

    id: str
    name: str
    description: Optional[str] = None
    color: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_project(cls, project: Project) -> "ProjectItem":
        return cls(
            id=str(project.id),
            name=project.name,
            description=project.description,
            color=project.color.root,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
