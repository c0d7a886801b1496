"""Create and update project use cases."""

from typing import Optional

import logfire
from pydantic import Field

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import ProjectService
from brainshelf.domain.value import ProjectId

from .project_item import ProjectItem


class CreateProjectRequest(CamelModel):
    """Create project request."""

    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    color: Optional[str] = None  # Hex color, defaults to #3B82F6


class UpdateProjectRequest(CreateProjectRequest):
    """Update project request. A missing color keeps the current one."""

    project_id: Optional[ProjectId] = None  # Taken from the path


class CreateProjectUseCase(BaseUseCase):
    """Use case for creating a project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: CreateProjectRequest) -> ProjectItem:
        """Execute create project flow."""
        with logfire.span("create_project.execute", name=request.name):
            project = await self.project_service.create_project(
                name=request.name,
                description=request.description,
                color=request.color,
            )
            return ProjectItem.from_project(project)


class UpdateProjectUseCase(BaseUseCase):
    """Use case for updating a project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: UpdateProjectRequest) -> ProjectItem:
        """Execute update project flow.

        Raises:
            NotFoundError: If the project does not exist
        """
        with logfire.span(
            "update_project.execute", project_id=str(request.project_id)
        ):
            project = await self.project_service.update_project(
                request.project_id,
                name=request.name,
                description=request.description,
                color=request.color,
            )
            return ProjectItem.from_project(project)
