"""Project domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from brainshelf.domain.error import NotFoundError
from brainshelf.domain.model.project import Project
from brainshelf.domain.repository.project import ProjectRepository
from brainshelf.domain.value import (
    DEFAULT_PROJECT_COLOR,
    PageRequest,
    ProjectColor,
    ProjectId,
)

from .base import Service


class ProjectService(Service):
    """Domain service for projects."""

    def __init__(self, project_repository: ProjectRepository) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
        """
        self.project_repository = project_repository

    async def list_projects(self, page: PageRequest) -> tuple[list[Project], int]:
        """List projects newest first.

        Returns:
            (projects on the page, total projects)
        """
        with logfire.span(
            "project_service.list_projects", page=page.number, page_size=page.size
        ):
            total = await self.project_repository.count()
            projects = await self.project_repository.find_all(page)
            logfire.info("Projects listed", count=len(projects), total=total)
            return projects, total

    async def get_project(self, project_id: ProjectId) -> Project:
        """Get a project.

        Raises:
            NotFoundError: If the project does not exist
        """
        with logfire.span("project_service.get_project", project_id=str(project_id)):
            project = await self.project_repository.find_by_id(project_id)
            if project is None:
                logfire.warn("Project not found", project_id=str(project_id))
                raise NotFoundError("Project", str(project_id))
            return project

    async def create_project(
        self,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Project:
        """Create a project."""
        with logfire.span("project_service.create_project", name=name):
            project = Project(
                id=ProjectId(uuid4()),
                name=name,
                description=description,
                color=ProjectColor(color) if color else DEFAULT_PROJECT_COLOR,
            )
            saved = await self.project_repository.save(project)
            logfire.info("Project created", project_id=str(saved.id))
            return saved

    async def update_project(
        self,
        project_id: ProjectId,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Project:
        """Replace a project's name, description and color.

        Raises:
            NotFoundError: If the project does not exist
        """
        with logfire.span("project_service.update_project", project_id=str(project_id)):
            existing = await self.get_project(project_id)
            updated = Project(
                id=existing.id,
                name=name,
                description=description,
                color=ProjectColor(color) if color else existing.color,
                created_at=existing.created_at,
                updated_at=existing.updated_at,
            )
            saved = await self.project_repository.save(updated)
            logfire.info("Project updated", project_id=str(project_id))
            return saved

    async def delete_project(self, project_id: ProjectId) -> None:
        """Delete a project together with its entries.

        Raises:
            NotFoundError: If the project does not exist
        """
        with logfire.span("project_service.delete_project", project_id=str(project_id)):
            deleted = await self.project_repository.delete(project_id)
            if not deleted:
                logfire.warn(
                    "Project not found for deletion", project_id=str(project_id)
                )
                raise NotFoundError("Project", str(project_id))
            logfire.info("Project deleted", project_id=str(project_id))
