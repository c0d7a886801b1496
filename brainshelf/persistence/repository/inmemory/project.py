"""In-memory implementation of Project repository for testing."""

from typing import Optional

from brainshelf.domain.model.common import stamp_on_write
from brainshelf.domain.model.project import Project
from brainshelf.domain.repository.project import ProjectRepository
from brainshelf.domain.value import PageRequest, ProjectId

from .database import InMemoryDatabase


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find project by ID."""
        return self.database.projects.get(project_id)

    async def find_all(self, page: PageRequest = PageRequest()) -> list[Project]:
        """Find projects newest first."""
        projects = sorted(self.database.projects.values(), key=lambda p: str(p.id))
        projects.sort(key=lambda p: p.created_at, reverse=True)
        return projects[page.offset : page.offset + page.size]

    async def count(self) -> int:
        """Count all projects."""
        return len(self.database.projects)

    async def save(self, project: Project) -> Project:
        """Insert or update a project."""
        existing = self.database.projects.get(project.id)
        if existing:
            project = project.model_copy(update={"created_at": existing.created_at})
        project = stamp_on_write(
            project, is_new=existing is None, now=self.database.clock()
        )
        self.database.projects[project.id] = project
        return project

    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project with its entries."""
        with self.database.atomic():
            return self.database.delete_project(project_id)
