"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brainshelf.domain.model.project import Project
from brainshelf.domain.value import PageRequest, ProjectId


class ProjectRepository(ABC):
    """Repository for the Project aggregate."""

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID.

        Args:
            project_id: Project identifier

        Returns:
            Project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, page: PageRequest = PageRequest()) -> list[Project]:
        """Find projects, newest first.

        Args:
            page: Page to return

        Returns:
            Projects ordered by created_at DESC
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all projects."""
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        Args:
            project: Project to save

        Returns:
            Saved project with write timestamps applied
        """
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project and, by cascade, its entries.

        Args:
            project_id: Project identifier

        Returns:
            True if a project was deleted
        """
        pass
