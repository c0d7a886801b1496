"""Template repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brainshelf.domain.model.template import Template
from brainshelf.domain.value import ProjectId, TemplateId


class TemplateRepository(ABC):
    """Repository for entry templates."""

    @abstractmethod
    async def find_by_id(self, template_id: TemplateId) -> Optional[Template]:
        """Find a template by ID.

        Args:
            template_id: Template identifier

        Returns:
            Template if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, project_id: Optional[ProjectId] = None) -> list[Template]:
        """Find templates ordered by name.

        Args:
            project_id: When set, only global templates and templates of
                this project are returned

        Returns:
            List of templates
        """
        pass

    @abstractmethod
    async def find_defaults(self) -> list[Template]:
        """Find default templates ordered by name."""
        pass

    @abstractmethod
    async def save(self, template: Template) -> Template:
        """Save a template (create or update).

        Args:
            template: Template to save

        Returns:
            Saved template with write timestamps applied
        """
        pass

    @abstractmethod
    async def delete(self, template_id: TemplateId) -> bool:
        """Delete a template.

        Args:
            template_id: Template identifier

        Returns:
            True if a template was deleted
        """
        pass
