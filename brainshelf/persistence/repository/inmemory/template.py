"""In-memory implementation of Template repository for testing."""

from typing import Optional

from brainshelf.domain.model.common import stamp_on_write
from brainshelf.domain.model.template import Template
from brainshelf.domain.repository.template import TemplateRepository
from brainshelf.domain.value import ProjectId, TemplateId

from .database import InMemoryDatabase


class InMemoryTemplateRepository(TemplateRepository):
    """In-memory implementation of TemplateRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, template_id: TemplateId) -> Optional[Template]:
        """Find template by ID."""
        return self.database.templates.get(template_id)

    async def find_all(self, project_id: Optional[ProjectId] = None) -> list[Template]:
        """Global templates, plus the project's own when a project is given."""
        templates = [
            t
            for t in self.database.templates.values()
            if project_id is None or t.project_id in (None, project_id)
        ]
        return sorted(templates, key=lambda t: t.name)

    async def find_defaults(self) -> list[Template]:
        """Templates flagged as default."""
        return sorted(
            (t for t in self.database.templates.values() if t.is_default),
            key=lambda t: t.name,
        )

    async def save(self, template: Template) -> Template:
        """Insert or update a template."""
        existing = self.database.templates.get(template.id)
        if existing:
            template = template.model_copy(update={"created_at": existing.created_at})
        template = stamp_on_write(
            template, is_new=existing is None, now=self.database.clock()
        )
        self.database.templates[template.id] = template
        return template

    async def delete(self, template_id: TemplateId) -> bool:
        """Delete a template."""
        return self.database.templates.pop(template_id, None) is not None
