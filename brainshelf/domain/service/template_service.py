"""Template domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import Field

from brainshelf.domain.error import NotFoundError, ValidationError
from brainshelf.domain.model.template import Template
from brainshelf.domain.repository.project import ProjectRepository
from brainshelf.domain.repository.template import TemplateRepository
from brainshelf.domain.value import EntryType, ProjectId, TemplateId, ValueObject

from .base import Service
from .tag_service import parse_tag_names


class TemplateDraft(ValueObject):
    """Caller-supplied template fields for create and update."""

    name: str
    description: Optional[str] = None
    type: EntryType
    title: Optional[str] = None
    content: Optional[str] = None
    tag_names: list[str] = Field(default_factory=list)
    is_default: bool = False
    project_id: Optional[ProjectId] = None


class TemplateService(Service):
    """Domain service for entry templates."""

    def __init__(
        self,
        template_repository: TemplateRepository,
        project_repository: ProjectRepository,
    ) -> None:
        """Initialize template service.

        Args:
            template_repository: Template repository
            project_repository: Project repository
        """
        self.template_repository = template_repository
        self.project_repository = project_repository

    async def list_templates(
        self, project_id: Optional[ProjectId] = None
    ) -> list[Template]:
        """List global templates, plus the project's own when given."""
        with logfire.span(
            "template_service.list_templates",
            project_id=str(project_id) if project_id else None,
        ):
            return await self.template_repository.find_all(project_id=project_id)

    async def list_default_templates(self) -> list[Template]:
        """List templates flagged as default."""
        with logfire.span("template_service.list_default_templates"):
            return await self.template_repository.find_defaults()

    async def get_template(self, template_id: TemplateId) -> Template:
        """Get a template.

        Raises:
            NotFoundError: If the template does not exist
        """
        with logfire.span(
            "template_service.get_template", template_id=str(template_id)
        ):
            template = await self.template_repository.find_by_id(template_id)
            if template is None:
                logfire.warn("Template not found", template_id=str(template_id))
                raise NotFoundError("Template", str(template_id))
            return template

    async def create_template(self, draft: TemplateDraft) -> Template:
        """Create a template."""
        with logfire.span("template_service.create_template", name=draft.name):
            await self._require_project(draft.project_id)
            template = Template(
                id=TemplateId(uuid4()),
                **self._fields(draft),
            )
            saved = await self.template_repository.save(template)
            logfire.info("Template created", template_id=str(saved.id))
            return saved

    async def update_template(
        self, template_id: TemplateId, draft: TemplateDraft
    ) -> Template:
        """Replace a template's fields.

        Raises:
            NotFoundError: If the template does not exist
        """
        with logfire.span(
            "template_service.update_template", template_id=str(template_id)
        ):
            existing = await self.get_template(template_id)
            await self._require_project(draft.project_id)
            updated = Template(
                id=existing.id,
                created_at=existing.created_at,
                updated_at=existing.updated_at,
                **self._fields(draft),
            )
            saved = await self.template_repository.save(updated)
            logfire.info("Template updated", template_id=str(template_id))
            return saved

    async def delete_template(self, template_id: TemplateId) -> None:
        """Delete a template.

        Raises:
            NotFoundError: If the template does not exist
        """
        with logfire.span(
            "template_service.delete_template", template_id=str(template_id)
        ):
            deleted = await self.template_repository.delete(template_id)
            if not deleted:
                raise NotFoundError("Template", str(template_id))
            logfire.info("Template deleted", template_id=str(template_id))

    @staticmethod
    def _fields(draft: TemplateDraft) -> dict:
        return {
            "name": draft.name,
            "description": draft.description,
            "type": draft.type,
            "title": draft.title,
            "content": draft.content,
            "tag_names": parse_tag_names(draft.tag_names),
            "is_default": draft.is_default,
            "project_id": draft.project_id,
        }

    async def _require_project(self, project_id: Optional[ProjectId]) -> None:
        if project_id is None:
            return
        if await self.project_repository.find_by_id(project_id) is None:
            raise ValidationError(
                f"Project not found: {project_id}",
                errors={"projectId": [f"Project {project_id} does not exist"]},
            )
