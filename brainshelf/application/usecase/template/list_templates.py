"""List templates use case."""

from typing import Optional

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import TemplateService
from brainshelf.domain.value import ProjectId

from .template_item import TemplateItem


class ListTemplatesRequest(CamelModel):
    """List templates request."""

    project_id: Optional[ProjectId] = None
    defaults_only: bool = False


class ListTemplatesUseCase(BaseUseCase):
    """Use case for listing templates by name."""

    def __init__(self, template_service: TemplateService) -> None:
        self.template_service = template_service

    async def execute(self, request: ListTemplatesRequest) -> list[TemplateItem]:
        """Execute list templates flow.

        Returns global templates plus the project's own, or only the default
        templates when `defaults_only` is set.
        """
        with logfire.span(
            "list_templates.execute",
            project_id=str(request.project_id) if request.project_id else None,
            defaults_only=request.defaults_only,
        ):
            if request.defaults_only:
                templates = await self.template_service.list_default_templates()
            else:
                templates = await self.template_service.list_templates(
                    project_id=request.project_id
                )
            return [TemplateItem.from_template(t) for t in templates]
