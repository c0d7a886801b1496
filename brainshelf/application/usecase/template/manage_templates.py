"""Get, create, update and delete template use cases."""

from typing import Optional

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import TemplateService
from brainshelf.domain.value import TemplateId

from .template_item import TemplateFields, TemplateItem


class GetTemplateRequest(CamelModel):
    """Get template request."""

    template_id: TemplateId


class CreateTemplateRequest(TemplateFields):
    """Create template request."""


class UpdateTemplateRequest(TemplateFields):
    """Update template request. Fields are replaced wholesale."""

    template_id: Optional[TemplateId] = None  # Taken from the path


class DeleteTemplateRequest(CamelModel):
    """Delete template request."""

    template_id: TemplateId


class GetTemplateUseCase(BaseUseCase):
    """Use case for fetching one template."""

    def __init__(self, template_service: TemplateService) -> None:
        self.template_service = template_service

    async def execute(self, request: GetTemplateRequest) -> TemplateItem:
        """Execute get template flow.

        Raises:
            NotFoundError: If the template does not exist
        """
        with logfire.span(
            "get_template.execute", template_id=str(request.template_id)
        ):
            template = await self.template_service.get_template(request.template_id)
            return TemplateItem.from_template(template)


class CreateTemplateUseCase(BaseUseCase):
    """Use case for creating a template."""

    def __init__(self, template_service: TemplateService) -> None:
        self.template_service = template_service

    async def execute(self, request: CreateTemplateRequest) -> TemplateItem:
        """Execute create template flow.

        Raises:
            ValidationError: If the project is unknown or a tag name is invalid
        """
        with logfire.span("create_template.execute", name=request.name):
            template = await self.template_service.create_template(request.to_draft())
            return TemplateItem.from_template(template)


class UpdateTemplateUseCase(BaseUseCase):
    """Use case for updating a template."""

    def __init__(self, template_service: TemplateService) -> None:
        self.template_service = template_service

    async def execute(self, request: UpdateTemplateRequest) -> TemplateItem:
        """Execute update template flow.

        Raises:
            NotFoundError: If the template does not exist
            ValidationError: If the project is unknown or a tag name is invalid
        """
        with logfire.span(
            "update_template.execute", template_id=str(request.template_id)
        ):
            template = await self.template_service.update_template(
                request.template_id, request.to_draft()
            )
            return TemplateItem.from_template(template)


class DeleteTemplateUseCase(BaseUseCase):
    """Use case for deleting a template."""

    def __init__(self, template_service: TemplateService) -> None:
        self.template_service = template_service

    async def execute(self, request: DeleteTemplateRequest) -> None:
        """Execute delete template flow.

        Raises:
            NotFoundError: If the template does not exist
        """
        with logfire.span(
            "delete_template.execute", template_id=str(request.template_id)
        ):
            await self.template_service.delete_template(request.template_id)
