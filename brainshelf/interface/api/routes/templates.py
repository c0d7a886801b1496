"""Template routes."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from brainshelf.application.usecase.template import (
    CreateTemplateRequest,
    DeleteTemplateRequest,
    GetTemplateRequest,
    ListTemplatesRequest,
    TemplateItem,
    UpdateTemplateRequest,
)
from brainshelf.domain.value import ProjectId, TemplateId
from brainshelf.util.di.application import (
    CreateTemplateUseCaseDep,
    DeleteTemplateUseCaseDep,
    GetTemplateUseCaseDep,
    ListTemplatesUseCaseDep,
    UpdateTemplateUseCaseDep,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[TemplateItem])
async def list_templates(
    use_case: ListTemplatesUseCaseDep,
    project_id: Optional[UUID] = Query(default=None, alias="projectId"),
) -> list[TemplateItem]:
    """List global templates plus the project's own, ordered by name.

    Args:
        use_case: List templates use case (injected)
        project_id: Include this project's templates

    Returns:
        Templates
    """
    return await use_case.execute(
        ListTemplatesRequest(project_id=ProjectId(project_id) if project_id else None)
    )


@router.get("/default", response_model=list[TemplateItem])
async def list_default_templates(
    use_case: ListTemplatesUseCaseDep,
) -> list[TemplateItem]:
    """List the templates flagged as defaults."""
    return await use_case.execute(ListTemplatesRequest(defaults_only=True))


@router.get("/{template_id}", response_model=TemplateItem)
async def get_template(
    template_id: UUID, use_case: GetTemplateUseCaseDep
) -> TemplateItem:
    """Get a template.

    Raises:
        NotFoundError: If the template does not exist (404)
    """
    return await use_case.execute(
        GetTemplateRequest(template_id=TemplateId(template_id))
    )


@router.post("", response_model=TemplateItem, status_code=status.HTTP_201_CREATED)
async def create_template(
    request: CreateTemplateRequest, use_case: CreateTemplateUseCaseDep
) -> TemplateItem:
    """Create a template.

    Raises:
        ValidationError: If the project is unknown or a field is invalid (400)
    """
    return await use_case.execute(request)


@router.put("/{template_id}", response_model=TemplateItem)
async def update_template(
    template_id: UUID,
    request: UpdateTemplateRequest,
    use_case: UpdateTemplateUseCaseDep,
) -> TemplateItem:
    """Replace a template's fields.

    Raises:
        NotFoundError: If the template does not exist (404)
        ValidationError: If the project is unknown or a field is invalid (400)
    """
    request = request.model_copy(update={"template_id": TemplateId(template_id)})
    return await use_case.execute(request)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: UUID, use_case: DeleteTemplateUseCaseDep
) -> Response:
    """Delete a template.

    Raises:
        NotFoundError: If the template does not exist (404)
    """
    await use_case.execute(DeleteTemplateRequest(template_id=TemplateId(template_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
