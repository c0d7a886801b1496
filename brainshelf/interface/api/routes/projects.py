"""Project routes."""

from typing import Optional
from uuid import UUID

import logfire
from fastapi import APIRouter, Query, Response, status

from brainshelf.application.usecase.base import PagedResponse
from brainshelf.application.usecase.entry import EntryItem, ListEntriesRequest
from brainshelf.application.usecase.project import (
    CreateProjectRequest,
    DeleteProjectRequest,
    GetProjectRequest,
    ListProjectsRequest,
    ProjectItem,
    UpdateProjectRequest,
)
from brainshelf.domain.value import EntryType, ProjectId
from brainshelf.interface.api.routes.entries import split_tags
from brainshelf.util.di.application import (
    CreateProjectUseCaseDep,
    DeleteProjectUseCaseDep,
    GetProjectUseCaseDep,
    ListEntriesUseCaseDep,
    ListProjectsUseCaseDep,
    UpdateProjectUseCaseDep,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=PagedResponse[ProjectItem])
async def list_projects(
    use_case: ListProjectsUseCaseDep,
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int = Query(default=20, alias="pageSize"),
) -> PagedResponse[ProjectItem]:
    """List projects, newest first. Paging is clamped."""
    return await use_case.execute(
        ListProjectsRequest(page_number=page_number, page_size=page_size)
    )


@router.get("/{project_id}", response_model=ProjectItem)
async def get_project(project_id: UUID, use_case: GetProjectUseCaseDep) -> ProjectItem:
    """Get a project.

    Raises:
        NotFoundError: If the project does not exist (404)
    """
    return await use_case.execute(GetProjectRequest(project_id=ProjectId(project_id)))


@router.get("/{project_id}/entries", response_model=PagedResponse[EntryItem])
async def list_project_entries(
    project_id: UUID,
    use_case: ListEntriesUseCaseDep,
    type: Optional[EntryType] = None,
    tags: Optional[str] = None,
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int = Query(default=20, alias="pageSize"),
) -> PagedResponse[EntryItem]:
    """List one project's entries newest first.

    Args:
        project_id: Project UUID
        use_case: List entries use case (injected)
        type: Only entries of this type
        tags: Comma-separated tag names; entries with any of them match
        page_number: Page number, clamped to at least 1
        page_size: Page size, clamped to 1..100

    Returns:
        One page of the project's entries

    Raises:
        NotFoundError: If the project does not exist (404)
    """
    with logfire.span("api.list_project_entries", project_id=str(project_id)):
        request = ListEntriesRequest(
            project_id=ProjectId(project_id),
            type=type,
            tags=split_tags(tags),
            page_number=page_number,
            page_size=page_size,
            require_project=True,
        )
        return await use_case.execute(request)


@router.post("", response_model=ProjectItem, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: CreateProjectRequest, use_case: CreateProjectUseCaseDep
) -> ProjectItem:
    """Create a project.

    Raises:
        ValidationError: If the name is blank or the color is not a hex color (400)
    """
    return await use_case.execute(request)


@router.put("/{project_id}", response_model=ProjectItem)
async def update_project(
    project_id: UUID, request: UpdateProjectRequest, use_case: UpdateProjectUseCaseDep
) -> ProjectItem:
    """Update a project's name, description and color.

    Raises:
        NotFoundError: If the project does not exist (404)
    """
    request = request.model_copy(update={"project_id": ProjectId(project_id)})
    return await use_case.execute(request)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID, use_case: DeleteProjectUseCaseDep
) -> Response:
    """Delete a project together with its entries.

    Raises:
        NotFoundError: If the project does not exist (404)
    """
    with logfire.span("api.delete_project", project_id=str(project_id)):
        await use_case.execute(DeleteProjectRequest(project_id=ProjectId(project_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
