"""List projects use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel, PagedResponse
from brainshelf.domain.service import ProjectService
from brainshelf.domain.value import PageRequest

from .project_item import ProjectItem


class ListProjectsRequest(CamelModel):
    """List projects request. Paging values are clamped."""

    page_number: int = 1
    page_size: int = 20


class ListProjectsUseCase(BaseUseCase):
    """Use case for listing projects newest first."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: ListProjectsRequest) -> PagedResponse[ProjectItem]:
        """Execute list projects flow."""
        page = PageRequest.clamp(request.page_number, request.page_size)
        with logfire.span(
            "list_projects.execute", page=page.number, page_size=page.size
        ):
            projects, total = await self.project_service.list_projects(page)
            return PagedResponse[ProjectItem].build(
                [ProjectItem.from_project(p) for p in projects], total, page
            )
