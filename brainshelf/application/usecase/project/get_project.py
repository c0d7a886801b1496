"""Get project use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import ProjectService
from brainshelf.domain.value import ProjectId

from .project_item import ProjectItem


class GetProjectRequest(CamelModel):
    """Get project request."""

    project_id: ProjectId


class GetProjectUseCase(BaseUseCase):
    """Use case for fetching one project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: GetProjectRequest) -> ProjectItem:
        """Execute get project flow.

        Raises:
            NotFoundError: If the project does not exist
        """
        with logfire.span("get_project.execute", project_id=str(request.project_id)):
            project = await self.project_service.get_project(request.project_id)
            return ProjectItem.from_project(project)
