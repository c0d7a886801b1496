"""Delete project use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import ProjectService
from brainshelf.domain.value import ProjectId


class DeleteProjectRequest(CamelModel):
    """Delete project request."""

    project_id: ProjectId


class DeleteProjectUseCase(BaseUseCase):
    """Use case for deleting a project together with its entries."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: DeleteProjectRequest) -> None:
        """Execute delete project flow.

        Raises:
            NotFoundError: If the project does not exist
        """
        with logfire.span(
            "delete_project.execute", project_id=str(request.project_id)
        ):
            await self.project_service.delete_project(request.project_id)
