"""Delete tag use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import TagService
from brainshelf.domain.value import TagId


class DeleteTagRequest(CamelModel):
    """Delete tag request."""

    tag_id: TagId


class DeleteTagUseCase(BaseUseCase):
    """Use case for deleting a tag; entries keep their other tags."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: DeleteTagRequest) -> None:
        """Execute delete tag flow.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("delete_tag.execute", tag_id=str(request.tag_id)):
            await self.tag_service.delete_tag(request.tag_id)
