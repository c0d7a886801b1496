"""Rename tag use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import TagConsolidationService
from brainshelf.domain.value import TagId

from .list_tags import TagItem


class RenameTagRequest(CamelModel):
    """Rename tag request."""

    tag_id: TagId
    new_name: str


class RenameTagUseCase(BaseUseCase):
    """Use case for renaming a tag."""

    def __init__(self, consolidation_service: TagConsolidationService) -> None:
        """Initialize rename tag use case.

        Args:
            consolidation_service: Tag consolidation domain service
        """
        self.consolidation_service = consolidation_service

    async def execute(self, request: RenameTagRequest) -> TagItem:
        """Execute rename tag flow.

        Args:
            request: Tag and its new name

        Returns:
            The renamed tag

        Raises:
            ValidationError: If the new name is blank or too long
            NotFoundError: If the tag does not exist
            ConflictError: If the new name is taken by another tag
        """
        with logfire.span(
            "rename_tag.execute", tag_id=str(request.tag_id), new_name=request.new_name
        ):
            tag = await self.consolidation_service.rename_tag(
                request.tag_id, request.new_name
            )
            return TagItem.from_tag(tag)
