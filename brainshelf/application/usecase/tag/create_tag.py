"""Create tag use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import TagService

from .list_tags import TagItem


class CreateTagRequest(CamelModel):
    """Create tag request. The name is normalized by the service."""

    name: str


class CreateTagUseCase(BaseUseCase):
    """Use case for creating a tag (idempotent on the normalized name)."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> TagItem:
        """Execute create tag flow.

        Args:
            request: Tag name

        Returns:
            The created tag, or the existing tag with that name

        Raises:
            ValidationError: If the name is blank or too long
        """
        with logfire.span("create_tag.execute", name=request.name):
            tag = await self.tag_service.create_tag(request.name)
            return TagItem.from_tag(tag)
