"""Get tag use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import TagService
from brainshelf.domain.value import TagId

from .list_tags import TagUsageItem


class GetTagRequest(CamelModel):
    """Get tag request."""

    tag_id: TagId


class GetTagUseCase(BaseUseCase):
    """Use case for fetching one tag with its usage."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: GetTagRequest) -> TagUsageItem:
        """Execute get tag flow.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("get_tag.execute", tag_id=str(request.tag_id)):
            usage = await self.tag_service.get_tag(request.tag_id)
            return TagUsageItem.from_usage(usage)
