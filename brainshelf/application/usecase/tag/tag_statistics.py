"""Tag statistics use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import TagService

from .list_tags import TagUsageItem


class TagStatisticsResponse(CamelModel):
    """Tag statistics response."""

    total_tags: int
    total_usages: int
    most_used: list[TagUsageItem]
    recently_used: list[TagUsageItem]
    unused: list[TagUsageItem]


class TagStatisticsUseCase(BaseUseCase):
    """Use case for aggregate tag statistics."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: None = None) -> TagStatisticsResponse:
        """Execute tag statistics flow."""
        with logfire.span("tag_statistics.execute"):
            statistics = await self.tag_service.get_statistics()
            return TagStatisticsResponse(
                total_tags=statistics.total_tags,
                total_usages=statistics.total_usages,
                most_used=[TagUsageItem.from_usage(u) for u in statistics.most_used],
                recently_used=[
                    TagUsageItem.from_usage(u) for u in statistics.recently_used
                ],
                unused=[TagUsageItem.from_usage(u) for u in statistics.unused],
            )
