"""Merge tags use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import TagConsolidationService
from brainshelf.domain.value import TagId

from .list_tags import TagItem


class MergeTagsRequest(CamelModel):
    """Merge tags request: the source tag is merged into the target."""

    source_tag_id: TagId
    target_tag_id: TagId


class MergeTagsResponse(CamelModel):
    """Merge tags response."""

    source_tag_id: str
    target_tag: TagItem
    reassigned_entries: int


class MergeTagsUseCase(BaseUseCase):
    """Use case for merging one tag into another."""

    def __init__(self, consolidation_service: TagConsolidationService) -> None:
        """Initialize merge tags use case.

        Args:
            consolidation_service: Tag consolidation domain service
        """
        self.consolidation_service = consolidation_service

    async def execute(self, request: MergeTagsRequest) -> MergeTagsResponse:
        """Execute merge tags flow.

        Args:
            request: Source and target tag ids

        Returns:
            Target tag and the number of entries moved onto it

        Raises:
            InvalidOperationError: If source and target are the same tag
            NotFoundError: If either tag does not exist
        """
        with logfire.span(
            "merge_tags.execute",
            source_tag_id=str(request.source_tag_id),
            target_tag_id=str(request.target_tag_id),
        ):
            result = await self.consolidation_service.merge_tags(
                request.source_tag_id, request.target_tag_id
            )
            return MergeTagsResponse(
                source_tag_id=str(result.source_id),
                target_tag=TagItem.from_tag(result.target),
                reassigned_entries=result.reassigned_entries,
            )
