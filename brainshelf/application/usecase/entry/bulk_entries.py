"""Bulk entry use cases."""

import logfire
from pydantic import Field

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import BulkResult, EntryService
from brainshelf.domain.value import EntryId


class BulkDeleteRequest(CamelModel):
    """Bulk delete request."""

    entry_ids: list[EntryId] = Field(min_length=1)


class BulkTagRequest(CamelModel):
    """Bulk tag request: the tags are added to every entry."""

    entry_ids: list[EntryId] = Field(min_length=1)
    tags: list[str] = Field(min_length=1)


class BulkResponse(CamelModel):
    """Bulk operation outcome."""

    processed: int
    requested: int
    errors: list[str]

    @classmethod
    def from_result(cls, result: BulkResult) -> "BulkResponse":
        return cls(
            processed=result.processed,
            requested=result.requested,
            errors=result.errors,
        )


class BulkDeleteUseCase(BaseUseCase):
    """Use case for deleting several entries."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: BulkDeleteRequest) -> BulkResponse:
        """Execute bulk delete flow; unknown entries are reported, not fatal."""
        with logfire.span("bulk_delete.execute", requested=len(request.entry_ids)):
            result = await self.entry_service.bulk_delete(request.entry_ids)
            return BulkResponse.from_result(result)


class BulkTagUseCase(BaseUseCase):
    """Use case for adding tags to several entries."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: BulkTagRequest) -> BulkResponse:
        """Execute bulk tag flow; unknown entries are reported, not fatal.

        Raises:
            ValidationError: If a tag name is invalid
        """
        with logfire.span(
            "bulk_tag.execute", requested=len(request.entry_ids), tags=request.tags
        ):
            result = await self.entry_service.bulk_tag(request.entry_ids, request.tags)
            return BulkResponse.from_result(result)
