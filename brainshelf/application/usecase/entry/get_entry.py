"""Get entry use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import EntryService
from brainshelf.domain.value import EntryId

from .entry_item import EntryItem


class GetEntryRequest(CamelModel):
    """Get entry request."""

    entry_id: EntryId


class GetEntryUseCase(BaseUseCase):
    """Use case for fetching one entry."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: GetEntryRequest) -> EntryItem:
        """Execute get entry flow.

        Raises:
            NotFoundError: If the entry does not exist
        """
        with logfire.span("get_entry.execute", entry_id=str(request.entry_id)):
            entry = await self.entry_service.get_entry(request.entry_id)
            return EntryItem.from_entry(entry)
