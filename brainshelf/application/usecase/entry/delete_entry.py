"""Delete entry use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import EntryService
from brainshelf.domain.value import EntryId


class DeleteEntryRequest(CamelModel):
    """Delete entry request."""

    entry_id: EntryId


class DeleteEntryUseCase(BaseUseCase):
    """Use case for deleting an entry with its metadata and tag links."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: DeleteEntryRequest) -> None:
        """Execute delete entry flow.

        Raises:
            NotFoundError: If the entry does not exist
        """
        with logfire.span("delete_entry.execute", entry_id=str(request.entry_id)):
            await self.entry_service.delete_entry(request.entry_id)
