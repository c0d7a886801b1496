"""Duplicate entry use case."""

from typing import Optional

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import EntryService
from brainshelf.domain.value import EntryId

from .entry_item import EntryItem


class DuplicateEntryRequest(CamelModel):
    """Duplicate entry request."""

    entry_id: Optional[EntryId] = None  # Taken from the path
    new_title: Optional[str] = None


class DuplicateEntryUseCase(BaseUseCase):
    """Use case for copying an entry, tags included."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: DuplicateEntryRequest) -> EntryItem:
        """Execute duplicate entry flow.

        Raises:
            NotFoundError: If the entry does not exist
        """
        with logfire.span("duplicate_entry.execute", entry_id=str(request.entry_id)):
            entry = await self.entry_service.duplicate_entry(
                request.entry_id, new_title=request.new_title
            )
            return EntryItem.from_entry(entry)
