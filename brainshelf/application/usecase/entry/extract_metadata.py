"""Extract metadata use case."""

import logfire

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import EntryService
from brainshelf.domain.value import EntryId


class ExtractMetadataRequest(CamelModel):
    """Extract metadata request."""

    entry_id: EntryId


class ExtractMetadataResponse(CamelModel):
    """Extraction was queued; metadata appears on the entry once fetched."""

    entry_id: str
    url: str
    status: str = "queued"


class ExtractMetadataUseCase(BaseUseCase):
    """Use case for queueing metadata extraction of a link entry."""

    def __init__(self, entry_service: EntryService) -> None:
        """Initialize extract metadata use case.

        Args:
            entry_service: Entry domain service
        """
        self.entry_service = entry_service

    async def execute(self, request: ExtractMetadataRequest) -> ExtractMetadataResponse:
        """Execute extract metadata flow.

        Raises:
            NotFoundError: If the entry does not exist
            InvalidOperationError: If the entry is not a link with a URL
        """
        with logfire.span("extract_metadata.execute", entry_id=str(request.entry_id)):
            entry = await self.entry_service.request_metadata(request.entry_id)
            return ExtractMetadataResponse(
                entry_id=str(entry.id), url=(entry.url or "").strip()
            )
