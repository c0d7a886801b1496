"""Link metadata domain service."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import uuid4

import logfire

from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.repository.entry import EntryRepository
from brainshelf.domain.repository.metadata import MetadataRepository
from brainshelf.domain.value import EntryId, MetadataId, ValueObject

from .base import Service


class ExtractedMetadata(ValueObject):
    """Metadata read from a web page."""

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    image_url: Optional[str] = None
    favicon_url: Optional[str] = None
    author: Optional[str] = None
    site_name: Optional[str] = None


class MetadataExtractor(ABC):
    """Fetches a page and reads its metadata."""

    @abstractmethod
    async def extract(self, url: str) -> Optional[ExtractedMetadata]:
        """Extract metadata from a URL.

        Args:
            url: Absolute http(s) URL

        Returns:
            Extracted metadata, None if the page could not be fetched or parsed
        """
        pass


class MetadataService(Service):
    """Domain service for extracting and storing link metadata."""

    def __init__(
        self,
        entry_repository: EntryRepository,
        metadata_repository: MetadataRepository,
        metadata_extractor: MetadataExtractor,
    ) -> None:
        """Initialize metadata service.

        Args:
            entry_repository: Entry repository
            metadata_repository: Metadata repository
            metadata_extractor: Page metadata extractor
        """
        self.entry_repository = entry_repository
        self.metadata_repository = metadata_repository
        self.metadata_extractor = metadata_extractor

    async def refresh_metadata(self, entry_id: EntryId, url: str) -> Optional[Metadata]:
        """Extract metadata for `url` and store it on the entry.

        Nothing is stored when the entry is gone, its URL has changed since
        the request, or extraction fails.

        Args:
            entry_id: Entry the metadata belongs to
            url: URL that was current when extraction was requested

        Returns:
            Stored metadata, None if nothing was stored
        """
        with logfire.span(
            "metadata_service.refresh_metadata", entry_id=str(entry_id), url=url
        ):
            entry = await self.entry_repository.find_by_id(entry_id)
            if entry is None:
                logfire.warn(
                    "Entry gone before metadata extraction", entry_id=str(entry_id)
                )
                return None
            if (entry.url or "").strip() != url:
                logfire.info(
                    "Entry URL changed, skipping stale extraction",
                    entry_id=str(entry_id),
                )
                return None

            extracted = await self.metadata_extractor.extract(url)
            if extracted is None:
                logfire.warn("No metadata extracted", entry_id=str(entry_id), url=url)
                return None

            metadata = await self.metadata_repository.upsert(
                Metadata(
                    id=MetadataId(uuid4()),
                    entry_id=entry_id,
                    **extracted.model_dump(),
                )
            )
            logfire.info(
                "Metadata stored", entry_id=str(entry_id), title=metadata.title
            )
            return metadata
