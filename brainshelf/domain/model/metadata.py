"""Page metadata extracted for link entries."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from brainshelf.domain.model.common import DomainModel, utc_now
from brainshelf.domain.value import EntryId, MetadataId


class Metadata(DomainModel):
    """Metadata scraped from a link entry's page.

    Exactly one record per entry; it is deleted together with the entry.
    """

    id: MetadataId
    entry_id: EntryId
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    image_url: Optional[str] = None
    favicon_url: Optional[str] = None
    author: Optional[str] = None
    site_name: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
