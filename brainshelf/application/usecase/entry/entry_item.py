"""Entry response models shared by the entry and search use cases."""

from datetime import datetime
from typing import Optional

from brainshelf.application.usecase.base import CamelModel
from brainshelf.domain.model.entry import Entry
from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.value import EntryType


class MetadataItem(CamelModel):
    """Link metadata in responses."""

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    image_url: Optional[str] = None
    favicon_url: Optional[str] = None
    author: Optional[str] = None
    site_name: Optional[str] = None
    updated_at: datetime

    @classmethod
    def from_metadata(cls, metadata: Metadata) -> "MetadataItem":
        return cls(
            title=metadata.title,
            description=metadata.description,
            keywords=metadata.keywords,
            image_url=metadata.image_url,
            favicon_url=metadata.favicon_url,
            author=metadata.author,
            site_name=metadata.site_name,
            updated_at=metadata.updated_at,
        )


class EntryItem(CamelModel):
    """Entry in responses, with its tags, metadata and project name."""

    id: str
    project_id: str
    project_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    type: EntryType
    content: Optional[str] = None
    url: Optional[str] = None
    tags: list[str]
    metadata: Optional[MetadataItem] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryItem":
        return cls(
            id=str(entry.id),
            project_id=str(entry.project_id),
            project_name=entry.project_name,
            title=entry.title,
            description=entry.description,
            type=entry.type,
            content=entry.content,
            url=entry.url,
            tags=[name.root for name in entry.tag_names],
            metadata=(
                MetadataItem.from_metadata(entry.metadata) if entry.metadata else None
            ),
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
