"""Entry aggregate root.

Entries are the unit of knowledge in BrainShelf: a note, a bookmarked link,
a code snippet or a task, always owned by a single project.
"""

from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

from pydantic import Field, field_validator, model_validator

from brainshelf.domain.model.common import DomainModel, utc_now
from brainshelf.domain.model.metadata import Metadata
from brainshelf.domain.value import EntryId, EntryType, ProjectId, TagName


def is_http_url(value: str) -> bool:
    """Check that a value is an absolute http(s) URL."""
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class Entry(DomainModel):
    """Entry aggregate root.

    Type-based validation rules:
    - link: requires an absolute http(s) URL
    - note, code, task: require content

    Tags are held by name. The entry<->tag association itself lives in the
    repository (entry_tags), never as an embedded collection of Tag objects.
    `metadata` and `project_name` are read-side enrichments and are not
    written back by the repository.
    """

    id: EntryId
    project_id: ProjectId
    title: str = Field(min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, max_length=2000)
    type: EntryType
    content: Optional[str] = None
    url: Optional[str] = None
    tag_names: list[TagName] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Read-side enrichments
    metadata: Optional[Metadata] = None
    project_name: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Title must contain something other than whitespace."""
        if not v.strip():
            raise ValueError("Title is required")
        return v.strip()

    @field_validator("tag_names")
    @classmethod
    def deduplicate_tag_names(cls, v: list[TagName]) -> list[TagName]:
        """Keep the first occurrence of each tag name."""
        return list(dict.fromkeys(v))

    @model_validator(mode="after")
    def validate_entry_type_content(self) -> "Entry":
        """Validate that URL or content is provided based on entry type."""
        if self.type.requires_url:
            if not self.url or not self.url.strip():
                raise ValueError(f"URL is required for {self.type.value} entries")
            if not is_http_url(self.url.strip()):
                raise ValueError("URL must be a valid http or https URL")
        if self.type.requires_content and not (self.content and self.content.strip()):
            raise ValueError(f"Content is required for {self.type.value} entries")
        return self

    @property
    def has_link(self) -> bool:
        """Whether this entry has a URL metadata can be extracted from."""
        return self.type == EntryType.LINK and bool(self.url and self.url.strip())
