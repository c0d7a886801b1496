"""Create and update entry use cases."""

from typing import Optional

import logfire
from pydantic import Field

from brainshelf.application.usecase.base import BaseUseCase, CamelModel
from brainshelf.domain.service import EntryDraft, EntryService
from brainshelf.domain.value import EntryId, EntryType, ProjectId

from .entry_item import EntryItem


class EntryFields(CamelModel):
    """Writable entry fields."""

    project_id: ProjectId
    title: str = Field(min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, max_length=2000)
    type: EntryType
    content: Optional[str] = None
    url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    def to_draft(self) -> EntryDraft:
        return EntryDraft(
            project_id=self.project_id,
            title=self.title,
            description=self.description,
            type=self.type,
            content=self.content,
            url=self.url,
            tag_names=self.tags,
        )


class CreateEntryRequest(EntryFields):
    """Create entry request."""


class UpdateEntryRequest(EntryFields):
    """Update entry request. Fields and tags are replaced wholesale."""

    entry_id: Optional[EntryId] = None  # Taken from the path


class CreateEntryUseCase(BaseUseCase):
    """Use case for creating an entry."""

    def __init__(self, entry_service: EntryService) -> None:
        """Initialize create entry use case.

        Args:
            entry_service: Entry domain service
        """
        self.entry_service = entry_service

    async def execute(self, request: CreateEntryRequest) -> EntryItem:
        """Execute create entry flow.

        Args:
            request: Entry fields

        Returns:
            The created entry

        Raises:
            ValidationError: If the project is unknown or a tag name is invalid
        """
        with logfire.span(
            "create_entry.execute",
            project_id=str(request.project_id),
            type=request.type.value,
        ):
            entry = await self.entry_service.create_entry(request.to_draft())
            return EntryItem.from_entry(entry)


class UpdateEntryUseCase(BaseUseCase):
    """Use case for updating an entry."""

    def __init__(self, entry_service: EntryService) -> None:
        """Initialize update entry use case.

        Args:
            entry_service: Entry domain service
        """
        self.entry_service = entry_service

    async def execute(self, request: UpdateEntryRequest) -> EntryItem:
        """Execute update entry flow.

        Raises:
            NotFoundError: If the entry does not exist
            ValidationError: If the project is unknown or a tag name is invalid
        """
        with logfire.span("update_entry.execute", entry_id=str(request.entry_id)):
            entry = await self.entry_service.update_entry(
                request.entry_id, request.to_draft()
            )
            return EntryItem.from_entry(entry)
