"""List entries use case."""

from typing import Optional

import logfire
from pydantic import Field

from brainshelf.application.usecase.base import BaseUseCase, CamelModel, PagedResponse
from brainshelf.domain.repository.entry import EntryFilter
from brainshelf.domain.service import EntryService, ProjectService, parse_tag_names
from brainshelf.domain.value import EntryType, PageRequest, ProjectId

from .entry_item import EntryItem


class ListEntriesRequest(CamelModel):
    """List entries request.

    Paging values are taken as given and clamped, never rejected.
    """

    project_id: Optional[ProjectId] = None
    type: Optional[EntryType] = None
    tags: list[str] = Field(default_factory=list)  # Any of these tags
    page_number: int = 1
    page_size: int = 20
    require_project: bool = False  # 404 when project_id names no project


class ListEntriesUseCase(BaseUseCase):
    """Use case for listing entries newest first."""

    def __init__(
        self, entry_service: EntryService, project_service: ProjectService
    ) -> None:
        """Initialize list entries use case.

        Args:
            entry_service: Entry domain service
            project_service: Project domain service
        """
        self.entry_service = entry_service
        self.project_service = project_service

    async def execute(self, request: ListEntriesRequest) -> PagedResponse[EntryItem]:
        """Execute list entries flow.

        Args:
            request: Filters and paging

        Returns:
            One page of entries

        Raises:
            NotFoundError: If `require_project` is set and the project is unknown
            ValidationError: If a tag filter name is invalid
        """
        page = PageRequest.clamp(request.page_number, request.page_size)
        with logfire.span(
            "list_entries.execute",
            project_id=str(request.project_id) if request.project_id else None,
            type=request.type.value if request.type else None,
            tags=request.tags,
            page=page.number,
            page_size=page.size,
        ):
            if request.require_project and request.project_id:
                await self.project_service.get_project(request.project_id)

            entry_filter = EntryFilter(
                project_id=request.project_id,
                type=request.type,
                tag_names=parse_tag_names(request.tags),
            )
            entries, total = await self.entry_service.list_entries(entry_filter, page)

            return PagedResponse[EntryItem].build(
                [EntryItem.from_entry(entry) for entry in entries], total, page
            )
