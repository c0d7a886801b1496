"""Search entries use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import Field

from brainshelf.application.usecase.base import BaseUseCase, CamelModel, PagedResponse
from brainshelf.application.usecase.entry import EntryItem
from brainshelf.domain.error import ValidationError
from brainshelf.domain.service import SearchService
from brainshelf.domain.value import (
    DATE_RANGE_ERROR,
    MAX_PAGE_SIZE,
    EntryType,
    PageRequest,
    ProjectId,
    SearchQuery,
    SearchSort,
    is_inverted_range,
)


class SearchEntriesRequest(CamelModel):
    """Search request.

    Unlike listing, out-of-range paging is rejected.
    """

    q: Optional[str] = None
    project_id: Optional[ProjectId] = None
    type: Optional[EntryType] = None
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)
    sort: SearchSort = SearchSort.RECENT


class SearchEntriesUseCase(BaseUseCase):
    """Use case for full-text entry search."""

    def __init__(self, search_service: SearchService) -> None:
        """Initialize search entries use case.

        Args:
            search_service: Search domain service
        """
        self.search_service = search_service

    async def execute(self, request: SearchEntriesRequest) -> PagedResponse[EntryItem]:
        """Execute search flow.

        Args:
            request: Query text, filters, paging and sort

        Returns:
            One page of matching entries

        Raises:
            ValidationError: If fromDate is after toDate
        """
        with logfire.span(
            "search_entries.execute",
            q=request.q,
            project_id=str(request.project_id) if request.project_id else None,
            type=request.type.value if request.type else None,
            sort=request.sort.value,
        ):
            if is_inverted_range(request.from_date, request.to_date):
                raise ValidationError(
                    DATE_RANGE_ERROR, errors={"fromDate": [DATE_RANGE_ERROR]}
                )

            page = PageRequest(number=request.page_number, size=request.page_size)
            query = SearchQuery(
                text=request.q,
                project_id=request.project_id,
                type=request.type,
                from_date=request.from_date,
                to_date=request.to_date,
                page=page,
                sort=request.sort,
            )

            entries, total = await self.search_service.search(query)
            logfire.info("Search finished", count=len(entries), total=total)

            return PagedResponse[EntryItem].build(
                [EntryItem.from_entry(entry) for entry in entries], total, page
            )
