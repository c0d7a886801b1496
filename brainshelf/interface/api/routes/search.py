"""Search routes."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from fastapi import APIRouter, Query

from brainshelf.application.usecase.base import PagedResponse
from brainshelf.application.usecase.entry import EntryItem
from brainshelf.application.usecase.search import SearchEntriesRequest
from brainshelf.domain.value import EntryType, ProjectId, SearchSort
from brainshelf.util.di.application import SearchEntriesUseCaseDep

router = APIRouter(prefix="/search", tags=["search"])


@router.get(
    "",
    response_model=PagedResponse[EntryItem],
    summary="Full-text search over entries",
    description=(
        "Matches entry text, extracted link metadata and tag names. "
        "A blank query lists entries by most recent update."
    ),
)
async def search_entries(
    use_case: SearchEntriesUseCaseDep,
    q: Optional[str] = None,
    project_id: Optional[UUID] = Query(default=None, alias="projectId"),
    type: Optional[EntryType] = None,
    from_date: Optional[datetime] = Query(default=None, alias="fromDate"),
    to_date: Optional[datetime] = Query(default=None, alias="toDate"),
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int = Query(default=20, alias="pageSize"),
    sort: SearchSort = SearchSort.RECENT,
) -> PagedResponse[EntryItem]:
    """Search entries.

    Paging is validated here rather than clamped, so the request model is
    built in the handler and its errors surface as 400.

    Args:
        use_case: Search entries use case (injected)
        q: Free text; every word must match
        project_id: Only entries of this project
        type: Only entries of this type
        from_date: Earliest creation time, inclusive
        to_date: Latest creation time, inclusive
        page_number: Page number (>= 1)
        page_size: Page size (1-100)
        sort: `recent` or `relevance`

    Returns:
        One page of matching entries

    Raises:
        pydantic.ValidationError: If paging is out of range or fromDate > toDate

    Example:
        GET /search?q=redis&sort=relevance&pageSize=10
    """
    with logfire.span("api.search_entries", q=q, sort=sort.value):
        request = SearchEntriesRequest(
            q=q,
            project_id=ProjectId(project_id) if project_id else None,
            type=type,
            from_date=from_date,
            to_date=to_date,
            page_number=page_number,
            page_size=page_size,
            sort=sort,
        )
        return await use_case.execute(request)
