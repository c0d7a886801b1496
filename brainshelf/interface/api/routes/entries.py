"""Entry routes."""

from typing import Optional
from uuid import UUID

import logfire
from fastapi import APIRouter, Query, Response, status

from brainshelf.application.usecase.base import CamelModel, PagedResponse
from brainshelf.application.usecase.entry import (
    BulkDeleteRequest,
    BulkResponse,
    BulkTagRequest,
    CreateEntryRequest,
    DeleteEntryRequest,
    DuplicateEntryRequest,
    EntryItem,
    ExtractMetadataRequest,
    ExtractMetadataResponse,
    GetEntryRequest,
    ListEntriesRequest,
    UpdateEntryRequest,
)
from brainshelf.domain.value import EntryId, EntryType, ProjectId
from brainshelf.util.di.application import (
    BulkDeleteUseCaseDep,
    BulkTagUseCaseDep,
    CreateEntryUseCaseDep,
    DeleteEntryUseCaseDep,
    DuplicateEntryUseCaseDep,
    ExtractMetadataUseCaseDep,
    GetEntryUseCaseDep,
    ListEntriesUseCaseDep,
    UpdateEntryUseCaseDep,
)

router = APIRouter(prefix="/entries", tags=["entries"])


class DuplicateEntryAPIRequest(CamelModel):
    """API request for duplicating an entry."""

    new_title: Optional[str] = None


def split_tags(tags: Optional[str]) -> list[str]:
    """Split a comma-separated tag filter, dropping empty items."""
    if not tags:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


@router.get("", response_model=PagedResponse[EntryItem])
async def list_entries(
    use_case: ListEntriesUseCaseDep,
    project_id: Optional[UUID] = Query(default=None, alias="projectId"),
    type: Optional[EntryType] = None,
    tags: Optional[str] = None,
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int = Query(default=20, alias="pageSize"),
) -> PagedResponse[EntryItem]:
    """List entries newest first.

    Args:
        use_case: List entries use case (injected)
        project_id: Only entries of this project
        type: Only entries of this type
        tags: Comma-separated tag names; entries with any of them match
        page_number: Page number, clamped to at least 1
        page_size: Page size, clamped to 1..100

    Returns:
        One page of entries

    Example:
        GET /entries?tags=python,go&pageNumber=2
    """
    with logfire.span("api.list_entries", tags=tags, page=page_number):
        request = ListEntriesRequest(
            project_id=ProjectId(project_id) if project_id else None,
            type=type,
            tags=split_tags(tags),
            page_number=page_number,
            page_size=page_size,
        )
        return await use_case.execute(request)


@router.post(
    "/bulk-delete",
    response_model=BulkResponse,
    summary="Delete several entries",
)
async def bulk_delete_entries(
    request: BulkDeleteRequest, use_case: BulkDeleteUseCaseDep
) -> BulkResponse:
    """Delete entries one by one; failures are reported, not raised."""
    with logfire.span("api.bulk_delete_entries", requested=len(request.entry_ids)):
        return await use_case.execute(request)


@router.post(
    "/bulk-tag",
    response_model=BulkResponse,
    summary="Add tags to several entries",
)
async def bulk_tag_entries(
    request: BulkTagRequest, use_case: BulkTagUseCaseDep
) -> BulkResponse:
    """Add tags to entries one by one, keeping their existing tags."""
    with logfire.span(
        "api.bulk_tag_entries", requested=len(request.entry_ids), tags=request.tags
    ):
        return await use_case.execute(request)


@router.get("/{entry_id}", response_model=EntryItem)
async def get_entry(entry_id: UUID, use_case: GetEntryUseCaseDep) -> EntryItem:
    """Get an entry with its tags and metadata.

    Raises:
        NotFoundError: If the entry does not exist (404)
    """
    return await use_case.execute(GetEntryRequest(entry_id=EntryId(entry_id)))


@router.post("", response_model=EntryItem, status_code=status.HTTP_201_CREATED)
async def create_entry(
    request: CreateEntryRequest, use_case: CreateEntryUseCaseDep
) -> EntryItem:
    """Create an entry.

    Tags are created on first use. Link entries get their metadata
    extracted in the background once the entry is stored.

    Args:
        request: Entry fields
        use_case: Create entry use case (injected)

    Returns:
        The created entry

    Raises:
        ValidationError: If the project is unknown or a field is invalid (400)
    """
    with logfire.span("api.create_entry", type=request.type.value):
        return await use_case.execute(request)


@router.put("/{entry_id}", response_model=EntryItem)
async def update_entry(
    entry_id: UUID, request: UpdateEntryRequest, use_case: UpdateEntryUseCaseDep
) -> EntryItem:
    """Replace an entry's fields and tags.

    Raises:
        NotFoundError: If the entry does not exist (404)
        ValidationError: If the project is unknown or a field is invalid (400)
    """
    with logfire.span("api.update_entry", entry_id=str(entry_id)):
        request = request.model_copy(update={"entry_id": EntryId(entry_id)})
        return await use_case.execute(request)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: UUID, use_case: DeleteEntryUseCaseDep) -> Response:
    """Delete an entry.

    Raises:
        NotFoundError: If the entry does not exist (404)
    """
    await use_case.execute(DeleteEntryRequest(entry_id=EntryId(entry_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{entry_id}/extract-metadata",
    response_model=ExtractMetadataResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def extract_metadata(
    entry_id: UUID, use_case: ExtractMetadataUseCaseDep
) -> ExtractMetadataResponse:
    """Queue metadata extraction for a link entry.

    Raises:
        NotFoundError: If the entry does not exist (404)
        InvalidOperationError: If the entry is not a link with a URL (400)
    """
    return await use_case.execute(ExtractMetadataRequest(entry_id=EntryId(entry_id)))


@router.post(
    "/{entry_id}/duplicate",
    response_model=EntryItem,
    status_code=status.HTTP_201_CREATED,
)
async def duplicate_entry(
    entry_id: UUID,
    use_case: DuplicateEntryUseCaseDep,
    request: Optional[DuplicateEntryAPIRequest] = None,
) -> EntryItem:
    """Copy an entry with its tags.

    The copy is titled "<title> (Copy)" unless a new title is given.

    Raises:
        NotFoundError: If the entry does not exist (404)
    """
    new_title = request.new_title if request else None
    return await use_case.execute(
        DuplicateEntryRequest(entry_id=EntryId(entry_id), new_title=new_title)
    )
