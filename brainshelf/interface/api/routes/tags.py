"""Tag routes."""

from typing import Optional
from uuid import UUID

import logfire
from fastapi import APIRouter, Response, status

from brainshelf.application.usecase.base import CamelModel
from brainshelf.application.usecase.tag import (
    CreateTagRequest,
    DeleteTagRequest,
    GetTagRequest,
    ListTagsRequest,
    MergeTagsRequest,
    MergeTagsResponse,
    RenameTagRequest,
    TagItem,
    TagListView,
    TagStatisticsResponse,
    TagUsageItem,
)
from brainshelf.domain.value import TagId
from brainshelf.util.di.application import (
    CreateTagUseCaseDep,
    DeleteTagUseCaseDep,
    GetTagUseCaseDep,
    ListTagsUseCaseDep,
    MergeTagsUseCaseDep,
    RenameTagUseCaseDep,
    TagStatisticsUseCaseDep,
)

router = APIRouter(prefix="/tags", tags=["tags"])


class RenameTagAPIRequest(CamelModel):
    """API request for renaming a tag."""

    new_name: str


@router.get(
    "",
    response_model=list[TagUsageItem],
    summary="List all tags",
    description="All tags with usage counts, ordered by name.",
)
async def list_tags(
    use_case: ListTagsUseCaseDep, search: Optional[str] = None
) -> list[TagUsageItem]:
    """List all tags.

    Args:
        use_case: List tags use case (injected)
        search: Optional case-insensitive name fragment

    Returns:
        Tags with usage

    Example:
        GET /tags?search=py
    """
    with logfire.span("api.list_tags", search=search):
        request = ListTagsRequest(view=TagListView.ALL, search=search)
        return await use_case.execute(request)


@router.get("/popular", response_model=list[TagUsageItem])
async def list_popular_tags(
    use_case: ListTagsUseCaseDep,
    limit: int = 20,
) -> list[TagUsageItem]:
    """Most used tags first."""
    return await use_case.execute(
        ListTagsRequest(view=TagListView.POPULAR, limit=limit)
    )


@router.get("/recent", response_model=list[TagUsageItem])
async def list_recent_tags(
    use_case: ListTagsUseCaseDep,
    limit: int = 20,
) -> list[TagUsageItem]:
    """Tags on the most recently updated entries first."""
    return await use_case.execute(ListTagsRequest(view=TagListView.RECENT, limit=limit))


@router.get("/unused", response_model=list[TagUsageItem])
async def list_unused_tags(use_case: ListTagsUseCaseDep) -> list[TagUsageItem]:
    """Tags attached to no entry."""
    return await use_case.execute(ListTagsRequest(view=TagListView.UNUSED))


@router.get("/statistics", response_model=TagStatisticsResponse)
async def tag_statistics(use_case: TagStatisticsUseCaseDep) -> TagStatisticsResponse:
    """Tag totals plus most used, recently used and unused tags."""
    return await use_case.execute()


@router.get("/{tag_id}", response_model=TagUsageItem)
async def get_tag(tag_id: UUID, use_case: GetTagUseCaseDep) -> TagUsageItem:
    """Get a tag with its usage.

    Raises:
        NotFoundError: If the tag does not exist (404)
    """
    return await use_case.execute(GetTagRequest(tag_id=TagId(tag_id)))


@router.post("", response_model=TagItem, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: CreateTagRequest, use_case: CreateTagUseCaseDep
) -> TagItem:
    """Create a tag, or return the existing tag with the same normalized name.

    Args:
        request: Tag name
        use_case: Create tag use case (injected)

    Returns:
        The tag

    Raises:
        ValidationError: If the name is blank or invalid (400)
    """
    return await use_case.execute(request)


@router.put("/{tag_id}/rename", response_model=TagItem)
async def rename_tag(
    tag_id: UUID,
    request: RenameTagAPIRequest,
    use_case: RenameTagUseCaseDep,
) -> TagItem:
    """Rename a tag.

    Args:
        tag_id: Tag UUID
        request: New name
        use_case: Rename tag use case (injected)

    Returns:
        The renamed tag

    Raises:
        NotFoundError: If the tag does not exist (404)
        ConflictError: If another tag already has the name (409)
        ValidationError: If the new name is invalid (400)
    """
    with logfire.span("api.rename_tag", tag_id=str(tag_id)):
        return await use_case.execute(
            RenameTagRequest(tag_id=TagId(tag_id), new_name=request.new_name)
        )


@router.post("/merge", response_model=MergeTagsResponse)
async def merge_tags(
    request: MergeTagsRequest, use_case: MergeTagsUseCaseDep
) -> MergeTagsResponse:
    """Merge the source tag into the target tag.

    Every entry tagged with the source ends up tagged with the target, and
    the source tag is deleted.

    Raises:
        NotFoundError: If either tag does not exist (404)
        InvalidOperationError: If source and target are the same tag (400)
    """
    with logfire.span(
        "api.merge_tags",
        source_tag_id=str(request.source_tag_id),
        target_tag_id=str(request.target_tag_id),
    ):
        return await use_case.execute(request)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tag_id: UUID, use_case: DeleteTagUseCaseDep) -> Response:
    """Delete a tag and its entry associations.

    Raises:
        NotFoundError: If the tag does not exist (404)
    """
    await use_case.execute(DeleteTagRequest(tag_id=TagId(tag_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
