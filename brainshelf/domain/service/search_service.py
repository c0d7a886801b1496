"""Search domain service."""

import logfire

from brainshelf.domain.model.entry import Entry
from brainshelf.domain.repository.search import SearchRepository
from brainshelf.domain.value import SearchQuery

from .base import Service


class SearchService(Service):
    """Domain service for searching entries."""

    def __init__(self, search_repository: SearchRepository) -> None:
        """Initialize search service.

        Args:
            search_repository: Search repository
        """
        self.search_repository = search_repository

    async def search(self, query: SearchQuery) -> tuple[list[Entry], int]:
        """Search entries.

        Args:
            query: Search query with filters and page

        Returns:
            (entries on the page, total matches)
        """
        with logfire.span(
            "search_service.search",
            text=query.text,
            tsquery=query.tsquery,
            project_id=str(query.project_id) if query.project_id else None,
            type=query.type.value if query.type else None,
            sort=query.sort.value,
            page=query.page.number,
            page_size=query.page.size,
        ):
            if query.is_blank and query.text:
                logfire.info("Query has no searchable tokens, filtering only")

            total = await self.search_repository.count(query)
            entries = await self.search_repository.search(query) if total else []

            logfire.info("Search finished", count=len(entries), total=total)
            return entries, total
