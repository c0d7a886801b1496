"""Search repository interface."""

from abc import ABC, abstractmethod

from brainshelf.domain.model.entry import Entry
from brainshelf.domain.value import SearchQuery


class SearchRepository(ABC):
    """Full-text search over entries, their metadata and their tags.

    A non-blank query matches an entry when every query token matches its
    own fields, or every token matches its metadata, in any configured
    language, or when one of its tag names contains the query text.
    A blank query (nothing left after sanitization) only applies the
    structural filters.
    """

    @abstractmethod
    async def search(self, query: SearchQuery) -> list[Entry]:
        """Return one page of matching entries.

        Args:
            query: Search query with filters, page and sort order

        Returns:
            Matching entries in the requested order
        """
        pass

    @abstractmethod
    async def count(self, query: SearchQuery) -> int:
        """Count all matching entries, ignoring pagination.

        Args:
            query: Search query

        Returns:
            Total number of matches
        """
        pass
