"""Search use cases."""

from .search_entries import SearchEntriesRequest, SearchEntriesUseCase

__all__ = [
    "SearchEntriesRequest",
    "SearchEntriesUseCase",
]
