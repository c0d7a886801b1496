"""In-memory implementation of Search repository for testing.

Matches whole folded tokens (no stemming) with the same field weights the
Postgres search vectors use.
"""

from brainshelf.domain.model.entry import Entry
from brainshelf.domain.repository.search import SearchRepository
from brainshelf.domain.value import SearchQuery, SearchSort

from .database import InMemoryDatabase, fold, fold_tokens

# ts_rank default weights for labels A, B, C, D
WEIGHT_A = 1.0
WEIGHT_B = 0.4
WEIGHT_C = 0.2
WEIGHT_D = 0.1


def _entry_fields(entry: Entry) -> list[tuple[set[str], float]]:
    return [
        (set(fold_tokens(entry.title)), WEIGHT_A),
        (set(fold_tokens(entry.description)), WEIGHT_B),
        (set(fold_tokens(entry.content)), WEIGHT_B),
        (set(fold_tokens(entry.url)), WEIGHT_C),
    ]


def _metadata_fields(entry: Entry) -> list[tuple[set[str], float]]:
    metadata = entry.metadata
    if metadata is None:
        return []
    return [
        (set(fold_tokens(metadata.title)), WEIGHT_A),
        (set(fold_tokens(metadata.description)), WEIGHT_B),
        (set(fold_tokens(metadata.keywords)), WEIGHT_C),
        (set(fold_tokens(metadata.author)), WEIGHT_D),
    ]


def _matches_all(fields: list[tuple[set[str], float]], tokens: list[str]) -> bool:
    vocabulary = set().union(*(words for words, _ in fields)) if fields else set()
    return bool(tokens) and all(token in vocabulary for token in tokens)


def _rank(fields: list[tuple[set[str], float]], tokens: list[str]) -> float:
    return sum(weight for words, weight in fields for token in tokens if token in words)


class InMemorySearchRepository(SearchRepository):
    """In-memory implementation of SearchRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    def _query_tokens(self, query: SearchQuery) -> list[str]:
        return [folded for token in query.tokens for folded in fold_tokens(token)]

    def _matches(self, entry: Entry, query: SearchQuery, tokens: list[str]) -> bool:
        if query.project_id and entry.project_id != query.project_id:
            return False
        if query.type and entry.type != query.type:
            return False
        if query.from_date and entry.created_at < query.from_date:
            return False
        if query.to_date and entry.created_at > query.to_date:
            return False
        if query.is_blank:
            return True

        fragment = fold(query.tag_fragment)
        return (
            _matches_all(_entry_fields(entry), tokens)
            or _matches_all(_metadata_fields(entry), tokens)
            or any(fragment in fold(name.root) for name in entry.tag_names)
        )

    def _ordered(self, query: SearchQuery) -> list[Entry]:
        tokens = self._query_tokens(query)
        entries = [
            entry
            for entry in (
                self.database.hydrate(e) for e in self.database.entries.values()
            )
            if self._matches(entry, query, tokens)
        ]

        entries.sort(key=lambda e: str(e.id))
        entries.sort(key=lambda e: e.updated_at, reverse=True)
        if query.sort == SearchSort.RELEVANCE and not query.is_blank:
            entries.sort(
                key=lambda e: _rank(_entry_fields(e), tokens)
                + _rank(_metadata_fields(e), tokens),
                reverse=True,
            )
        return entries

    async def search(self, query: SearchQuery) -> list[Entry]:
        """Find one page of matching entries."""
        offset = query.page.offset
        return self._ordered(query)[offset : offset + query.page.size]

    async def count(self, query: SearchQuery) -> int:
        """Count all matching entries."""
        return len(self._ordered(query))
