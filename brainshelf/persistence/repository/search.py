"""PostgreSQL full-text search over entries, their metadata and their tags.

Entry and metadata rows carry a weighted `search_vector` per configured
language, maintained by triggers over `unaccent(...)` text. The query is
sanitized into a tsquery, unaccented, and matched against both vectors in
every language. A tag whose name contains the raw query also matches.
"""

from typing import Optional

import logfire
from sqlalchemy import (
    ColumnElement,
    Select,
    cast,
    exists,
    false,
    func,
    or_,
    select,
)
from sqlalchemy.dialects.postgresql import REGCONFIG
from sqlalchemy.ext.asyncio import AsyncSession

from brainshelf.domain.model.entry import Entry
from brainshelf.domain.repository.search import SearchRepository
from brainshelf.domain.value import SearchQuery, SearchSort
from brainshelf.persistence.repository.entry import load_entries
from brainshelf.persistence.tables import (
    entries_table,
    entry_metadata_table,
    entry_tags_table,
    tags_table,
)

DEFAULT_LANGUAGES = ("english", "russian")


def _tsquery(language: str, tsquery: str) -> ColumnElement:
    return func.to_tsquery(cast(language, REGCONFIG), func.unaccent(tsquery))


def _like_pattern(fragment: str) -> str:
    """Substring LIKE pattern with '/' as the escape character."""
    escaped = fragment.replace("/", "//").replace("%", "/%").replace("_", "/_")
    return f"%{escaped}%"


def _text_match(query: SearchQuery, languages: tuple[str, ...]) -> ColumnElement:
    """Entry vector OR metadata vector (any language) OR tag substring."""
    tsquery = query.tsquery
    if tsquery is None:
        return false()

    clauses: list[ColumnElement] = []
    for language in languages:
        tsq = _tsquery(language, tsquery)
        clauses.append(entries_table.c.search_vector.bool_op("@@")(tsq))
        clauses.append(
            exists().where(
                entry_metadata_table.c.entry_id == entries_table.c.id,
                entry_metadata_table.c.search_vector.bool_op("@@")(tsq),
            )
        )

    clauses.append(
        exists().where(
            entry_tags_table.c.entry_id == entries_table.c.id,
            entry_tags_table.c.tag_id == tags_table.c.id,
            func.unaccent(tags_table.c.name).ilike(
                func.unaccent(_like_pattern(query.tag_fragment)), escape="/"
            ),
        )
    )
    return or_(*clauses)


def build_search_filters(
    query: SearchQuery, languages: tuple[str, ...] = DEFAULT_LANGUAGES
) -> list[ColumnElement]:
    """WHERE clauses for a search: structural filters AND the text match.

    Args:
        query: Search query
        languages: Text search configurations to match in

    Returns:
        Clauses to AND together
    """
    filters: list[ColumnElement] = []
    if query.project_id:
        filters.append(entries_table.c.project_id == query.project_id)
    if query.type:
        filters.append(entries_table.c.type == query.type.value)
    if query.from_date:
        filters.append(entries_table.c.created_at >= query.from_date)
    if query.to_date:
        filters.append(entries_table.c.created_at <= query.to_date)
    if not query.is_blank:
        filters.append(_text_match(query, languages))
    return filters


def _relevance(tsquery: str, languages: tuple[str, ...]) -> ColumnElement:
    """Greatest per-language sum of entry rank and metadata rank."""
    metadata = entry_metadata_table.alias("rank_metadata")
    ranks = []
    for language in languages:
        tsq = _tsquery(language, tsquery)
        metadata_rank = (
            select(func.ts_rank(metadata.c.search_vector, tsq))
            .where(metadata.c.entry_id == entries_table.c.id)
            .scalar_subquery()
        )
        ranks.append(
            func.ts_rank(entries_table.c.search_vector, tsq)
            + func.coalesce(metadata_rank, 0)
        )
    return func.greatest(*ranks) if len(ranks) > 1 else ranks[0]


def build_search_statement(
    query: SearchQuery, languages: tuple[str, ...] = DEFAULT_LANGUAGES
) -> Select:
    """SELECT of the matching entry rows for one page, in result order."""
    stmt = select(entries_table).where(*build_search_filters(query, languages))

    if query.sort == SearchSort.RELEVANCE and not query.is_blank:
        stmt = stmt.order_by(
            _relevance(query.tsquery, languages).desc(),
            entries_table.c.updated_at.desc(),
            entries_table.c.id,
        )
    else:
        stmt = stmt.order_by(entries_table.c.updated_at.desc(), entries_table.c.id)

    return stmt.limit(query.page.size).offset(query.page.offset)


def build_count_statement(
    query: SearchQuery, languages: tuple[str, ...] = DEFAULT_LANGUAGES
) -> Select:
    """SELECT COUNT(*) of all matching entries."""
    return (
        select(func.count())
        .select_from(entries_table)
        .where(*build_search_filters(query, languages))
    )


class PostgresSearchRepository(SearchRepository):
    """PostgreSQL implementation of SearchRepository."""

    def __init__(
        self,
        session: AsyncSession,
        languages: Optional[list[str]] = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            languages: Text search configurations, english and russian by default
        """
        self.session = session
        self.languages = tuple(languages) if languages else DEFAULT_LANGUAGES

    async def search(self, query: SearchQuery) -> list[Entry]:
        """Find one page of matching entries."""
        with logfire.span(
            "search_repository.search",
            tsquery=query.tsquery,
            sort=query.sort.value,
            page=query.page.number,
            page_size=query.page.size,
        ):
            result = await self.session.execute(
                build_search_statement(query, self.languages)
            )
            entries = await load_entries(self.session, result.fetchall())
            logfire.info("Search results", count=len(entries))
            return entries

    async def count(self, query: SearchQuery) -> int:
        """Count all matching entries."""
        with logfire.span("search_repository.count", tsquery=query.tsquery):
            return (
                await self.session.scalar(build_count_statement(query, self.languages))
                or 0
            )
