"""Search query value objects and query sanitization."""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import field_validator, model_validator

from brainshelf.domain.value.common import ValueObject
from brainshelf.domain.value.identifiers import ProjectId
from brainshelf.domain.value.types import EntryType, PageRequest

# Boolean and grouping operators of the tsquery syntax
_OPERATOR_CHARS = re.compile(r"[&|!()]")


class SearchSort(str, Enum):
    """Result ordering for search."""

    RECENT = "recent"  # updated_at DESC (default)
    RELEVANCE = "relevance"  # weighted rank DESC, then updated_at DESC


def search_tokens(query: Optional[str]) -> list[str]:
    """Split a free-text query into tokens with tsquery operators removed.

    Args:
        query: Raw user query

    Returns:
        Tokens in input order (empty for blank or operator-only queries)
    """
    if not query:
        return []
    return _OPERATOR_CHARS.sub(" ", query).split()


def _quote_lexeme(token: str) -> str:
    escaped = token.replace("\\", "\\\\").replace("'", "''")
    return f"'{escaped}'"


def sanitize_search_query(query: Optional[str]) -> Optional[str]:
    """Turn a raw query into a safe tsquery expression.

    Every token must match (AND). Each token is quoted as a lexeme so any
    remaining tsquery syntax (':', '*', '<->') is treated as text.

    Examples:
        "redis cache"  -> "'redis' & 'cache'"
        "it's (go)"    -> "'it''s' & 'go'"
        "&&&"          -> None

    Args:
        query: Raw user query

    Returns:
        tsquery expression, or None when nothing searchable remains
    """
    tokens = search_tokens(query)
    if not tokens:
        return None
    return " & ".join(_quote_lexeme(token) for token in tokens)


DATE_RANGE_ERROR = "fromDate must be less than or equal to toDate"


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read a naive datetime as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_inverted_range(
    from_date: Optional[datetime], to_date: Optional[datetime]
) -> bool:
    """True when both bounds are set and from_date comes after to_date."""
    from_date, to_date = as_utc(from_date), as_utc(to_date)
    return bool(from_date and to_date and from_date > to_date)


class SearchQuery(ValueObject):
    """Search request: free text plus structural filters.

    Date bounds are inclusive on both ends.
    """

    text: Optional[str] = None
    project_id: Optional[ProjectId] = None
    type: Optional[EntryType] = None
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None
    page: PageRequest = PageRequest()
    sort: SearchSort = SearchSort.RECENT

    @field_validator("from_date", "to_date")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Naive bounds are taken as UTC."""
        return as_utc(value)

    @model_validator(mode="after")
    def validate_date_range(self) -> "SearchQuery":
        """Reject inverted date ranges."""
        if is_inverted_range(self.from_date, self.to_date):
            raise ValueError(DATE_RANGE_ERROR)
        return self

    @property
    def tsquery(self) -> Optional[str]:
        """Sanitized tsquery expression, None for a blank query."""
        return sanitize_search_query(self.text)

    @property
    def tokens(self) -> list[str]:
        """Sanitized tokens of the query text."""
        return search_tokens(self.text)

    @property
    def is_blank(self) -> bool:
        """True when no text matching applies."""
        return not self.tokens

    @property
    def tag_fragment(self) -> Optional[str]:
        """Raw text matched as a substring of tag names, None for a blank query."""
        if self.is_blank:
            return None
        return (self.text or "").strip()
