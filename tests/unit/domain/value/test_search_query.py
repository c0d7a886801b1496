"""Unit tests for search query sanitization."""

from datetime import datetime, timezone

import pytest

from brainshelf.domain.value import (
    SearchQuery,
    is_inverted_range,
    sanitize_search_query,
    search_tokens,
)


class TestSanitizeSearchQuery:
    """Tests for sanitize_search_query."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("redis cache", "'redis' & 'cache'"),
            ("  redis   ", "'redis'"),
            ("it's (go)", "'it''s' & 'go'"),
            ("a|b !c", "'a' & 'b' & 'c'"),
            ("back\\slash", "'back\\\\slash'"),
            ("fts:* <->", "'fts:*' & '<->'"),
        ],
    )
    def test_tokens_are_quoted_and_and_combined(self, raw, expected):
        """Each word becomes a quoted lexeme joined with &."""
        assert sanitize_search_query(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "&&&", "(|)!"])
    def test_blank_or_operator_only_yields_none(self, raw):
        """Nothing searchable is left."""
        assert sanitize_search_query(raw) is None

    def test_search_tokens_keep_input_order(self):
        """Operators split words but are never kept."""
        assert search_tokens("go&rust|zig") == ["go", "rust", "zig"]


class TestSearchQuery:
    """Tests for the SearchQuery value object."""

    def test_blank_query_has_no_tag_fragment(self):
        """Operator-only text neither matches text nor tags."""
        query = SearchQuery(text="&&&")

        assert query.is_blank
        assert query.tsquery is None
        assert query.tag_fragment is None

    def test_tag_fragment_is_trimmed_raw_text(self):
        """Tags are matched against the text as typed."""
        assert SearchQuery(text="  C++ ").tag_fragment == "C++"

    def test_naive_bounds_are_taken_as_utc(self):
        """Dates without an offset are read as UTC."""
        query = SearchQuery(from_date=datetime(2024, 5, 1))

        assert query.from_date == datetime(2024, 5, 1, tzinfo=timezone.utc)

    def test_equal_bounds_are_allowed(self):
        """A single instant is a valid range."""
        moment = datetime(2024, 5, 1, tzinfo=timezone.utc)

        query = SearchQuery(from_date=moment, to_date=moment)

        assert query.from_date == query.to_date


class TestIsInvertedRange:
    """Tests for is_inverted_range."""

    @pytest.mark.parametrize(
        "from_date, to_date, expected",
        [
            (datetime(2024, 2, 1), datetime(2024, 1, 1), True),
            (datetime(2024, 1, 1), datetime(2024, 2, 1), False),
            (datetime(2024, 2, 1), None, False),
            # Naive and aware bounds compare as UTC
            (
                datetime(2024, 1, 1, 12),
                datetime(2024, 1, 1, 11, tzinfo=timezone.utc),
                True,
            ),
        ],
    )
    def test_detects_inverted_bounds(self, from_date, to_date, expected):
        """Only a from date after the to date is inverted."""
        assert is_inverted_range(from_date, to_date) is expected
