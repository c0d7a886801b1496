"""Unit tests for problem-details error rendering."""

import json

import pytest

from brainshelf.interface.api.error import (
    PROBLEM_JSON,
    error_map,
    field_path,
    problem_response,
)


class TestFieldPath:
    """Tests for field_path."""

    @pytest.mark.parametrize(
        "loc, expected",
        [
            (("body", "project_id"), "projectId"),
            (("query", "pageSize"), "pageSize"),
            (("body", "tags", 2), "tags.2"),
            (("from_date",), "fromDate"),
            (("body",), "request"),
            ((), "request"),
        ],
    )
    def test_renders_camel_case_dotted_path(self, loc, expected):
        """Parameter sources are dropped and names camelCased."""
        assert field_path(loc) == expected


class TestErrorMap:
    """Tests for error_map."""

    def test_groups_messages_by_field(self):
        """Several errors on one field are kept together."""
        errors = [
            {"loc": ("body", "title"), "msg": "too short"},
            {"loc": ("body", "title"), "msg": "not allowed"},
            {"loc": ("body", "type"), "msg": "invalid"},
        ]

        assert error_map(errors) == {
            "title": ["too short", "not allowed"],
            "type": ["invalid"],
        }

    def test_strips_value_error_prefix(self):
        """Messages from custom validators read as plain sentences."""
        errors = [{"loc": ("body", "color"), "msg": "Value error, bad color"}]

        assert error_map(errors) == {"color": ["bad color"]}


class TestProblemResponse:
    """Tests for problem_response."""

    def test_body_and_media_type(self):
        """Bodies carry status, title and detail as problem+json."""
        response = problem_response(404, "Not Found", "Tag not found: x")

        assert response.status_code == 404
        assert response.media_type == PROBLEM_JSON
        assert json.loads(response.body) == {
            "status": 404,
            "title": "Not Found",
            "detail": "Tag not found: x",
        }

    def test_errors_included_only_when_present(self):
        """Field errors appear for validation failures."""
        response = problem_response(400, "Validation Error", "bad", {"q": ["x"]})

        assert json.loads(response.body)["errors"] == {"q": ["x"]}
