"""End-to-end tests for the search endpoint."""

import pytest


def add_note(client, project_id: str, title: str, tags=()) -> dict:
    response = client.post(
        "/entries",
        json={
            "projectId": project_id,
            "title": title,
            "type": "note",
            "content": "plain body",
            "tags": list(tags),
        },
    )
    assert response.status_code == 201
    return response.json()


class TestSearchEndpoint:
    """End-to-end tests for GET /search."""

    def test_search_by_text_within_project(self, client, project):
        """Only entries matching the text are returned."""
        # Arrange
        add_note(client, project["id"], "Redis notes", ["cache", "db"])
        go = add_note(client, project["id"], "Go concurrency", ["go"])

        # Act
        response = client.get(
            "/search", params={"q": "go", "projectId": project["id"]}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert [e["id"] for e in body["items"]] == [go["id"]]
        assert body["totalCount"] == 1

    def test_blank_query_lists_recently_updated_first(self, client, project):
        """Without text, filters apply and the newest update comes first."""
        # Arrange
        redis = add_note(client, project["id"], "Redis notes")
        go = add_note(client, project["id"], "Go concurrency")

        # Act
        response = client.get("/search", params={"type": "note"})

        # Assert
        assert [e["id"] for e in response.json()["items"]] == [go["id"], redis["id"]]

    def test_relevance_sort(self, client, project):
        """Relevance ranks title matches above body matches."""
        # Arrange
        titled = add_note(client, project["id"], "Plain body")
        add_note(client, project["id"], "Something else")

        # Act
        response = client.get("/search", params={"q": "plain", "sort": "relevance"})

        # Assert
        assert response.json()["items"][0]["id"] == titled["id"]

    @pytest.mark.parametrize(
        "params, field",
        [
            ({"pageSize": 0}, "pageSize"),
            ({"pageSize": 101}, "pageSize"),
            ({"pageNumber": 0}, "pageNumber"),
        ],
    )
    def test_out_of_range_paging_returns_400(self, client, params, field):
        """Search validates paging instead of clamping it."""
        # Act
        response = client.get("/search", params=params)

        # Assert
        assert response.status_code == 400
        assert response.headers["content-type"] == "application/problem+json"
        assert field in response.json()["errors"]

    def test_inverted_date_range_returns_400(self, client):
        """fromDate must not be after toDate."""
        # Act
        response = client.get(
            "/search",
            params={
                "fromDate": "2024-02-01T00:00:00Z",
                "toDate": "2024-01-01T00:00:00Z",
            },
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["errors"]["fromDate"] == [
            "fromDate must be less than or equal to toDate"
        ]

    @pytest.mark.parametrize(
        "params", [{"type": "setting"}, {"sort": "best"}, {"projectId": "nope"}]
    )
    def test_malformed_filters_return_400(self, client, params):
        """Unknown enum values and malformed ids are rejected."""
        # Act
        response = client.get("/search", params=params)

        # Assert
        assert response.status_code == 400

    def test_naive_dates_are_accepted(self, client, project):
        """Dates without an offset are read as UTC."""
        # Arrange
        add_note(client, project["id"], "Anything")

        # Act
        response = client.get(
            "/search", params={"fromDate": "2000-01-01T00:00:00", "q": "&&&"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["totalCount"] == 1
