"""End-to-end tests for entry endpoints."""

from uuid import uuid4

from brainshelf.domain.event import EntryLinkChanged


def note_body(project_id: str, **overrides) -> dict:
    body = {
        "projectId": project_id,
        "title": "Redis notes",
        "type": "note",
        "content": "Use SCAN, not KEYS",
        "tags": ["redis"],
    }
    body.update(overrides)
    return body


def link_body(project_id: str, url: str = "https://redis.io", **overrides) -> dict:
    return note_body(project_id, type="link", content=None, url=url, **overrides)


class TestEntryEndpoints:
    """End-to-end tests for entry API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_create_and_get_entry(self, client, project):
        """A created entry can be fetched with its tags and project name."""
        # Act
        created = client.post("/entries", json=note_body(project["id"]))
        fetched = client.get(f"/entries/{created.json()['id']}")

        # Assert
        assert created.status_code == 201
        assert fetched.status_code == 200
        body = fetched.json()
        assert body["title"] == "Redis notes"
        assert body["tags"] == ["redis"]
        assert body["projectId"] == project["id"]
        assert body["projectName"] == "Research"
        assert body["metadata"] is None

    def test_create_entry_for_unknown_project_returns_400(self, client):
        """The missing project is reported as a field error."""
        # Act
        response = client.post("/entries", json=note_body(str(uuid4())))

        # Assert
        assert response.status_code == 400
        assert "projectId" in response.json()["errors"]

    def test_create_entry_with_missing_title_returns_400(self, client, project):
        """Request validation errors are keyed by camelCase field."""
        # Arrange
        body = note_body(project["id"])
        del body["title"]

        # Act
        response = client.post("/entries", json=body)

        # Assert
        assert response.status_code == 400
        assert response.headers["content-type"] == "application/problem+json"
        assert "title" in response.json()["errors"]

    def test_create_link_without_url_returns_400(self, client, project):
        """Type rules are enforced as validation errors."""
        # Act
        response = client.post("/entries", json=link_body(project["id"], url=None))

        # Assert
        assert response.status_code == 400
        assert response.json()["title"] == "Validation Error"

    def test_create_link_dispatches_event_after_commit(
        self, client, project, dispatcher
    ):
        """Link entries queue metadata extraction."""
        # Act
        response = client.post("/entries", json=link_body(project["id"]))

        # Assert
        assert response.status_code == 201
        assert len(dispatcher.events) == 1
        event = dispatcher.events[0]
        assert isinstance(event, EntryLinkChanged)
        assert str(event.entry_id) == response.json()["id"]
        assert event.url == "https://redis.io"

    def test_failed_request_dispatches_nothing(self, client, project, dispatcher):
        """Events of failed requests are dropped."""
        # Act
        response = client.post(
            "/entries", json=link_body(project["id"], tags=["x" * 101])
        )

        # Assert
        assert response.status_code == 400
        assert dispatcher.events == []

    def test_update_entry_replaces_fields(self, client, project):
        """PUT replaces title and tags."""
        # Arrange
        entry = client.post("/entries", json=note_body(project["id"])).json()

        # Act
        response = client.put(
            f"/entries/{entry['id']}",
            json=note_body(project["id"], title="Valkey notes", tags=["valkey"]),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["title"] == "Valkey notes"
        assert response.json()["tags"] == ["valkey"]
        assert response.json()["createdAt"] == entry["createdAt"]

    def test_update_unknown_entry_returns_404(self, client, project):
        """Updating an entry that does not exist is 404."""
        # Act
        response = client.put(f"/entries/{uuid4()}", json=note_body(project["id"]))

        # Assert
        assert response.status_code == 404

    def test_delete_entry(self, client, project):
        """Deleted entries are gone."""
        # Arrange
        entry = client.post("/entries", json=note_body(project["id"])).json()

        # Act
        response = client.delete(f"/entries/{entry['id']}")

        # Assert
        assert response.status_code == 204
        assert client.get(f"/entries/{entry['id']}").status_code == 404

    def test_list_entries_filters_and_clamps_paging(self, client, project):
        """Tag filters match any tag; bad paging is clamped."""
        # Arrange
        client.post("/entries", json=note_body(project["id"], tags=["go"]))
        client.post("/entries", json=note_body(project["id"], tags=["python"]))
        client.post("/entries", json=note_body(project["id"], tags=["rust"]))

        # Act
        response = client.get(
            "/entries", params={"tags": "go, python", "pageNumber": 0, "pageSize": 0}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["totalCount"] == 2
        assert body["pageNumber"] == 1
        assert body["pageSize"] == 1
        assert body["totalPages"] == 2
        assert len(body["items"]) == 1

    def test_duplicate_entry(self, client, project):
        """The copy gets a "(Copy)" title unless one is given."""
        # Arrange
        entry = client.post("/entries", json=note_body(project["id"])).json()

        # Act
        default_copy = client.post(f"/entries/{entry['id']}/duplicate")
        named_copy = client.post(
            f"/entries/{entry['id']}/duplicate", json={"newTitle": "Redis v2"}
        )

        # Assert
        assert default_copy.status_code == 201
        assert default_copy.json()["title"] == "Redis notes (Copy)"
        assert default_copy.json()["tags"] == ["redis"]
        assert named_copy.json()["title"] == "Redis v2"

    def test_bulk_delete_reports_missing_entries(self, client, project):
        """Missing entries are reported, the rest deleted."""
        # Arrange
        entry = client.post("/entries", json=note_body(project["id"])).json()
        missing = str(uuid4())

        # Act
        response = client.post(
            "/entries/bulk-delete", json={"entryIds": [entry["id"], missing]}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["processed"] == 1
        assert response.json()["requested"] == 2
        assert missing in response.json()["errors"][0]

    def test_bulk_delete_requires_ids(self, client):
        """An empty id list is rejected."""
        # Act
        response = client.post("/entries/bulk-delete", json={"entryIds": []})

        # Assert
        assert response.status_code == 400
        assert "entryIds" in response.json()["errors"]

    def test_bulk_tag(self, client, project):
        """Tags are added to every listed entry."""
        # Arrange
        entry = client.post("/entries", json=note_body(project["id"])).json()

        # Act
        response = client.post(
            "/entries/bulk-tag", json={"entryIds": [entry["id"]], "tags": ["Cache"]}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["processed"] == 1
        tags = client.get(f"/entries/{entry['id']}").json()["tags"]
        assert tags == ["cache", "redis"]

    def test_extract_metadata_for_link(self, client, project, dispatcher):
        """A refresh is accepted and queued."""
        # Arrange
        entry = client.post("/entries", json=link_body(project["id"])).json()
        dispatcher.events.clear()

        # Act
        response = client.post(f"/entries/{entry['id']}/extract-metadata")

        # Assert
        assert response.status_code == 202
        assert response.json()["status"] == "queued"
        assert [e.url for e in dispatcher.events] == ["https://redis.io"]

    def test_extract_metadata_for_note_returns_400(self, client, project):
        """Only link entries have metadata."""
        # Arrange
        entry = client.post("/entries", json=note_body(project["id"])).json()

        # Act
        response = client.post(f"/entries/{entry['id']}/extract-metadata")

        # Assert
        assert response.status_code == 400
        assert response.json()["title"] == "Invalid Operation"
