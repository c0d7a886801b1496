"""End-to-end tests for project, template and health endpoints."""

from uuid import uuid4


class TestProjectEndpoints:
    """End-to-end tests for project API endpoints."""

    def test_create_project_defaults(self, client):
        """Projects get the default color."""
        # Act
        response = client.post("/projects", json={"name": "Research"})

        # Assert
        assert response.status_code == 201
        assert response.json()["color"] == "#3B82F6"

    def test_create_project_with_invalid_color_returns_400(self, client):
        """Colors must be hex codes."""
        # Act
        response = client.post("/projects", json={"name": "Research", "color": "red"})

        # Assert
        assert response.status_code == 400

    def test_create_project_without_name_returns_400(self, client):
        """Names are required."""
        # Act
        response = client.post("/projects", json={"name": ""})

        # Assert
        assert response.status_code == 400
        assert "name" in response.json()["errors"]

    def test_list_projects_is_paged(self, client):
        """Listing reports totals and honours the page size."""
        # Arrange
        for name in ("One", "Two", "Three"):
            client.post("/projects", json={"name": name})

        # Act
        response = client.get("/projects", params={"pageSize": 2})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["totalCount"] == 3
        assert body["totalPages"] == 2
        assert [p["name"] for p in body["items"]] == ["Three", "Two"]

    def test_update_project(self, client, project):
        """PUT replaces name and description."""
        # Act
        response = client.put(
            f"/projects/{project['id']}",
            json={"name": "Papers", "description": "Read later"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["name"] == "Papers"
        assert response.json()["color"] == project["color"]

    def test_project_entries(self, client, project):
        """A project's entries are listed under it."""
        # Arrange
        client.post(
            "/entries",
            json={
                "projectId": project["id"],
                "title": "Note",
                "type": "note",
                "content": "body",
            },
        )

        # Act
        response = client.get(f"/projects/{project['id']}/entries")

        # Assert
        assert response.status_code == 200
        assert response.json()["totalCount"] == 1

    def test_entries_of_unknown_project_returns_404(self, client):
        """Listing entries of a missing project is 404."""
        # Act
        response = client.get(f"/projects/{uuid4()}/entries")

        # Assert
        assert response.status_code == 404

    def test_delete_project_deletes_entries(self, client, project):
        """Entries go with their project."""
        # Arrange
        entry = client.post(
            "/entries",
            json={
                "projectId": project["id"],
                "title": "Note",
                "type": "note",
                "content": "body",
            },
        ).json()

        # Act
        response = client.delete(f"/projects/{project['id']}")

        # Assert
        assert response.status_code == 204
        assert client.get(f"/projects/{project['id']}").status_code == 404
        assert client.get(f"/entries/{entry['id']}").status_code == 404


class TestTemplateEndpoints:
    """End-to-end tests for template API endpoints."""

    def test_template_lifecycle(self, client, project):
        """Templates can be created, listed, updated and deleted."""
        # Arrange
        created = client.post(
            "/templates",
            json={
                "name": "Bookmark",
                "type": "link",
                "tags": ["Reading"],
                "isDefault": True,
            },
        )
        template_id = created.json()["id"]
        client.post(
            "/templates",
            json={"name": "Snippet", "type": "code", "projectId": project["id"]},
        )

        # Act
        all_templates = client.get("/templates").json()
        for_project = client.get(
            "/templates", params={"projectId": project["id"]}
        ).json()
        defaults = client.get("/templates/default").json()
        updated = client.put(
            f"/templates/{template_id}",
            json={"name": "Article", "type": "link", "isDefault": False},
        )
        deleted = client.delete(f"/templates/{template_id}")

        # Assert
        assert created.status_code == 201
        assert created.json()["tags"] == ["reading"]
        assert {t["name"] for t in all_templates} == {"Bookmark", "Snippet"}
        assert [t["name"] for t in for_project] == ["Bookmark", "Snippet"]
        assert [t["name"] for t in defaults] == ["Bookmark"]
        assert updated.status_code == 200
        assert updated.json()["name"] == "Article"
        assert deleted.status_code == 204
        assert client.get(f"/templates/{template_id}").status_code == 404

    def test_template_with_invalid_type_returns_400(self, client):
        """Types are one of note, link, code and task."""
        # Act
        response = client.post("/templates", json={"name": "X", "type": "setting"})

        # Assert
        assert response.status_code == 400
        assert "type" in response.json()["errors"]


class TestHealthEndpoint:
    """End-to-end tests for the health endpoint."""

    def test_health(self, client):
        """The service reports itself healthy."""
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "gitSha" in body
