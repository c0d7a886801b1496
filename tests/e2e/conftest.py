"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from brainshelf.config import MetadataSettings, Settings
from brainshelf.interface.api.app import create_app
from brainshelf.persistence.repository.inmemory import InMemoryDatabase
from brainshelf.util.di import get_event_dispatcher
from tests.di import RecordingDispatcher, use_inmemory_persistence
from tests.harness import TickingClock


@pytest.fixture
def dispatcher():
    """Dispatcher receiving the events of committed requests."""
    return RecordingDispatcher()


@pytest.fixture
def client(dispatcher):
    """Create test client over an in-memory store."""
    app_instance = create_app(
        Settings(environment="test", metadata=MetadataSettings(enabled=False))
    )
    use_inmemory_persistence(app_instance, InMemoryDatabase(clock=TickingClock()))
    app_instance.dependency_overrides[get_event_dispatcher] = lambda: dispatcher
    return TestClient(app_instance)


@pytest.fixture
def project(client):
    """A stored project, as returned by the API."""
    response = client.post("/projects", json={"name": "Research"})
    assert response.status_code == 201
    return response.json()
