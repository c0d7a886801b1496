"""Test doubles and wiring helpers."""

from .events import RecordingDispatcher, RecordingPublisher
from .persistence import (
    inmemory_repositories,
    postgres_repositories,
    use_inmemory_persistence,
)

__all__ = [
    "RecordingDispatcher",
    "RecordingPublisher",
    "inmemory_repositories",
    "postgres_repositories",
    "use_inmemory_persistence",
]
