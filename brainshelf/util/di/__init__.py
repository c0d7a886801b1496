"""Dependency injection module.

Dependencies are plain FastAPI `Depends` providers exposed as `Annotated`
aliases, layered the same way as the code they wire:

- core: settings
- infrastructure: session, event outbox, repositories, metadata worker
- domain: services
- application: use cases

Swapping a component means overriding its providers through
`app.dependency_overrides`.
"""

from brainshelf.util.di.core import SettingsDep, get_settings
from brainshelf.util.di.infrastructure import (
    create_metadata_worker,
    get_event_dispatcher,
)

__all__ = [
    "SettingsDep",
    "create_metadata_worker",
    "get_event_dispatcher",
    "get_settings",
]
