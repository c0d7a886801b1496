"""Infrastructure dependencies."""

from .metadata import create_metadata_worker, postgres_metadata_scope
from .persistence import (
    EntryRepositoryDep,
    EventOutboxDep,
    ProjectRepositoryDep,
    SearchRepositoryDep,
    SessionDep,
    TagRepositoryDep,
    TemplateRepositoryDep,
    get_entry_repository,
    get_event_dispatcher,
    get_event_outbox,
    get_project_repository,
    get_search_repository,
    get_session,
    get_session_factory,
    get_tag_repository,
    get_template_repository,
)

__all__ = [
    "EntryRepositoryDep",
    "EventOutboxDep",
    "ProjectRepositoryDep",
    "SearchRepositoryDep",
    "SessionDep",
    "TagRepositoryDep",
    "TemplateRepositoryDep",
    "create_metadata_worker",
    "get_entry_repository",
    "get_event_dispatcher",
    "get_event_outbox",
    "get_project_repository",
    "get_search_repository",
    "get_session",
    "get_session_factory",
    "get_tag_repository",
    "get_template_repository",
    "postgres_metadata_scope",
]
