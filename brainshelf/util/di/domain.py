"""Domain service dependencies."""

from typing import Annotated

from fastapi import Depends

from brainshelf.domain.service import (
    EntryService,
    ProjectService,
    SearchService,
    TagConsolidationService,
    TagService,
    TemplateService,
)
from brainshelf.util.di.infrastructure import (
    EntryRepositoryDep,
    EventOutboxDep,
    ProjectRepositoryDep,
    SearchRepositoryDep,
    TagRepositoryDep,
    TemplateRepositoryDep,
)


def get_tag_service(tag_repository: TagRepositoryDep) -> TagService:
    """Provide Tag service."""
    return TagService(tag_repository)


TagServiceDep = Annotated[TagService, Depends(get_tag_service)]


def get_tag_consolidation_service(
    tag_repository: TagRepositoryDep,
) -> TagConsolidationService:
    """Provide Tag consolidation service."""
    return TagConsolidationService(tag_repository)


def get_project_service(project_repository: ProjectRepositoryDep) -> ProjectService:
    """Provide Project service."""
    return ProjectService(project_repository)


def get_entry_service(
    entry_repository: EntryRepositoryDep,
    project_repository: ProjectRepositoryDep,
    tag_service: TagServiceDep,
    outbox: EventOutboxDep,
) -> EntryService:
    """Provide Entry service; its events go through the request outbox."""
    return EntryService(
        entry_repository=entry_repository,
        project_repository=project_repository,
        tag_service=tag_service,
        event_publisher=outbox,
    )


def get_template_service(
    template_repository: TemplateRepositoryDep,
    project_repository: ProjectRepositoryDep,
) -> TemplateService:
    """Provide Template service."""
    return TemplateService(template_repository, project_repository)


def get_search_service(search_repository: SearchRepositoryDep) -> SearchService:
    """Provide Search service."""
    return SearchService(search_repository)


TagConsolidationServiceDep = Annotated[
    TagConsolidationService, Depends(get_tag_consolidation_service)
]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
EntryServiceDep = Annotated[EntryService, Depends(get_entry_service)]
TemplateServiceDep = Annotated[TemplateService, Depends(get_template_service)]
SearchServiceDep = Annotated[SearchService, Depends(get_search_service)]
