"""Use case dependencies."""

from typing import Annotated

from fastapi import Depends

from brainshelf.application.usecase.entry import (
    BulkDeleteUseCase,
    BulkTagUseCase,
    CreateEntryUseCase,
    DeleteEntryUseCase,
    DuplicateEntryUseCase,
    ExtractMetadataUseCase,
    GetEntryUseCase,
    ListEntriesUseCase,
    UpdateEntryUseCase,
)
from brainshelf.application.usecase.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from brainshelf.application.usecase.search import SearchEntriesUseCase
from brainshelf.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    MergeTagsUseCase,
    RenameTagUseCase,
    TagStatisticsUseCase,
)
from brainshelf.application.usecase.template import (
    CreateTemplateUseCase,
    DeleteTemplateUseCase,
    GetTemplateUseCase,
    ListTemplatesUseCase,
    UpdateTemplateUseCase,
)
from brainshelf.util.di.domain import (
    EntryServiceDep,
    ProjectServiceDep,
    SearchServiceDep,
    TagConsolidationServiceDep,
    TagServiceDep,
    TemplateServiceDep,
)

# ============================================================================
# TAGS
# ============================================================================


def get_list_tags_use_case(tag_service: TagServiceDep) -> ListTagsUseCase:
    return ListTagsUseCase(tag_service)


def get_get_tag_use_case(tag_service: TagServiceDep) -> GetTagUseCase:
    return GetTagUseCase(tag_service)


def get_create_tag_use_case(tag_service: TagServiceDep) -> CreateTagUseCase:
    return CreateTagUseCase(tag_service)


def get_delete_tag_use_case(tag_service: TagServiceDep) -> DeleteTagUseCase:
    return DeleteTagUseCase(tag_service)


def get_tag_statistics_use_case(tag_service: TagServiceDep) -> TagStatisticsUseCase:
    return TagStatisticsUseCase(tag_service)


def get_rename_tag_use_case(
    consolidation_service: TagConsolidationServiceDep,
) -> RenameTagUseCase:
    return RenameTagUseCase(consolidation_service)


def get_merge_tags_use_case(
    consolidation_service: TagConsolidationServiceDep,
) -> MergeTagsUseCase:
    return MergeTagsUseCase(consolidation_service)


ListTagsUseCaseDep = Annotated[ListTagsUseCase, Depends(get_list_tags_use_case)]
GetTagUseCaseDep = Annotated[GetTagUseCase, Depends(get_get_tag_use_case)]
CreateTagUseCaseDep = Annotated[CreateTagUseCase, Depends(get_create_tag_use_case)]
DeleteTagUseCaseDep = Annotated[DeleteTagUseCase, Depends(get_delete_tag_use_case)]
TagStatisticsUseCaseDep = Annotated[
    TagStatisticsUseCase, Depends(get_tag_statistics_use_case)
]
RenameTagUseCaseDep = Annotated[RenameTagUseCase, Depends(get_rename_tag_use_case)]
MergeTagsUseCaseDep = Annotated[MergeTagsUseCase, Depends(get_merge_tags_use_case)]

# ============================================================================
# ENTRIES
# ============================================================================


def get_list_entries_use_case(
    entry_service: EntryServiceDep, project_service: ProjectServiceDep
) -> ListEntriesUseCase:
    return ListEntriesUseCase(entry_service, project_service)


def get_get_entry_use_case(entry_service: EntryServiceDep) -> GetEntryUseCase:
    return GetEntryUseCase(entry_service)


def get_create_entry_use_case(entry_service: EntryServiceDep) -> CreateEntryUseCase:
    return CreateEntryUseCase(entry_service)


def get_update_entry_use_case(entry_service: EntryServiceDep) -> UpdateEntryUseCase:
    return UpdateEntryUseCase(entry_service)


def get_delete_entry_use_case(entry_service: EntryServiceDep) -> DeleteEntryUseCase:
    return DeleteEntryUseCase(entry_service)


def get_duplicate_entry_use_case(
    entry_service: EntryServiceDep,
) -> DuplicateEntryUseCase:
    return DuplicateEntryUseCase(entry_service)


def get_bulk_delete_use_case(entry_service: EntryServiceDep) -> BulkDeleteUseCase:
    return BulkDeleteUseCase(entry_service)


def get_bulk_tag_use_case(entry_service: EntryServiceDep) -> BulkTagUseCase:
    return BulkTagUseCase(entry_service)


def get_extract_metadata_use_case(
    entry_service: EntryServiceDep,
) -> ExtractMetadataUseCase:
    return ExtractMetadataUseCase(entry_service)


ListEntriesUseCaseDep = Annotated[
    ListEntriesUseCase, Depends(get_list_entries_use_case)
]
GetEntryUseCaseDep = Annotated[GetEntryUseCase, Depends(get_get_entry_use_case)]
CreateEntryUseCaseDep = Annotated[
    CreateEntryUseCase, Depends(get_create_entry_use_case)
]
UpdateEntryUseCaseDep = Annotated[
    UpdateEntryUseCase, Depends(get_update_entry_use_case)
]
DeleteEntryUseCaseDep = Annotated[
    DeleteEntryUseCase, Depends(get_delete_entry_use_case)
]
DuplicateEntryUseCaseDep = Annotated[
    DuplicateEntryUseCase, Depends(get_duplicate_entry_use_case)
]
BulkDeleteUseCaseDep = Annotated[BulkDeleteUseCase, Depends(get_bulk_delete_use_case)]
BulkTagUseCaseDep = Annotated[BulkTagUseCase, Depends(get_bulk_tag_use_case)]
ExtractMetadataUseCaseDep = Annotated[
    ExtractMetadataUseCase, Depends(get_extract_metadata_use_case)
]

# ============================================================================
# PROJECTS
# ============================================================================


def get_list_projects_use_case(
    project_service: ProjectServiceDep,
) -> ListProjectsUseCase:
    return ListProjectsUseCase(project_service)


def get_get_project_use_case(project_service: ProjectServiceDep) -> GetProjectUseCase:
    return GetProjectUseCase(project_service)


def get_create_project_use_case(
    project_service: ProjectServiceDep,
) -> CreateProjectUseCase:
    return CreateProjectUseCase(project_service)


def get_update_project_use_case(
    project_service: ProjectServiceDep,
) -> UpdateProjectUseCase:
    return UpdateProjectUseCase(project_service)


def get_delete_project_use_case(
    project_service: ProjectServiceDep,
) -> DeleteProjectUseCase:
    return DeleteProjectUseCase(project_service)


ListProjectsUseCaseDep = Annotated[
    ListProjectsUseCase, Depends(get_list_projects_use_case)
]
GetProjectUseCaseDep = Annotated[GetProjectUseCase, Depends(get_get_project_use_case)]
CreateProjectUseCaseDep = Annotated[
    CreateProjectUseCase, Depends(get_create_project_use_case)
]
UpdateProjectUseCaseDep = Annotated[
    UpdateProjectUseCase, Depends(get_update_project_use_case)
]
DeleteProjectUseCaseDep = Annotated[
    DeleteProjectUseCase, Depends(get_delete_project_use_case)
]

# ============================================================================
# TEMPLATES
# ============================================================================


def get_list_templates_use_case(
    template_service: TemplateServiceDep,
) -> ListTemplatesUseCase:
    return ListTemplatesUseCase(template_service)


def get_get_template_use_case(
    template_service: TemplateServiceDep,
) -> GetTemplateUseCase:
    return GetTemplateUseCase(template_service)


def get_create_template_use_case(
    template_service: TemplateServiceDep,
) -> CreateTemplateUseCase:
    return CreateTemplateUseCase(template_service)


def get_update_template_use_case(
    template_service: TemplateServiceDep,
) -> UpdateTemplateUseCase:
    return UpdateTemplateUseCase(template_service)


def get_delete_template_use_case(
    template_service: TemplateServiceDep,
) -> DeleteTemplateUseCase:
    return DeleteTemplateUseCase(template_service)


ListTemplatesUseCaseDep = Annotated[
    ListTemplatesUseCase, Depends(get_list_templates_use_case)
]
GetTemplateUseCaseDep = Annotated[
    GetTemplateUseCase, Depends(get_get_template_use_case)
]
CreateTemplateUseCaseDep = Annotated[
    CreateTemplateUseCase, Depends(get_create_template_use_case)
]
UpdateTemplateUseCaseDep = Annotated[
    UpdateTemplateUseCase, Depends(get_update_template_use_case)
]
DeleteTemplateUseCaseDep = Annotated[
    DeleteTemplateUseCase, Depends(get_delete_template_use_case)
]

# ============================================================================
# SEARCH
# ============================================================================


def get_search_entries_use_case(
    search_service: SearchServiceDep,
) -> SearchEntriesUseCase:
    return SearchEntriesUseCase(search_service)


SearchEntriesUseCaseDep = Annotated[
    SearchEntriesUseCase, Depends(get_search_entries_use_case)
]
