"""Project use cases."""

from .delete_project import DeleteProjectRequest, DeleteProjectUseCase
from .get_project import GetProjectRequest, GetProjectUseCase
from .list_projects import ListProjectsRequest, ListProjectsUseCase
from .project_item import ProjectItem
from .save_project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)

__all__ = [
    "CreateProjectRequest",
    "CreateProjectUseCase",
    "DeleteProjectRequest",
    "DeleteProjectUseCase",
    "GetProjectRequest",
    "GetProjectUseCase",
    "ListProjectsRequest",
    "ListProjectsUseCase",
    "ProjectItem",
    "UpdateProjectRequest",
    "UpdateProjectUseCase",
]
