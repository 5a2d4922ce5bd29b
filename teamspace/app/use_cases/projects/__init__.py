"""
Project Use Cases

Team-scoped project management.
"""

from .archive_project_use_case import ArchiveProjectUseCase
from .create_project_use_case import CreateProjectUseCase
from .delete_project_use_case import DeleteProjectUseCase
from .dtos import (
    CreateProjectCommand,
    DeleteProjectResponse,
    GetTeamProjectsResponse,
    ProjectInfo,
    ProjectResponse,
    ReorderProjectsCommand,
    ReorderProjectsResponse,
    UpdateProjectCommand,
)
from .get_project_use_case import GetProjectUseCase
from .get_team_projects_use_case import GetTeamProjectsUseCase
from .reorder_projects_use_case import ReorderProjectsUseCase
from .restore_project_use_case import RestoreProjectUseCase
from .update_project_use_case import UpdateProjectUseCase

__all__ = [
    "CreateProjectUseCase",
    "GetProjectUseCase",
    "GetTeamProjectsUseCase",
    "UpdateProjectUseCase",
    "ArchiveProjectUseCase",
    "RestoreProjectUseCase",
    "DeleteProjectUseCase",
    "ReorderProjectsUseCase",
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "ReorderProjectsCommand",
    "ProjectInfo",
    "ProjectResponse",
    "GetTeamProjectsResponse",
    "DeleteProjectResponse",
    "ReorderProjectsResponse",
]
