"""
Use Cases

Organized into domain folders:
- teams/: Team lifecycle and membership administration
- invitations/: Invitation lifecycle
- projects/: Team-scoped projects
"""

from .invitations import (
    AcceptInvitationUseCase,
    CancelInvitationUseCase,
    CreateInvitationUseCase,
    GetMyInvitationsUseCase,
    GetTeamInvitationsUseCase,
    RejectInvitationUseCase,
)
from .projects import (
    ArchiveProjectUseCase,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    GetTeamProjectsUseCase,
    ReorderProjectsUseCase,
    RestoreProjectUseCase,
    UpdateProjectUseCase,
)
from .teams import (
    ChangeMemberRoleUseCase,
    CreateTeamUseCase,
    DeleteTeamUseCase,
    GetMyTeamsUseCase,
    GetTeamMembersUseCase,
    GetTeamUseCase,
    LeaveTeamUseCase,
    RemoveMemberUseCase,
    UpdateTeamUseCase,
)

__all__ = [
    # Teams
    "CreateTeamUseCase",
    "GetTeamUseCase",
    "GetMyTeamsUseCase",
    "UpdateTeamUseCase",
    "DeleteTeamUseCase",
    "GetTeamMembersUseCase",
    "ChangeMemberRoleUseCase",
    "RemoveMemberUseCase",
    "LeaveTeamUseCase",
    # Invitations
    "CreateInvitationUseCase",
    "CancelInvitationUseCase",
    "AcceptInvitationUseCase",
    "RejectInvitationUseCase",
    "GetTeamInvitationsUseCase",
    "GetMyInvitationsUseCase",
    # Projects
    "CreateProjectUseCase",
    "GetProjectUseCase",
    "GetTeamProjectsUseCase",
    "UpdateProjectUseCase",
    "ArchiveProjectUseCase",
    "RestoreProjectUseCase",
    "DeleteProjectUseCase",
    "ReorderProjectsUseCase",
]
