"""
Team Management Use Cases

Team lifecycle and membership administration.
"""

from .change_member_role_use_case import ChangeMemberRoleUseCase
from .create_team_use_case import CreateTeamUseCase
from .delete_team_use_case import DeleteTeamUseCase
from .dtos import (
    ChangeMemberRoleCommand,
    ChangeMemberRoleResponse,
    CreateTeamCommand,
    CreateTeamResponse,
    DeleteTeamResponse,
    GetMyTeamsResponse,
    GetTeamMembersResponse,
    GetTeamResponse,
    LeaveTeamResponse,
    MemberInfo,
    RemoveMemberResponse,
    TeamInfo,
    TeamWithRoleInfo,
    UpdateTeamCommand,
    UpdateTeamResponse,
)
from .get_my_teams_use_case import GetMyTeamsUseCase
from .get_team_members_use_case import GetTeamMembersUseCase
from .get_team_use_case import GetTeamUseCase
from .leave_team_use_case import LeaveTeamUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_team_use_case import UpdateTeamUseCase

__all__ = [
    "CreateTeamUseCase",
    "GetTeamUseCase",
    "GetMyTeamsUseCase",
    "UpdateTeamUseCase",
    "DeleteTeamUseCase",
    "GetTeamMembersUseCase",
    "ChangeMemberRoleUseCase",
    "RemoveMemberUseCase",
    "LeaveTeamUseCase",
    "CreateTeamCommand",
    "UpdateTeamCommand",
    "ChangeMemberRoleCommand",
    "CreateTeamResponse",
    "GetTeamResponse",
    "GetMyTeamsResponse",
    "UpdateTeamResponse",
    "DeleteTeamResponse",
    "GetTeamMembersResponse",
    "ChangeMemberRoleResponse",
    "RemoveMemberResponse",
    "LeaveTeamResponse",
    "TeamInfo",
    "TeamWithRoleInfo",
    "MemberInfo",
]
