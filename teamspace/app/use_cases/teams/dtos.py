"""
Team Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the team domain.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from teamspace.app.repositories.read_models import MembershipWithUser
from teamspace.domain.entities import Team


# ============================================================================
# Command DTOs
# ============================================================================


class CreateTeamCommand(BaseModel):
    """Command for creating a team"""

    name: str
    description: Optional[str] = None


class UpdateTeamCommand(BaseModel):
    """Command for updating a team.

    Only fields that were explicitly set are applied; an explicit
    ``description: null`` clears the description.
    """

    name: Optional[str] = None
    description: Optional[str] = None

    def has_changes(self) -> bool:
        return bool(self.model_fields_set & {"name", "description"})


class ChangeMemberRoleCommand(BaseModel):
    """Command for changing a member's role (admin or member)"""

    role: str


# ============================================================================
# Response DTOs
# ============================================================================


class TeamInfo(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, team: Team) -> "TeamInfo":
        return cls(
            id=str(team.id),
            name=str(team.name),
            description=team.description,
            created_at=team.created_at.isoformat(),
            updated_at=team.updated_at.isoformat(),
        )


class TeamWithRoleInfo(BaseModel):
    team: TeamInfo
    role: str


class MemberInfo(BaseModel):
    """Team member with user details"""

    id: str
    user_id: str
    user_name: str
    user_email: str
    user_avatar_url: Optional[str] = None
    role: str
    joined_at: str

    @classmethod
    def from_read_model(cls, member: MembershipWithUser) -> "MemberInfo":
        return cls(
            id=str(member.membership.id),
            user_id=str(member.membership.user_id),
            user_name=member.user_name,
            user_email=member.user_email,
            user_avatar_url=member.user_avatar_url,
            role=member.membership.role.value,
            joined_at=member.membership.joined_at.isoformat(),
        )


class CreateTeamResponse(BaseModel):
    team: TeamInfo


class GetTeamResponse(BaseModel):
    team: TeamInfo
    role: str
    member_count: int


class UpdateTeamResponse(BaseModel):
    team: TeamInfo


class DeleteTeamResponse(BaseModel):
    success: bool = True


class GetMyTeamsResponse(BaseModel):
    teams: List[TeamWithRoleInfo] = Field(default_factory=list)


class GetTeamMembersResponse(BaseModel):
    members: List[MemberInfo] = Field(default_factory=list)


class ChangeMemberRoleResponse(BaseModel):
    member: MemberInfo


class RemoveMemberResponse(BaseModel):
    success: bool = True


class LeaveTeamResponse(BaseModel):
    success: bool = True
