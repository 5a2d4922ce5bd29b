"""
Repository read models

Joined views returned by repository queries that span more than one aggregate.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from teamspace.domain.entities import Team, TeamInvitation, TeamMembership, TeamRole


class ReadModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class TeamWithRole(ReadModel):
    team: Team
    role: TeamRole


class TeamWithMembership(ReadModel):
    """A team and the acting user's membership in it, None when not a member"""

    team: Team
    membership: Optional[TeamMembership] = None


class MembershipWithUser(ReadModel):
    membership: TeamMembership
    user_name: str
    user_email: str
    user_avatar_url: Optional[str] = None


class InvitationWithTeamName(ReadModel):
    invitation: TeamInvitation
    team_name: str
    inviter_name: str
