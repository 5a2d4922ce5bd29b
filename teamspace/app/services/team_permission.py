"""
Team permission helpers

Shared guards for team-scoped operations. They raise domain errors; the
calling use case converts them into Result errors.
"""

from typing import Iterable

from teamspace.app.repositories.read_models import TeamWithMembership
from teamspace.app.repositories.team_repository import ITeamRepository
from teamspace.domain.entities import TeamMembership, TeamRole
from teamspace.domain.errors import (
    InsufficientPermissionError,
    InvalidTeamRoleError,
    NotMemberError,
    TeamNotFoundError,
)
from teamspace.domain.value_objects import TeamId, UserId


async def load_team_membership(
    teams: ITeamRepository, team_id: TeamId, user_id: UserId
) -> TeamWithMembership:
    """Load a team and require the user to be one of its members"""
    result = await teams.find_by_id_with_membership(team_id, user_id)
    if result is None:
        raise TeamNotFoundError(str(team_id))
    if result.membership is None:
        raise NotMemberError()
    return result


async def assert_team_permission(
    teams: ITeamRepository,
    team_id: TeamId,
    user_id: UserId,
    allowed_roles: Iterable[TeamRole],
    action: str,
) -> TeamMembership:
    membership = await teams.get_membership(team_id, user_id)
    if membership is None:
        raise NotMemberError()
    if membership.role not in tuple(allowed_roles):
        raise InsufficientPermissionError(action)
    return membership


async def assert_team_member(
    teams: ITeamRepository, team_id: TeamId, user_id: UserId, action: str = "view this team"
) -> TeamMembership:
    return await assert_team_permission(
        teams, team_id, user_id, (TeamRole.owner, TeamRole.admin, TeamRole.member), action
    )


async def assert_team_admin(
    teams: ITeamRepository, team_id: TeamId, user_id: UserId, action: str
) -> TeamMembership:
    return await assert_team_permission(
        teams, team_id, user_id, (TeamRole.owner, TeamRole.admin), action
    )


async def assert_team_owner(
    teams: ITeamRepository, team_id: TeamId, user_id: UserId, action: str
) -> TeamMembership:
    return await assert_team_permission(teams, team_id, user_id, (TeamRole.owner,), action)


def parse_assignable_role(value: str) -> TeamRole:
    """Parse a role that may be granted through an invitation or a role change"""
    try:
        role = TeamRole.create(value)
    except InvalidTeamRoleError:
        raise InvalidTeamRoleError(value, allowed="admin, member") from None
    if role.is_owner():
        raise InvalidTeamRoleError(value, allowed="admin, member")
    return role
