"""
Get Team Use Case
"""

from teamspace.app.services.team_permission import load_team_membership
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import TeamspaceError
from teamspace.domain.value_objects import TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import GetTeamResponse, TeamInfo


class GetTeamUseCase:
    """Get team details with the caller's role and the member count - members only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, team_id: str) -> Result[GetTeamResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                team_vo = TeamId.create(team_id)

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)
                member_count = await self.uow.teams.count_members(team_vo)
            except TeamspaceError as exc:
                return Return.err(exc.error)

            return Return.ok(
                GetTeamResponse(
                    team=TeamInfo.from_entity(context.team),
                    role=context.membership.role.value,
                    member_count=member_count,
                )
            )
