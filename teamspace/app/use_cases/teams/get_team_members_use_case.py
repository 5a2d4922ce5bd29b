from teamspace.app.services.team_permission import load_team_membership
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import TeamspaceError
from teamspace.domain.value_objects import TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import GetTeamMembersResponse, MemberInfo


class GetTeamMembersUseCase:
    """List team members with user details, oldest first - members only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, team_id: str) -> Result[GetTeamMembersResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                team_vo = TeamId.create(team_id)

                await load_team_membership(self.uow.teams, team_vo, actor_id)
                members = await self.uow.teams.get_memberships(team_vo)
            except TeamspaceError as exc:
                return Return.err(exc.error)

            return Return.ok(
                GetTeamMembersResponse(
                    members=[MemberInfo.from_read_model(member) for member in members]
                )
            )
