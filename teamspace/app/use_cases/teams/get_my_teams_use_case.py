from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import TeamspaceError
from teamspace.domain.value_objects import UserId
from teamspace.libs.result import Result, Return

from .dtos import GetMyTeamsResponse, TeamInfo, TeamWithRoleInfo


class GetMyTeamsUseCase:
    """List every team the caller belongs to, with the caller's role"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[GetMyTeamsResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
            except TeamspaceError as exc:
                return Return.err(exc.error)

            teams = await self.uow.teams.find_by_user_id(actor_id)

            return Return.ok(
                GetMyTeamsResponse(
                    teams=[
                        TeamWithRoleInfo(
                            team=TeamInfo.from_entity(item.team), role=item.role.value
                        )
                        for item in teams
                    ]
                )
            )
