from teamspace.app.services.team_permission import assert_team_member
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import TeamspaceError
from teamspace.domain.value_objects import TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import GetTeamProjectsResponse, ProjectInfo


class GetTeamProjectsUseCase:
    """List team projects by position - any team member can view"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, team_id: str, include_archived: bool = False
    ) -> Result[GetTeamProjectsResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                team_vo = TeamId.create(team_id)

                await assert_team_member(self.uow.teams, team_vo, actor_id, "view team projects")
                projects = await self.uow.projects.find_by_team_id(
                    team_vo, include_archived=include_archived
                )
            except TeamspaceError as exc:
                return Return.err(exc.error)

            return Return.ok(
                GetTeamProjectsResponse(
                    projects=[ProjectInfo.from_entity(project) for project in projects]
                )
            )
