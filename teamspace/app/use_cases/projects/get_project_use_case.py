from teamspace.app.services.team_permission import assert_team_member
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import ProjectNotFoundError, TeamspaceError
from teamspace.domain.value_objects import ProjectId, UserId
from teamspace.libs.result import Result, Return

from .dtos import ProjectInfo, ProjectResponse


class GetProjectUseCase:
    """Get a project by id - any team member can view"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, project_id: str) -> Result[ProjectResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                project_vo = ProjectId.create(project_id)

                project = await self.uow.projects.find_by_id(project_vo)
                if project is None:
                    raise ProjectNotFoundError(project_id)

                await assert_team_member(
                    self.uow.teams, project.team_id, actor_id, "view this project"
                )
            except TeamspaceError as exc:
                return Return.err(exc.error)

            return Return.ok(ProjectResponse(project=ProjectInfo.from_entity(project)))
