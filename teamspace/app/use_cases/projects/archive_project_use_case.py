"""
Archive Project Use Case
"""

import logging

from teamspace.app.services.team_permission import assert_team_admin
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import ProjectNotFoundError, TeamspaceError
from teamspace.domain.value_objects import ProjectId, UserId
from teamspace.libs.result import Result, Return

from .dtos import ProjectInfo, ProjectResponse

logger = logging.getLogger(__name__)


class ArchiveProjectUseCase:
    """Archive an active project - owner/admin only"""

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

                await assert_team_admin(
                    self.uow.teams, project.team_id, actor_id, "archive projects"
                )

                saved = await self.uow.projects.save(project.archive())
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info("Project %s archived by user %s", project_vo, actor_id)
            return Return.ok(ProjectResponse(project=ProjectInfo.from_entity(saved)))
