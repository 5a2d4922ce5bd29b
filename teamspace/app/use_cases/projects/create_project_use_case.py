"""
Create Project Use Case
"""

import logging

from teamspace.app.services.team_permission import assert_team_admin
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.entities import Project
from teamspace.domain.errors import TeamspaceError
from teamspace.domain.value_objects import ProjectName, TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import CreateProjectCommand, ProjectInfo, ProjectResponse

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """
    Use case for creating a project within a team.

    Business Rules:
    - Only owner/admin can create projects
    - A new project goes to the end of the team's list
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, team_id: str, command: CreateProjectCommand
    ) -> Result[ProjectResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                team_vo = TeamId.create(team_id)
                name = ProjectName.create(command.name)
                Project.check_description(command.description)

                await assert_team_admin(self.uow.teams, team_vo, actor_id, "create projects")

                position = await self.uow.projects.get_next_position(team_vo)
                project = Project.create(
                    team_id=team_vo,
                    name=name,
                    created_by=actor_id,
                    position=position,
                    description=command.description,
                )
                saved = await self.uow.projects.save(project)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info("Project %s created in team %s by user %s", saved.id, team_vo, actor_id)
            return Return.ok(ProjectResponse(project=ProjectInfo.from_entity(saved)))
