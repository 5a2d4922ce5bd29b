"""
Update Project Use Case
"""

from teamspace.app.services.team_permission import assert_team_admin
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.entities import Project
from teamspace.domain.errors import (
    CannotUpdateArchivedProjectError,
    ProjectNotFoundError,
    TeamspaceError,
)
from teamspace.domain.value_objects import ProjectId, ProjectName, UserId
from teamspace.libs.result import Result, Return

from .dtos import ProjectInfo, ProjectResponse, UpdateProjectCommand


class UpdateProjectUseCase:
    """
    Use case for updating project name and description.

    Business Rules:
    - Only owner/admin can update projects
    - Archived projects cannot be updated
    - An update without changes returns the project as is
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, project_id: str, command: UpdateProjectCommand
    ) -> Result[ProjectResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                project_vo = ProjectId.create(project_id)
                name = ProjectName.create(command.name) if command.name is not None else None
                Project.check_description(command.description)

                project = await self.uow.projects.find_by_id(project_vo)
                if project is None:
                    raise ProjectNotFoundError(project_id)

                await assert_team_admin(
                    self.uow.teams, project.team_id, actor_id, "update projects"
                )

                if project.is_archived():
                    raise CannotUpdateArchivedProjectError(project_id)

                if not command.has_changes():
                    return Return.ok(ProjectResponse(project=ProjectInfo.from_entity(project)))

                if "description" in command.model_fields_set:
                    updated = project.update(name=name, description=command.description)
                else:
                    updated = project.update(name=name)

                saved = await self.uow.projects.save(updated)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            return Return.ok(ProjectResponse(project=ProjectInfo.from_entity(saved)))
