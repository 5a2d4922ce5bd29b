"""
Reorder Projects Use Case
"""

from teamspace.app.services.team_permission import assert_team_admin
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import ReorderProjectsInvalidError, TeamspaceError
from teamspace.domain.value_objects import ProjectId, TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import ReorderProjectsCommand, ReorderProjectsResponse


class ReorderProjectsUseCase:
    """
    Use case for reordering the active projects of a team.

    Business Rules:
    - Only owner/admin can reorder
    - The list must name every active project exactly once
    - Each project's new position is its index in the list
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, team_id: str, command: ReorderProjectsCommand
    ) -> Result[ReorderProjectsResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                team_vo = TeamId.create(team_id)
                ordered_ids = [ProjectId.create(value) for value in command.project_ids]

                await assert_team_admin(self.uow.teams, team_vo, actor_id, "reorder projects")

                active = await self.uow.projects.find_by_team_id(team_vo, include_archived=False)
                active_ids = {project.id for project in active}

                seen = set()
                duplicates = []
                for project_id in ordered_ids:
                    if project_id in seen:
                        duplicates.append(str(project_id))
                    seen.add(project_id)

                missing = [str(pid) for pid in active_ids if pid not in seen]
                extra = [str(pid) for pid in ordered_ids if pid not in active_ids]

                if duplicates:
                    raise ReorderProjectsInvalidError(
                        f"Duplicate project IDs: {', '.join(duplicates)}"
                    )
                if missing:
                    raise ReorderProjectsInvalidError(
                        f"Missing project IDs: {', '.join(sorted(missing))}"
                    )
                if extra:
                    raise ReorderProjectsInvalidError(
                        f"Invalid or non-active project IDs: {', '.join(extra)}"
                    )

                await self.uow.projects.update_positions(
                    [(project_id, index) for index, project_id in enumerate(ordered_ids)]
                )
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            return Return.ok(ReorderProjectsResponse(success=True))
