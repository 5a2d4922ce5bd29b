"""
Update Team Use Case
"""

import logging

from teamspace.app.services.team_permission import load_team_membership
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.entities import Team
from teamspace.domain.errors import InsufficientPermissionError, TeamspaceError
from teamspace.domain.value_objects import TeamId, TeamName, UserId
from teamspace.libs.result import Result, Return

from .dtos import TeamInfo, UpdateTeamCommand, UpdateTeamResponse

logger = logging.getLogger(__name__)


class UpdateTeamUseCase:
    """
    Use case for updating team name and description.

    Business Rules:
    - Only owner/admin can modify the team
    - Fields not present in the command are left untouched
    - An update without changes still requires membership and writes nothing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, team_id: str, command: UpdateTeamCommand
    ) -> Result[UpdateTeamResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                team_vo = TeamId.create(team_id)
                name = TeamName.create(command.name) if command.name is not None else None
                Team.check_description(command.description)

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)

                if not context.membership.can_modify_team():
                    raise InsufficientPermissionError("update team")

                if not command.has_changes():
                    return Return.ok(UpdateTeamResponse(team=TeamInfo.from_entity(context.team)))

                if "description" in command.model_fields_set:
                    updated = context.team.update(name=name, description=command.description)
                else:
                    updated = context.team.update(name=name)

                saved = await self.uow.teams.update(updated)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info("Team %s updated by user %s", saved.id, actor_id)
            return Return.ok(UpdateTeamResponse(team=TeamInfo.from_entity(saved)))
