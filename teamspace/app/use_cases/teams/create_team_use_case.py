"""
Create Team Use Case
"""

import logging

from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.entities import Team
from teamspace.domain.errors import TeamspaceError
from teamspace.domain.value_objects import TeamName, UserId
from teamspace.libs.result import Result, Return

from .dtos import CreateTeamCommand, CreateTeamResponse, TeamInfo

logger = logging.getLogger(__name__)


class CreateTeamUseCase:
    """
    Use case for creating a team.

    Business Rules:
    - Any user can create a team and becomes its owner
    - Team and owner membership are persisted in one repository call
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, command: CreateTeamCommand
    ) -> Result[CreateTeamResponse]:
        async with self.uow:
            try:
                owner_id = UserId.create(user_id)
                team = Team.create(
                    name=TeamName.create(command.name),
                    description=command.description,
                )

                created = await self.uow.teams.create(team, owner_id)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info("Team %s created by user %s", created.id, owner_id)
            return Return.ok(CreateTeamResponse(team=TeamInfo.from_entity(created)))
