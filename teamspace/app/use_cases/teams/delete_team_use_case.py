"""
Delete Team Use Case

Deletes a team and everything scoped to it.
"""

import logging

from teamspace.app.services.team_permission import load_team_membership
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import InsufficientPermissionError, TeamspaceError
from teamspace.domain.value_objects import TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import DeleteTeamResponse

logger = logging.getLogger(__name__)


class DeleteTeamUseCase:
    """
    Use case for deleting a team.

    Business Rules:
    - Only the owner can delete a team
    - Memberships, invitations and projects are removed with it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, team_id: str) -> Result[DeleteTeamResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                team_vo = TeamId.create(team_id)

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)

                if not context.membership.can_delete_team():
                    raise InsufficientPermissionError("delete team")

                await self.uow.teams.delete(team_vo)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info("Team %s deleted by user %s", team_vo, actor_id)
            return Return.ok(DeleteTeamResponse(success=True))
