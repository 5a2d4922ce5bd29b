"""
Leave Team Use Case
"""

import logging

from teamspace.app.services.team_permission import load_team_membership
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import OwnerCannotLeaveError, TeamspaceError
from teamspace.domain.value_objects import TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import LeaveTeamResponse

logger = logging.getLogger(__name__)


class LeaveTeamUseCase:
    """
    Use case for voluntarily leaving a team.

    Business Rules:
    - Any member except the owner can leave
    - There is no ownership transfer, so the owner's only exit is deleting the team
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, team_id: str) -> Result[LeaveTeamResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(user_id)
                team_vo = TeamId.create(team_id)

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)

                if context.membership.is_owner():
                    raise OwnerCannotLeaveError()

                await self.uow.teams.remove_membership(team_vo, actor_id)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info("User %s left team %s", actor_id, team_vo)
            return Return.ok(LeaveTeamResponse(success=True))
