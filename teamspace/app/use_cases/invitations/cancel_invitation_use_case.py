"""
Cancel Invitation Use Case
"""

import logging

from teamspace.app.services.team_permission import load_team_membership
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import (
    InsufficientPermissionError,
    InvitationNotFoundError,
    TeamspaceError,
)
from teamspace.domain.value_objects import InvitationId, TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import CancelInvitationResponse

logger = logging.getLogger(__name__)


class CancelInvitationUseCase:
    """
    Use case for cancelling a pending invitation.

    Business Rules:
    - Only owner/admin can cancel
    - The invitation is deleted, not transitioned
    - Invitations of another team, and invitations that are no longer
      pending, are reported as not found
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: str, team_id: str, invitation_id: str
    ) -> Result[CancelInvitationResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(actor_user_id)
                team_vo = TeamId.create(team_id)
                invitation_vo = InvitationId.create(invitation_id)

                invitation = await self.uow.invitations.find_by_id(invitation_vo)
                if invitation is None or invitation.team_id != team_vo:
                    raise InvitationNotFoundError()

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)

                if not context.membership.can_manage_members():
                    raise InsufficientPermissionError("cancel invitations")

                if not invitation.is_pending():
                    raise InvitationNotFoundError()

                await self.uow.invitations.delete(invitation_vo)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info(
                "Invitation %s to team %s cancelled by user %s", invitation_vo, team_vo, actor_id
            )
            return Return.ok(CancelInvitationResponse(success=True))
