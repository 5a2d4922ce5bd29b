"""
Reject Invitation Use Case
"""

import logging

from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.entities import InvitationStatus
from teamspace.domain.errors import (
    InvitationEmailMismatchError,
    InvitationNotFoundError,
    TeamspaceError,
)
from teamspace.domain.value_objects import InvitationId, UserId
from teamspace.libs.result import Result, Return

from .dtos import RejectInvitationResponse

logger = logging.getLogger(__name__)


class RejectInvitationUseCase:
    """
    Use case for declining a team invitation.

    Business Rules:
    - Only the invited email can reject
    - Only pending invitations can be rejected; expiry does not block rejection
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, invitation_id: str
    ) -> Result[RejectInvitationResponse]:
        async with self.uow:
            try:
                user_vo = UserId.create(user_id)
                invitation_vo = InvitationId.create(invitation_id)

                invitation = await self.uow.invitations.find_by_id(invitation_vo)
                if invitation is None:
                    raise InvitationNotFoundError()

                user = await self.uow.users.find_by_id(user_vo)
                if user is None:
                    raise InvitationNotFoundError()

                if invitation.email != user.email:
                    raise InvitationEmailMismatchError()

                rejected = invitation.reject()
                await self.uow.invitations.update(
                    rejected, expected_status=InvitationStatus.pending
                )
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info("Invitation %s rejected by user %s", invitation_vo, user_vo)
            return Return.ok(RejectInvitationResponse(success=True))
