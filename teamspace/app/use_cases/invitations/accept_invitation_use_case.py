"""
Accept Invitation Use Case

Handles a user accepting an invitation and joining the team.
"""

import logging

from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.entities import InvitationStatus, TeamMembership
from teamspace.domain.errors import (
    AlreadyMemberError,
    InvitationNotFoundError,
    TeamspaceError,
)
from teamspace.domain.value_objects import InvitationId, UserId
from teamspace.libs.result import Result, Return

from .dtos import AcceptInvitationResponse

logger = logging.getLogger(__name__)

UNKNOWN_TEAM_NAME = "Unknown Team"


class AcceptInvitationUseCase:
    """
    Use case for accepting a team invitation.

    Business Rules:
    - A missing user is reported as a missing invitation
    - Expiry is checked first, then pending state, then the email match
    - A user who already belongs to the team cannot join again
    - Membership insert and invitation update commit together; the update
      only applies while the stored invitation is still pending
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, invitation_id: str
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            user_id: ID of the user accepting
            invitation_id: ID of the invitation

        Returns:
            Result with team id, team name and granted role, or Error
        """
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

                accepted = invitation.accept(user.email)

                existing = await self.uow.teams.get_membership(invitation.team_id, user_vo)
                if existing is not None:
                    raise AlreadyMemberError(str(user.email))

                membership = TeamMembership.create(
                    user_id=user_vo, team_id=invitation.team_id, role=invitation.role
                )
                await self.uow.teams.add_membership(membership)
                await self.uow.invitations.update(
                    accepted, expected_status=InvitationStatus.pending
                )

                team = await self.uow.teams.find_by_id(invitation.team_id)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info(
                "Invitation %s accepted, user %s joined team %s as %s",
                invitation_vo,
                user_vo,
                invitation.team_id,
                invitation.role.value,
            )
            return Return.ok(
                AcceptInvitationResponse(
                    team_id=str(invitation.team_id),
                    team_name=str(team.name) if team is not None else UNKNOWN_TEAM_NAME,
                    role=invitation.role.value,
                )
            )
