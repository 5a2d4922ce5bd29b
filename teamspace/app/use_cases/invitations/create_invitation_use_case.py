"""
Create Invitation Use Case

Handles inviting an email address to join a team with a given role.
"""

import logging

from teamspace.app.services.team_permission import (
    load_team_membership,
    parse_assignable_role,
)
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.entities import TeamInvitation
from teamspace.domain.errors import (
    AlreadyMemberError,
    InsufficientPermissionError,
    InvitationAlreadyExistsError,
    TeamspaceError,
)
from teamspace.domain.value_objects import Email, TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import CreateInvitationCommand, CreateInvitationResponse, InvitationInfo

logger = logging.getLogger(__name__)


class CreateInvitationUseCase:
    """
    Use case for inviting users to join a team.

    Business Rules:
    - Only owner/admin can invite
    - Owner can invite as admin or member, admin only as member
    - Role owner is rejected as invalid input
    - Existing members cannot be invited
    - At most one live pending invitation per (team, email)
    - Invitation expires after ``expiry_days`` (7 by default)
    """

    def __init__(self, uow: UnitOfWork, expiry_days: int = TeamInvitation.DEFAULT_EXPIRY_DAYS):
        self.uow = uow
        self.expiry_days = expiry_days

    async def execute(
        self, actor_user_id: str, team_id: str, command: CreateInvitationCommand
    ) -> Result[CreateInvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            actor_user_id: User ID of the person sending the invite
            team_id: Target team ID
            command: Invitee email and role (admin/member)

        Returns:
            Result with CreateInvitationResponse DTO, or Error
        """
        async with self.uow:
            try:
                actor_id = UserId.create(actor_user_id)
                team_vo = TeamId.create(team_id)
                email = Email.create(command.email)
                role = parse_assignable_role(command.role)

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)
                actor = context.membership

                if not actor.can_manage_members():
                    raise InsufficientPermissionError("invite team members")

                if not actor.can_invite_as(role):
                    raise InsufficientPermissionError(f"invite as {role.value}")

                if await self.uow.teams.is_email_member(team_vo, email):
                    raise AlreadyMemberError(str(email))

                pending = await self.uow.invitations.find_pending_by_team_and_email(
                    team_vo, email
                )
                if pending is not None:
                    raise InvitationAlreadyExistsError(str(email))

                invitation = TeamInvitation.create(
                    team_id=team_vo,
                    email=email,
                    role=role,
                    invited_by=actor_id,
                    expires_in_days=self.expiry_days,
                )
                saved = await self.uow.invitations.create(invitation)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info(
                "Invitation %s to team %s created for %s as %s by user %s",
                saved.id,
                team_vo,
                email,
                role.value,
                actor_id,
            )
            return Return.ok(CreateInvitationResponse(invitation=InvitationInfo.from_entity(saved)))
