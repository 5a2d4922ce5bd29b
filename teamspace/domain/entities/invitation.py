"""
TeamInvitation Entity

Email-addressed offer to join a team with a role.
"""

from datetime import datetime, timedelta
from typing import ClassVar, Optional

from pydantic import Field

from teamspace.domain.base import DomainModel, utcnow
from teamspace.domain.errors import (
    InvalidTeamRoleError,
    InvitationEmailMismatchError,
    InvitationExpiredError,
    InvitationNotPendingError,
)
from teamspace.domain.value_objects import (
    Email,
    InvitationId,
    InvitationToken,
    TeamId,
    UserId,
)

from .enums import InvitationStatus, TeamRole


class TeamInvitation(DomainModel):
    """
    TeamInvitation entity - invitation lifecycle.

    Business Rules:
    - Role is admin or member, never owner
    - accept and reject leave ``pending`` at most once; mark_expired is unguarded
    - Only accepted or rejected set ``responded_at``
    - Acceptance checks expiry first, then pending state, then the email match
    - Rejection only requires the invitation to be pending
    """

    DEFAULT_EXPIRY_DAYS: ClassVar[int] = 7

    id: InvitationId
    team_id: TeamId
    email: Email
    role: TeamRole
    invited_by: UserId
    token: InvitationToken
    status: InvitationStatus = InvitationStatus.pending
    expires_at: datetime
    created_at: datetime = Field(default_factory=utcnow)
    responded_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        team_id: TeamId,
        email: Email,
        role: TeamRole,
        invited_by: UserId,
        expires_in_days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> "TeamInvitation":
        if role.is_owner():
            raise InvalidTeamRoleError(role.value, allowed="admin, member")

        created_at = now or utcnow()
        days = cls.DEFAULT_EXPIRY_DAYS if expires_in_days is None else expires_in_days
        return cls(
            id=InvitationId.generate(),
            team_id=team_id,
            email=email,
            role=role,
            invited_by=invited_by,
            token=InvitationToken.generate(),
            status=InvitationStatus.pending,
            expires_at=created_at + timedelta(days=days),
            created_at=created_at,
            responded_at=None,
        )

    def is_pending(self) -> bool:
        return self.status.is_pending()

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """True once ``now`` is past ``expires_at``, regardless of status"""
        return (now or utcnow()) > self.expires_at

    def can_be_accepted_by(self, email: Email, now: Optional[datetime] = None) -> bool:
        return self.is_pending() and not self.is_expired(now) and self.email == email

    def accept(self, email: Email, now: Optional[datetime] = None) -> "TeamInvitation":
        now = now or utcnow()
        if self.is_expired(now):
            raise InvitationExpiredError()
        if not self.is_pending():
            raise InvitationNotPendingError()
        if self.email != email:
            raise InvitationEmailMismatchError()

        return self.model_copy(
            update={"status": InvitationStatus.accepted, "responded_at": now}
        )

    def reject(self, now: Optional[datetime] = None) -> "TeamInvitation":
        if not self.is_pending():
            raise InvitationNotPendingError()

        return self.model_copy(
            update={"status": InvitationStatus.rejected, "responded_at": now or utcnow()}
        )

    def mark_expired(self) -> "TeamInvitation":
        """Persist the expired state; callers decide when that applies"""
        return self.model_copy(update={"status": InvitationStatus.expired})
