"""
Invitation Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the invitation domain.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from teamspace.domain.base import utcnow
from teamspace.domain.entities import InvitationStatus, TeamInvitation


# ============================================================================
# Command DTOs
# ============================================================================


class CreateInvitationCommand(BaseModel):
    """Command for inviting an email address to a team as admin or member"""

    email: str
    role: str


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationInfo(BaseModel):
    """Invitation details.

    ``status`` is the effective status: a pending invitation past its
    deadline is reported as expired even if it was never marked so.
    """

    id: str
    team_id: str
    email: str
    role: str
    status: str
    invited_by: str
    inviter_name: Optional[str] = None
    expires_at: str
    created_at: str

    @classmethod
    def from_entity(
        cls,
        invitation: TeamInvitation,
        inviter_name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "InvitationInfo":
        status = invitation.status
        if status.is_pending() and invitation.is_expired(now or utcnow()):
            status = InvitationStatus.expired

        return cls(
            id=str(invitation.id),
            team_id=str(invitation.team_id),
            email=str(invitation.email),
            role=invitation.role.value,
            status=status.value,
            invited_by=str(invitation.invited_by),
            inviter_name=inviter_name,
            expires_at=invitation.expires_at.isoformat(),
            created_at=invitation.created_at.isoformat(),
        )


class InvitationWithTeamInfo(BaseModel):
    invitation: InvitationInfo
    team_name: str
    inviter_name: str


class CreateInvitationResponse(BaseModel):
    invitation: InvitationInfo


class CancelInvitationResponse(BaseModel):
    success: bool = True


class AcceptInvitationResponse(BaseModel):
    team_id: str
    team_name: str
    role: str


class RejectInvitationResponse(BaseModel):
    success: bool = True


class GetTeamInvitationsResponse(BaseModel):
    invitations: List[InvitationInfo] = Field(default_factory=list)


class GetMyInvitationsResponse(BaseModel):
    invitations: List[InvitationWithTeamInfo] = Field(default_factory=list)
