"""
Invitation Use Cases

Invitation lifecycle: create, cancel, accept, reject and listing.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .cancel_invitation_use_case import CancelInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    CancelInvitationResponse,
    CreateInvitationCommand,
    CreateInvitationResponse,
    GetMyInvitationsResponse,
    GetTeamInvitationsResponse,
    InvitationInfo,
    InvitationWithTeamInfo,
    RejectInvitationResponse,
)
from .get_my_invitations_use_case import GetMyInvitationsUseCase
from .get_team_invitations_use_case import GetTeamInvitationsUseCase
from .reject_invitation_use_case import RejectInvitationUseCase

__all__ = [
    "CreateInvitationUseCase",
    "CancelInvitationUseCase",
    "AcceptInvitationUseCase",
    "RejectInvitationUseCase",
    "GetTeamInvitationsUseCase",
    "GetMyInvitationsUseCase",
    "CreateInvitationCommand",
    "CreateInvitationResponse",
    "CancelInvitationResponse",
    "AcceptInvitationResponse",
    "RejectInvitationResponse",
    "GetTeamInvitationsResponse",
    "GetMyInvitationsResponse",
    "InvitationInfo",
    "InvitationWithTeamInfo",
]
