from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from teamspace.api.error import raise_for_error
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CancelInvitationResponse,
    CancelInvitationUseCase,
    CreateInvitationCommand,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    GetMyInvitationsResponse,
    GetMyInvitationsUseCase,
    GetTeamInvitationsResponse,
    GetTeamInvitationsUseCase,
    RejectInvitationResponse,
    RejectInvitationUseCase,
)
from teamspace.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Invitations"])


class CreateInvitationRequest(BaseModel):
    """
    Create invitation HTTP request payload

    The email format is checked by the engine so that invalid addresses
    surface as INVALID_EMAIL.
    """

    email: str = Field(..., description="Email address to invite")
    role: str = Field(..., description="Role to grant (admin/member)")


@router.post(
    "/teams/{team_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateInvitationResponse,
)
async def create_invitation(
    team_id: str,
    request: CreateInvitationRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Invitation

    Raises:
        - 400 Bad Request: INVALID_EMAIL, INVALID_TEAM_ROLE
        - 403 Forbidden: INSUFFICIENT_PERMISSION
        - 404 Not Found: TEAM_NOT_FOUND, NOT_MEMBER
        - 409 Conflict: ALREADY_MEMBER, INVITATION_ALREADY_EXISTS
    """
    use_case = CreateInvitationUseCase(uow, expiry_days=ApplicationConfig.INVITATION_EXPIRY_DAYS)
    result = await use_case.execute(
        current_user["user_id"],
        team_id,
        CreateInvitationCommand(email=request.email, role=request.role),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/teams/{team_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=GetTeamInvitationsResponse,
)
async def get_team_invitations(
    team_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List all invitations of a team - owner/admin only"""
    use_case = GetTeamInvitationsUseCase(uow)
    result = await use_case.execute(current_user["user_id"], team_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/teams/{team_id}/invitations/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=CancelInvitationResponse,
)
async def cancel_invitation(
    team_id: str,
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Invitation

    Raises:
        - 403 Forbidden: INSUFFICIENT_PERMISSION
        - 404 Not Found: INVITATION_NOT_FOUND (also for non-pending invitations),
                         TEAM_NOT_FOUND, NOT_MEMBER
    """
    use_case = CancelInvitationUseCase(uow)
    result = await use_case.execute(current_user["user_id"], team_id, invitation_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/invitations/mine",
    status_code=status.HTTP_200_OK,
    response_model=GetMyInvitationsResponse,
)
async def get_my_invitations(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List live pending invitations addressed to the current user"""
    use_case = GetMyInvitationsUseCase(uow)
    result = await use_case.execute(current_user["user_id"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/invitations/{invitation_id}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Raises:
        - 403 Forbidden: INVITATION_EMAIL_MISMATCH
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_EXPIRED, INVITATION_NOT_PENDING, ALREADY_MEMBER
    """
    use_case = AcceptInvitationUseCase(uow)
    result = await use_case.execute(current_user["user_id"], invitation_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/invitations/{invitation_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=RejectInvitationResponse,
)
async def reject_invitation(
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reject Invitation

    Raises:
        - 403 Forbidden: INVITATION_EMAIL_MISMATCH
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING
    """
    use_case = RejectInvitationUseCase(uow)
    result = await use_case.execute(current_user["user_id"], invitation_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
