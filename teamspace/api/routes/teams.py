from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from teamspace.api.error import raise_for_error
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.app.use_cases.teams import (
    ChangeMemberRoleCommand,
    ChangeMemberRoleResponse,
    ChangeMemberRoleUseCase,
    CreateTeamCommand,
    CreateTeamResponse,
    CreateTeamUseCase,
    DeleteTeamResponse,
    DeleteTeamUseCase,
    GetMyTeamsResponse,
    GetMyTeamsUseCase,
    GetTeamMembersResponse,
    GetTeamMembersUseCase,
    GetTeamResponse,
    GetTeamUseCase,
    LeaveTeamResponse,
    LeaveTeamUseCase,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    UpdateTeamCommand,
    UpdateTeamResponse,
    UpdateTeamUseCase,
)
from teamspace.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/teams", tags=["Teams"])


class CreateTeamRequest(BaseModel):
    """Create team HTTP request payload"""

    name: str = Field(..., description="Team name (1-100 characters)")
    description: Optional[str] = Field(None, description="Optional description")


class UpdateTeamRequest(BaseModel):
    """Update team HTTP request payload; omitted fields are left unchanged"""

    name: Optional[str] = Field(None, description="New team name")
    description: Optional[str] = Field(None, description="New description, null clears it")


class ChangeMemberRoleRequest(BaseModel):
    role: str = Field(..., description="New role (admin/member)")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateTeamResponse)
async def create_team(
    request: CreateTeamRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Team

    The caller becomes the owner of the new team.

    Raises:
        - 400 Bad Request: TEAM_NAME_INVALID, TEAM_DESCRIPTION_INVALID
        - 401 Unauthorized: Invalid or expired JWT
    """
    use_case = CreateTeamUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"],
        CreateTeamCommand(name=request.name, description=request.description),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=GetMyTeamsResponse)
async def get_my_teams(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List teams of the current user with their role"""
    use_case = GetMyTeamsUseCase(uow)
    result = await use_case.execute(current_user["user_id"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{team_id}", status_code=status.HTTP_200_OK, response_model=GetTeamResponse)
async def get_team(
    team_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Team

    Raises:
        - 400 Bad Request: INVALID_TEAM_ID
        - 404 Not Found: TEAM_NOT_FOUND, NOT_MEMBER
    """
    use_case = GetTeamUseCase(uow)
    result = await use_case.execute(current_user["user_id"], team_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{team_id}", status_code=status.HTTP_200_OK, response_model=UpdateTeamResponse)
async def update_team(
    team_id: str,
    request: UpdateTeamRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Team - owner/admin only

    Raises:
        - 400 Bad Request: INVALID_TEAM_ID, TEAM_NAME_INVALID, TEAM_DESCRIPTION_INVALID
        - 403 Forbidden: INSUFFICIENT_PERMISSION
        - 404 Not Found: TEAM_NOT_FOUND, NOT_MEMBER
    """
    # Forward only the fields the client actually sent
    command = UpdateTeamCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateTeamUseCase(uow)
    result = await use_case.execute(current_user["user_id"], team_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{team_id}", status_code=status.HTTP_200_OK, response_model=DeleteTeamResponse)
async def delete_team(
    team_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Team - owner only

    Raises:
        - 403 Forbidden: INSUFFICIENT_PERMISSION
        - 404 Not Found: TEAM_NOT_FOUND, NOT_MEMBER
    """
    use_case = DeleteTeamUseCase(uow)
    result = await use_case.execute(current_user["user_id"], team_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{team_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=GetTeamMembersResponse,
)
async def get_team_members(
    team_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List team members, oldest first"""
    use_case = GetTeamMembersUseCase(uow)
    result = await use_case.execute(current_user["user_id"], team_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{team_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=ChangeMemberRoleResponse,
)
async def change_member_role(
    team_id: str,
    user_id: str,
    request: ChangeMemberRoleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Member Role

    Raises:
        - 400 Bad Request: INVALID_TEAM_ROLE (including owner)
        - 403 Forbidden: INSUFFICIENT_PERMISSION
        - 404 Not Found: TEAM_NOT_FOUND, NOT_MEMBER
        - 409 Conflict: CANNOT_DEMOTE_OWNER
    """
    use_case = ChangeMemberRoleUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"],
        team_id,
        user_id,
        ChangeMemberRoleCommand(role=request.role),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{team_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    team_id: str,
    user_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Raises:
        - 403 Forbidden: INSUFFICIENT_PERMISSION
        - 404 Not Found: TEAM_NOT_FOUND, NOT_MEMBER
        - 409 Conflict: CANNOT_REMOVE_OWNER
    """
    use_case = RemoveMemberUseCase(uow)
    result = await use_case.execute(current_user["user_id"], team_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{team_id}/leave", status_code=status.HTTP_200_OK, response_model=LeaveTeamResponse
)
async def leave_team(
    team_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Leave Team

    Raises:
        - 404 Not Found: TEAM_NOT_FOUND, NOT_MEMBER
        - 409 Conflict: OWNER_CANNOT_LEAVE
    """
    use_case = LeaveTeamUseCase(uow)
    result = await use_case.execute(current_user["user_id"], team_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
