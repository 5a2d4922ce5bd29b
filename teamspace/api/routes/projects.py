from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from teamspace.api.error import raise_for_error
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.app.use_cases.projects import (
    ArchiveProjectUseCase,
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetProjectUseCase,
    GetTeamProjectsResponse,
    GetTeamProjectsUseCase,
    ProjectResponse,
    ReorderProjectsCommand,
    ReorderProjectsResponse,
    ReorderProjectsUseCase,
    RestoreProjectUseCase,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from teamspace.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Projects"])


class CreateProjectRequest(BaseModel):
    name: str = Field(..., description="Project name (1-100 characters)")
    description: Optional[str] = Field(None, description="Optional description")


class UpdateProjectRequest(BaseModel):
    name: Optional[str] = Field(None, description="New project name")
    description: Optional[str] = Field(None, description="New description, null clears it")


class ReorderProjectsRequest(BaseModel):
    project_ids: List[str] = Field(..., min_length=1, description="Active project ids in order")


@router.post(
    "/teams/{team_id}/projects",
    status_code=status.HTTP_201_CREATED,
    response_model=ProjectResponse,
)
async def create_project(
    team_id: str,
    request: CreateProjectRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Create Project - owner/admin only"""
    use_case = CreateProjectUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"],
        team_id,
        CreateProjectCommand(name=request.name, description=request.description),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/teams/{team_id}/projects",
    status_code=status.HTTP_200_OK,
    response_model=GetTeamProjectsResponse,
)
async def get_team_projects(
    team_id: str,
    include_archived: bool = Query(False),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List team projects by position"""
    use_case = GetTeamProjectsUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"], team_id, include_archived=include_archived
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/teams/{team_id}/projects/order",
    status_code=status.HTTP_200_OK,
    response_model=ReorderProjectsResponse,
)
async def reorder_projects(
    team_id: str,
    request: ReorderProjectsRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reorder Projects - owner/admin only

    Raises:
        - 409 Conflict: REORDER_PROJECTS_INVALID
    """
    use_case = ReorderProjectsUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"],
        team_id,
        ReorderProjectsCommand(project_ids=request.project_ids),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/projects/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse
)
async def get_project(
    project_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetProjectUseCase(uow)
    result = await use_case.execute(current_user["user_id"], project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/projects/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse
)
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Project - owner/admin only

    Raises:
        - 409 Conflict: CANNOT_UPDATE_ARCHIVED_PROJECT
    """
    command = UpdateProjectCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateProjectUseCase(uow)
    result = await use_case.execute(current_user["user_id"], project_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/projects/{project_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteProjectResponse,
)
async def delete_project(
    project_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete Project - team owner only"""
    use_case = DeleteProjectUseCase(uow)
    result = await use_case.execute(current_user["user_id"], project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/projects/{project_id}/archive",
    status_code=status.HTTP_200_OK,
    response_model=ProjectResponse,
)
async def archive_project(
    project_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Archive Project - owner/admin only

    Raises:
        - 409 Conflict: PROJECT_ALREADY_ARCHIVED
    """
    use_case = ArchiveProjectUseCase(uow)
    result = await use_case.execute(current_user["user_id"], project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/projects/{project_id}/restore",
    status_code=status.HTTP_200_OK,
    response_model=ProjectResponse,
)
async def restore_project(
    project_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Restore Project - owner/admin only

    Raises:
        - 409 Conflict: PROJECT_NOT_ARCHIVED
    """
    use_case = RestoreProjectUseCase(uow)
    result = await use_case.execute(current_user["user_id"], project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
