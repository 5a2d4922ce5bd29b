"""
Project Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from teamspace.domain.entities import Project


# ============================================================================
# Command DTOs
# ============================================================================


class CreateProjectCommand(BaseModel):
    name: str
    description: Optional[str] = None


class UpdateProjectCommand(BaseModel):
    """Only explicitly set fields are applied; ``description: null`` clears it"""

    name: Optional[str] = None
    description: Optional[str] = None

    def has_changes(self) -> bool:
        return bool(self.model_fields_set & {"name", "description"})


class ReorderProjectsCommand(BaseModel):
    """Every active project id of the team, in the desired order"""

    project_ids: List[str] = Field(min_length=1)


# ============================================================================
# Response DTOs
# ============================================================================


class ProjectInfo(BaseModel):
    id: str
    team_id: str
    name: str
    description: Optional[str] = None
    status: str
    position: int
    created_by: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectInfo":
        return cls(
            id=str(project.id),
            team_id=str(project.team_id),
            name=str(project.name),
            description=project.description,
            status=project.status.value,
            position=project.position,
            created_by=str(project.created_by),
            created_at=project.created_at.isoformat(),
            updated_at=project.updated_at.isoformat(),
        )


class ProjectResponse(BaseModel):
    project: ProjectInfo


class GetTeamProjectsResponse(BaseModel):
    projects: List[ProjectInfo] = Field(default_factory=list)


class DeleteProjectResponse(BaseModel):
    success: bool = True


class ReorderProjectsResponse(BaseModel):
    success: bool = True
