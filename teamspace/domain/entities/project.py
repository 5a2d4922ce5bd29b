"""
Project Entity
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from teamspace.domain.base import DomainModel, utcnow
from teamspace.domain.errors import (
    CannotUpdateArchivedProjectError,
    ProjectDescriptionInvalidError,
    ProjectAlreadyArchivedError,
    ProjectNotArchivedError,
)
from teamspace.domain.value_objects import ProjectId, ProjectName, TeamId, UserId

from .enums import ProjectStatus

_UNSET = object()


def validate_description(description: Optional[str], max_length: int) -> Optional[str]:
    if description is not None and len(description) > max_length:
        raise ProjectDescriptionInvalidError(
            f"Description must be at most {max_length} characters"
        )
    return description


class Project(DomainModel):
    """
    Project entity - team-scoped work container.

    Business Rules:
    - Archived projects cannot be renamed or otherwise updated
    - archive requires active, restore requires archived
    - ``position`` orders the team's project list (ascending)
    - Description is optional, at most 1000 characters
    """

    DESCRIPTION_MAX_LENGTH: ClassVar[int] = 1000

    id: ProjectId
    team_id: TeamId
    name: ProjectName
    description: Optional[str] = None
    status: ProjectStatus = ProjectStatus.active
    position: int = 0
    created_by: UserId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def check_description(cls, description: Optional[str]) -> Optional[str]:
        return validate_description(description, cls.DESCRIPTION_MAX_LENGTH)

    @classmethod
    def create(
        cls,
        team_id: TeamId,
        name: ProjectName,
        created_by: UserId,
        position: int,
        description: Optional[str] = None,
    ) -> "Project":
        now = utcnow()
        return cls(
            id=ProjectId.generate(),
            team_id=team_id,
            name=name,
            description=validate_description(description, cls.DESCRIPTION_MAX_LENGTH),
            status=ProjectStatus.active,
            position=position,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )

    def is_active(self) -> bool:
        return self.status.is_active()

    def is_archived(self) -> bool:
        return self.status.is_archived()

    def update(self, name: Optional[ProjectName] = None, description=_UNSET) -> "Project":
        """Omit ``description`` to keep it, pass None to clear it"""
        if self.is_archived():
            raise CannotUpdateArchivedProjectError(str(self.id))

        changes = {"updated_at": utcnow()}
        if name is not None:
            changes["name"] = name
        if description is not _UNSET:
            changes["description"] = validate_description(
                description, self.DESCRIPTION_MAX_LENGTH
            )
        return self.model_copy(update=changes)

    def archive(self) -> "Project":
        if not self.status.can_archive():
            raise ProjectAlreadyArchivedError(str(self.id))
        return self.model_copy(
            update={"status": ProjectStatus.archived, "updated_at": utcnow()}
        )

    def restore(self) -> "Project":
        if not self.status.can_restore():
            raise ProjectNotArchivedError(str(self.id))
        return self.model_copy(
            update={"status": ProjectStatus.active, "updated_at": utcnow()}
        )

    def update_position(self, position: int) -> "Project":
        return self.model_copy(update={"position": position, "updated_at": utcnow()})
