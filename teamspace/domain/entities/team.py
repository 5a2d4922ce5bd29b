"""
Team Entity

Tenant grouping users and projects.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from teamspace.domain.base import DomainModel, utcnow
from teamspace.domain.errors import TeamDescriptionInvalidError
from teamspace.domain.value_objects import TeamId, TeamName

_UNSET = object()


def validate_description(description: Optional[str], max_length: int) -> Optional[str]:
    if description is not None and len(description) > max_length:
        raise TeamDescriptionInvalidError(
            f"Description must be at most {max_length} characters"
        )
    return description


class Team(DomainModel):
    """
    Team entity - team identity and metadata.

    Business Rules:
    - Name is 1-100 characters after trimming (TeamName)
    - Description is optional, at most 1000 characters
    - Created together with exactly one owner membership (persistence does it atomically)
    - Memberships, invitations and projects reference the team by id only
    """

    DESCRIPTION_MAX_LENGTH: ClassVar[int] = 1000

    id: TeamId
    name: TeamName
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def check_description(cls, description: Optional[str]) -> Optional[str]:
        return validate_description(description, cls.DESCRIPTION_MAX_LENGTH)

    @classmethod
    def create(cls, name: TeamName, description: Optional[str] = None) -> "Team":
        now = utcnow()
        return cls(
            id=TeamId.generate(),
            name=name,
            description=validate_description(description, cls.DESCRIPTION_MAX_LENGTH),
            created_at=now,
            updated_at=now,
        )

    def update_name(self, name: TeamName) -> "Team":
        return self.model_copy(update={"name": name, "updated_at": utcnow()})

    def update_description(self, description: Optional[str]) -> "Team":
        return self.model_copy(
            update={
                "description": validate_description(
                    description, self.DESCRIPTION_MAX_LENGTH
                ),
                "updated_at": utcnow(),
            }
        )

    def update(self, name: Optional[TeamName] = None, description=_UNSET) -> "Team":
        """Apply the given changes; omit ``description`` to keep it, pass None to clear it"""
        changes = {"updated_at": utcnow()}
        if name is not None:
            changes["name"] = name
        if description is not _UNSET:
            changes["description"] = validate_description(
                description, self.DESCRIPTION_MAX_LENGTH
            )
        return self.model_copy(update=changes)
