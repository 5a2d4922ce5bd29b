"""
Teamspace Domain Enums

Closed sets parsed from untrusted strings exactly once, at the boundary.
"""

from enum import Enum

from teamspace.domain.errors import (
    InvalidInvitationStatusError,
    InvalidProjectStatusError,
    InvalidTeamRoleError,
)

# member < admin < owner
_ROLE_LEVELS = {"member": 1, "admin": 2, "owner": 3}


class TeamRole(str, Enum):
    """User role within a team, totally ordered"""

    owner = "owner"
    admin = "admin"
    member = "member"

    @classmethod
    def create(cls, value: str) -> "TeamRole":
        normalized = value.strip().lower() if isinstance(value, str) else value
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidTeamRoleError(str(value)) from None

    @property
    def level(self) -> int:
        return _ROLE_LEVELS[self.value]

    def is_owner(self) -> bool:
        return self is TeamRole.owner

    def is_admin(self) -> bool:
        return self is TeamRole.admin

    def is_member(self) -> bool:
        return self is TeamRole.member

    def is_at_least(self, role: "TeamRole") -> bool:
        return self.level >= role.level

    def is_higher_than(self, role: "TeamRole") -> bool:
        return self.level > role.level


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    expired = "expired"

    @classmethod
    def create(cls, value: str) -> "InvitationStatus":
        normalized = value.strip().lower() if isinstance(value, str) else value
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidInvitationStatusError(str(value)) from None

    def is_pending(self) -> bool:
        return self is InvitationStatus.pending

    def is_accepted(self) -> bool:
        return self is InvitationStatus.accepted

    def is_rejected(self) -> bool:
        return self is InvitationStatus.rejected

    def is_expired(self) -> bool:
        return self is InvitationStatus.expired


class ProjectStatus(str, Enum):
    """Project lifecycle state"""

    active = "active"
    archived = "archived"

    @classmethod
    def create(cls, value: str) -> "ProjectStatus":
        normalized = value.strip().lower() if isinstance(value, str) else value
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidProjectStatusError(str(value)) from None

    def is_active(self) -> bool:
        return self is ProjectStatus.active

    def is_archived(self) -> bool:
        return self is ProjectStatus.archived

    def can_archive(self) -> bool:
        return self.is_active()

    def can_restore(self) -> bool:
        return self.is_archived()
