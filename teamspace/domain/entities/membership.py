"""
TeamMembership Entity

Binds a user to a team with a role.
"""

from datetime import datetime

from pydantic import Field

from teamspace.domain.base import DomainModel, utcnow
from teamspace.domain.value_objects import MembershipId, TeamId, UserId

from .enums import TeamRole


class TeamMembership(DomainModel):
    """
    TeamMembership entity - a user's role within a team.

    Business Rules:
    - (user_id, team_id) is unique (enforced by persistence)
    - Exactly one owner per team; the owner is never demoted, removed or allowed to leave
    - Capability predicates only look at this membership's role; decisions that
      compare actor and target are made by the use cases
    """

    id: MembershipId
    user_id: UserId
    team_id: TeamId
    role: TeamRole
    joined_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def create(cls, user_id: UserId, team_id: TeamId, role: TeamRole) -> "TeamMembership":
        return cls(
            id=MembershipId.generate(),
            user_id=user_id,
            team_id=team_id,
            role=role,
            joined_at=utcnow(),
        )

    @classmethod
    def create_owner(cls, user_id: UserId, team_id: TeamId) -> "TeamMembership":
        return cls.create(user_id=user_id, team_id=team_id, role=TeamRole.owner)

    def is_owner(self) -> bool:
        return self.role.is_owner()

    def is_admin(self) -> bool:
        return self.role.is_admin()

    def is_member(self) -> bool:
        return self.role.is_member()

    def can_manage_members(self) -> bool:
        return self.role.is_at_least(TeamRole.admin)

    def can_modify_team(self) -> bool:
        return self.role.is_at_least(TeamRole.admin)

    def can_delete_team(self) -> bool:
        return self.role.is_owner()

    def can_invite_as(self, invite_role: TeamRole) -> bool:
        # Ownership is never granted through an invitation
        if self.role.is_owner():
            return not invite_role.is_owner()
        if self.role.is_admin():
            return invite_role.is_member()
        return False

    def can_remove(self, target_role: TeamRole) -> bool:
        if target_role.is_owner():
            return False
        if self.role.is_owner():
            return True
        if self.role.is_admin():
            return target_role.is_member()
        return False

    def can_change_roles(self) -> bool:
        return self.role.is_at_least(TeamRole.admin)

    def change_role(self, new_role: TeamRole) -> "TeamMembership":
        """Return a copy with ``new_role``; callers have already authorized the change"""
        return self.model_copy(update={"role": new_role})
