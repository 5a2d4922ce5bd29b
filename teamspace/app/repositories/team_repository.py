from abc import ABC, abstractmethod
from typing import List, Optional

from teamspace.app.repositories.read_models import (
    MembershipWithUser,
    TeamWithMembership,
    TeamWithRole,
)
from teamspace.domain.entities import Team, TeamMembership
from teamspace.domain.value_objects import Email, TeamId, UserId


class ITeamRepository(ABC):
    """Team repository interface - application layer

    Owns both teams and their memberships; memberships have no repository of
    their own because a membership never exists without its team.
    """

    @abstractmethod
    async def create(self, team: Team, owner_id: UserId) -> Team:
        """Create a team together with its owner membership, atomically"""
        pass

    @abstractmethod
    async def find_by_id(self, team_id: TeamId) -> Optional[Team]:
        pass

    @abstractmethod
    async def find_by_id_with_membership(
        self, team_id: TeamId, user_id: UserId
    ) -> Optional[TeamWithMembership]:
        """Get team and the user's membership; None when the team does not exist"""
        pass

    @abstractmethod
    async def update(self, team: Team) -> Team:
        pass

    @abstractmethod
    async def delete(self, team_id: TeamId) -> None:
        """Delete team, cascading memberships, invitations and projects"""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> List[TeamWithRole]:
        """Get all teams the user belongs to, with the user's role"""
        pass

    @abstractmethod
    async def get_memberships(self, team_id: TeamId) -> List[MembershipWithUser]:
        """Get team members with user details, ordered by join date"""
        pass

    @abstractmethod
    async def get_membership(
        self, team_id: TeamId, user_id: UserId
    ) -> Optional[TeamMembership]:
        pass

    @abstractmethod
    async def add_membership(self, membership: TeamMembership) -> TeamMembership:
        """Add membership; raises AlreadyMemberError on a duplicate (user, team)"""
        pass

    @abstractmethod
    async def update_membership(self, membership: TeamMembership) -> TeamMembership:
        pass

    @abstractmethod
    async def remove_membership(self, team_id: TeamId, user_id: UserId) -> None:
        pass

    @abstractmethod
    async def count_members(self, team_id: TeamId) -> int:
        pass

    @abstractmethod
    async def is_member(self, team_id: TeamId, user_id: UserId) -> bool:
        pass

    @abstractmethod
    async def is_email_member(self, team_id: TeamId, email: Email) -> bool:
        """True if a user with this email is already a member of the team"""
        pass
