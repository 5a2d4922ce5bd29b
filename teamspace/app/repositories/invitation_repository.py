from abc import ABC, abstractmethod
from typing import List, Optional

from teamspace.app.repositories.read_models import InvitationWithTeamName
from teamspace.domain.entities import InvitationStatus, TeamInvitation
from teamspace.domain.value_objects import Email, InvitationId, InvitationToken, TeamId


class ITeamInvitationRepository(ABC):
    """Team invitation repository interface - application layer"""

    @abstractmethod
    async def create(self, invitation: TeamInvitation) -> TeamInvitation:
        pass

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Optional[TeamInvitation]:
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Optional[TeamInvitation]:
        pass

    @abstractmethod
    async def update(
        self,
        invitation: TeamInvitation,
        expected_status: Optional[InvitationStatus] = None,
    ) -> TeamInvitation:
        """Persist invitation state.

        When ``expected_status`` is given the write only applies if the stored
        status still equals it; otherwise InvitationNotPendingError is raised.
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> None:
        pass

    @abstractmethod
    async def find_pending_by_email(self, email: Email) -> List[InvitationWithTeamName]:
        """Get live pending invitations for an email, newest first"""
        pass

    @abstractmethod
    async def find_pending_by_team_and_email(
        self, team_id: TeamId, email: Email
    ) -> Optional[TeamInvitation]:
        """Get the live pending invitation for (team, email), if any"""
        pass

    @abstractmethod
    async def find_by_team(self, team_id: TeamId) -> List[TeamInvitation]:
        """Get all invitations of a team, newest first"""
        pass
