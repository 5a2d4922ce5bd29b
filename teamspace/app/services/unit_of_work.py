from abc import ABC, abstractmethod

from teamspace.app.repositories.invitation_repository import ITeamInvitationRepository
from teamspace.app.repositories.project_repository import IProjectRepository
from teamspace.app.repositories.team_repository import ITeamRepository
from teamspace.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    teams: ITeamRepository
    invitations: ITeamInvitationRepository
    projects: IProjectRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
