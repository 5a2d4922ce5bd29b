from sqlmodel.ext.asyncio.session import AsyncSession

from teamspace.adapter.repositories.invitation_repository import TeamInvitationRepository
from teamspace.adapter.repositories.project_repository import ProjectRepository
from teamspace.adapter.repositories.team_repository import TeamRepository
from teamspace.adapter.repositories.user_repository import UserRepository
from teamspace.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.users = UserRepository(self.session)
        self.teams = TeamRepository(self.session)
        self.invitations = TeamInvitationRepository(self.session)
        self.projects = ProjectRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed inside the block is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
