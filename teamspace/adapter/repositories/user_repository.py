from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from teamspace.adapter.mappers import user_to_entity
from teamspace.adapter.tables import UserRecord
from teamspace.app.repositories.user_repository import IUserRepository
from teamspace.domain.entities import User
from teamspace.domain.value_objects import Email, UserId


class UserRepository(IUserRepository):
    """User lookup implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(UserRecord).where(UserRecord.id == user_id.value)
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()
        return user_to_entity(record) if record else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        stmt = select(UserRecord).where(UserRecord.email == email.value)
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()
        return user_to_entity(record) if record else None
