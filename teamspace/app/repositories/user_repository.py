from abc import ABC, abstractmethod
from typing import Optional

from teamspace.domain.entities import User
from teamspace.domain.value_objects import Email, UserId


class IUserRepository(ABC):
    """User lookup interface - accounts are owned by the identity system"""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        pass
