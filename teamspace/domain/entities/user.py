from typing import Optional

from teamspace.domain.base import DomainModel
from teamspace.domain.value_objects import AvatarUrl, Email, UserId


class User(DomainModel):
    """Read-only view of an account owned by the identity system"""

    id: UserId
    email: Email
    name: str
    avatar_url: Optional[AvatarUrl] = None
