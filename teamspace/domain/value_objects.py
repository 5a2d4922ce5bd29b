"""
Teamspace Value Objects

Immutable, self-validating primitives. ``create`` is the validating
constructor for untrusted input; direct construction is reserved for
values reloaded from persistence.
"""

import re
import secrets
from typing import ClassVar, Optional, Type, Union
from urllib.parse import urlparse
from uuid import UUID

from pydantic import EmailStr, TypeAdapter, ValidationError

from teamspace.domain.base import DomainModel, generate_uuid
from teamspace.domain.errors import (
    InvalidAvatarUrlError,
    InvalidEmailError,
    InvalidInvitationIdError,
    InvalidInvitationTokenError,
    InvalidMembershipIdError,
    InvalidProjectIdError,
    InvalidTeamIdError,
    InvalidUserIdError,
    ProjectNameInvalidError,
    TeamNameInvalidError,
    TeamspaceError,
)

TOKEN_PATTERN = re.compile(r"^[a-f0-9]{64}$")
_EMAIL_ADAPTER = TypeAdapter(EmailStr)


# ============================================================================
# Identifiers
# ============================================================================


class EntityId(DomainModel):
    """UUID-based identifier; subclasses pick the error raised on bad input"""

    invalid_error: ClassVar[Type[TeamspaceError]] = InvalidUserIdError

    value: UUID

    @classmethod
    def create(cls, value: Union[str, UUID]):
        if isinstance(value, UUID):
            return cls(value=value)
        if not isinstance(value, str):
            raise cls.invalid_error(str(value))
        try:
            return cls(value=UUID(value.strip()))
        except ValueError:
            raise cls.invalid_error(value) from None

    @classmethod
    def generate(cls):
        return cls(value=generate_uuid())

    def __str__(self) -> str:
        return str(self.value)


class UserId(EntityId):
    invalid_error: ClassVar[Type[TeamspaceError]] = InvalidUserIdError


class TeamId(EntityId):
    invalid_error: ClassVar[Type[TeamspaceError]] = InvalidTeamIdError


class MembershipId(EntityId):
    invalid_error: ClassVar[Type[TeamspaceError]] = InvalidMembershipIdError


class InvitationId(EntityId):
    invalid_error: ClassVar[Type[TeamspaceError]] = InvalidInvitationIdError


class ProjectId(EntityId):
    invalid_error: ClassVar[Type[TeamspaceError]] = InvalidProjectIdError


# ============================================================================
# Strings
# ============================================================================


class Email(DomainModel):
    """Lower-cased, trimmed email address"""

    value: str

    @classmethod
    def create(cls, value: str) -> "Email":
        normalized = value.strip().lower() if isinstance(value, str) else ""
        try:
            _EMAIL_ADAPTER.validate_python(normalized)
        except ValidationError:
            raise InvalidEmailError(str(value)) from None
        return cls(value=normalized)

    def __str__(self) -> str:
        return self.value


class InvitationToken(DomainModel):
    """Opaque single-use token, 32 random bytes as 64 hex characters"""

    TOKEN_LENGTH: ClassVar[int] = 64

    value: str

    @classmethod
    def generate(cls) -> "InvitationToken":
        return cls(value=secrets.token_hex(32))

    @classmethod
    def create(cls, value: str) -> "InvitationToken":
        if not isinstance(value, str) or not TOKEN_PATTERN.match(value.lower()):
            raise InvalidInvitationTokenError()
        return cls(value=value.lower())

    def __str__(self) -> str:
        return self.value


class TeamName(DomainModel):
    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 100

    value: str

    @classmethod
    def create(cls, value: str) -> "TeamName":
        trimmed = value.strip()
        if len(trimmed) < cls.MIN_LENGTH:
            raise TeamNameInvalidError("Team name cannot be empty")
        if len(trimmed) > cls.MAX_LENGTH:
            raise TeamNameInvalidError(
                f"Team name must be at most {cls.MAX_LENGTH} characters"
            )
        return cls(value=trimmed)

    def __str__(self) -> str:
        return self.value


class ProjectName(DomainModel):
    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 100

    value: str

    @classmethod
    def create(cls, value: str) -> "ProjectName":
        trimmed = value.strip()
        if len(trimmed) < cls.MIN_LENGTH:
            raise ProjectNameInvalidError("Project name cannot be empty")
        if len(trimmed) > cls.MAX_LENGTH:
            raise ProjectNameInvalidError(
                f"Project name must be at most {cls.MAX_LENGTH} characters"
            )
        return cls(value=trimmed)

    def __str__(self) -> str:
        return self.value


class AvatarUrl(DomainModel):
    """Optional HTTPS avatar URL; blank input means no avatar"""

    MAX_LENGTH: ClassVar[int] = 500

    value: str

    @classmethod
    def create(cls, value: Optional[str]) -> Optional["AvatarUrl"]:
        if value is None or value.strip() == "":
            return None

        trimmed = value.strip()
        if len(trimmed) > cls.MAX_LENGTH:
            raise InvalidAvatarUrlError(
                f"Avatar URL must be at most {cls.MAX_LENGTH} characters"
            )

        parsed = urlparse(trimmed)
        if parsed.scheme != "https" or not parsed.netloc:
            raise InvalidAvatarUrlError("Avatar URL must be a valid HTTPS URL")

        return cls(value=trimmed)

    def __str__(self) -> str:
        return self.value
