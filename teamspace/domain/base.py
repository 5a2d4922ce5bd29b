import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict


def generate_uuid() -> uuid.UUID:
    return uuid.uuid4()


def utcnow() -> datetime:
    return datetime.now(UTC)


class DomainModel(BaseModel):
    """Immutable base for value objects and entities.

    State transitions return new instances (model_copy) instead of mutating.
    """

    model_config = ConfigDict(frozen=True)
