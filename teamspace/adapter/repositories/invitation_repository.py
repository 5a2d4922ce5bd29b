from typing import List, Optional

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from teamspace.adapter.mappers import (
    invitation_to_entity,
    invitation_to_record,
    to_db_time,
)
from teamspace.adapter.tables import TeamInvitationRecord, TeamRecord, UserRecord
from teamspace.app.repositories.invitation_repository import ITeamInvitationRepository
from teamspace.app.repositories.read_models import InvitationWithTeamName
from teamspace.domain.base import utcnow
from teamspace.domain.entities import InvitationStatus, TeamInvitation
from teamspace.domain.errors import InvitationNotFoundError, InvitationNotPendingError
from teamspace.domain.value_objects import Email, InvitationId, InvitationToken, TeamId

UNKNOWN_INVITER_NAME = "Unknown"


class TeamInvitationRepository(ITeamInvitationRepository):
    """Team invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invitation: TeamInvitation) -> TeamInvitation:
        self.session.add(invitation_to_record(invitation))
        await self.session.flush()
        return invitation

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[TeamInvitation]:
        stmt = select(TeamInvitationRecord).where(
            TeamInvitationRecord.id == invitation_id.value
        )
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()
        return invitation_to_entity(record) if record else None

    async def find_by_token(self, token: InvitationToken) -> Optional[TeamInvitation]:
        stmt = select(TeamInvitationRecord).where(TeamInvitationRecord.token == token.value)
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()
        return invitation_to_entity(record) if record else None

    async def update(
        self,
        invitation: TeamInvitation,
        expected_status: Optional[InvitationStatus] = None,
    ) -> TeamInvitation:
        """Conditional UPDATE guarded by the expected current status"""
        stmt = (
            update(TeamInvitationRecord)
            .where(TeamInvitationRecord.id == invitation.id.value)
            .values(
                status=invitation.status,
                responded_at=to_db_time(invitation.responded_at),
                expires_at=to_db_time(invitation.expires_at),
            )
            .execution_options(synchronize_session="evaluate")
        )
        if expected_status is not None:
            stmt = stmt.where(TeamInvitationRecord.status == expected_status)

        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            if expected_status is not None:
                raise InvitationNotPendingError()
            raise InvitationNotFoundError()

        await self.session.flush()
        return invitation

    async def delete(self, invitation_id: InvitationId) -> None:
        await self.session.execute(
            delete(TeamInvitationRecord).where(TeamInvitationRecord.id == invitation_id.value)
        )
        await self.session.flush()

    async def find_pending_by_email(self, email: Email) -> List[InvitationWithTeamName]:
        stmt = (
            select(TeamInvitationRecord, TeamRecord.name, UserRecord.name)
            .join(TeamRecord, TeamRecord.id == TeamInvitationRecord.team_id)
            .outerjoin(UserRecord, UserRecord.id == TeamInvitationRecord.invited_by)
            .where(
                TeamInvitationRecord.email == email.value,
                TeamInvitationRecord.status == InvitationStatus.pending,
                TeamInvitationRecord.expires_at >= to_db_time(utcnow()),
            )
            .order_by(TeamInvitationRecord.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [
            InvitationWithTeamName(
                invitation=invitation_to_entity(record),
                team_name=team_name,
                inviter_name=inviter_name or UNKNOWN_INVITER_NAME,
            )
            for record, team_name, inviter_name in result.all()
        ]

    async def find_pending_by_team_and_email(
        self, team_id: TeamId, email: Email
    ) -> Optional[TeamInvitation]:
        stmt = (
            select(TeamInvitationRecord)
            .where(
                TeamInvitationRecord.team_id == team_id.value,
                TeamInvitationRecord.email == email.value,
                TeamInvitationRecord.status == InvitationStatus.pending,
                TeamInvitationRecord.expires_at >= to_db_time(utcnow()),
            )
            .order_by(TeamInvitationRecord.created_at.desc())
        )
        result = await self.session.execute(stmt)
        record = result.scalars().first()
        return invitation_to_entity(record) if record else None

    async def find_by_team(self, team_id: TeamId) -> List[TeamInvitation]:
        stmt = (
            select(TeamInvitationRecord)
            .where(TeamInvitationRecord.team_id == team_id.value)
            .order_by(TeamInvitationRecord.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [invitation_to_entity(record) for record in result.scalars().all()]
