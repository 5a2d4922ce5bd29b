from typing import List, Optional

from sqlalchemy import delete, func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from teamspace.adapter.mappers import (
    membership_to_entity,
    membership_to_record,
    team_to_entity,
    team_to_record,
    to_db_time,
)
from teamspace.adapter.tables import (
    ProjectRecord,
    TeamInvitationRecord,
    TeamMembershipRecord,
    TeamRecord,
    UserRecord,
)
from teamspace.app.repositories.read_models import (
    MembershipWithUser,
    TeamWithMembership,
    TeamWithRole,
)
from teamspace.app.repositories.team_repository import ITeamRepository
from teamspace.domain.entities import Team, TeamMembership
from teamspace.domain.errors import AlreadyMemberError, NotMemberError, TeamNotFoundError
from teamspace.domain.value_objects import Email, TeamId, UserId


class TeamRepository(ITeamRepository):
    """Team and membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, team: Team, owner_id: UserId) -> Team:
        """Insert team and owner membership in the same flush"""
        self.session.add(team_to_record(team))
        self.session.add(
            membership_to_record(TeamMembership.create_owner(user_id=owner_id, team_id=team.id))
        )
        await self.session.flush()
        return team

    async def find_by_id(self, team_id: TeamId) -> Optional[Team]:
        record = await self._get_team_record(team_id)
        return team_to_entity(record) if record else None

    async def find_by_id_with_membership(
        self, team_id: TeamId, user_id: UserId
    ) -> Optional[TeamWithMembership]:
        record = await self._get_team_record(team_id)
        if record is None:
            return None

        membership = await self.get_membership(team_id, user_id)
        return TeamWithMembership(team=team_to_entity(record), membership=membership)

    async def update(self, team: Team) -> Team:
        record = await self._get_team_record(team.id)
        if record is None:
            raise TeamNotFoundError(str(team.id))

        record.name = team.name.value
        record.description = team.description
        record.updated_at = to_db_time(team.updated_at)
        self.session.add(record)
        await self.session.flush()
        return team

    async def delete(self, team_id: TeamId) -> None:
        """Delete projects, invitations and memberships, then the team"""
        for table in (ProjectRecord, TeamInvitationRecord, TeamMembershipRecord):
            await self.session.execute(delete(table).where(table.team_id == team_id.value))
        await self.session.execute(delete(TeamRecord).where(TeamRecord.id == team_id.value))
        await self.session.flush()

    async def find_by_user_id(self, user_id: UserId) -> List[TeamWithRole]:
        stmt = (
            select(TeamRecord, TeamMembershipRecord.role)
            .join(TeamMembershipRecord, TeamMembershipRecord.team_id == TeamRecord.id)
            .where(TeamMembershipRecord.user_id == user_id.value)
            .order_by(TeamMembershipRecord.joined_at)
        )
        result = await self.session.execute(stmt)
        return [
            TeamWithRole(team=team_to_entity(record), role=role)
            for record, role in result.all()
        ]

    async def get_memberships(self, team_id: TeamId) -> List[MembershipWithUser]:
        stmt = (
            select(TeamMembershipRecord, UserRecord)
            .join(UserRecord, UserRecord.id == TeamMembershipRecord.user_id)
            .where(TeamMembershipRecord.team_id == team_id.value)
            .order_by(TeamMembershipRecord.joined_at)
        )
        result = await self.session.execute(stmt)
        return [
            MembershipWithUser(
                membership=membership_to_entity(membership),
                user_name=user.name,
                user_email=user.email,
                user_avatar_url=user.avatar_url,
            )
            for membership, user in result.all()
        ]

    async def get_membership(
        self, team_id: TeamId, user_id: UserId
    ) -> Optional[TeamMembership]:
        record = await self._get_membership_record(team_id, user_id)
        return membership_to_entity(record) if record else None

    async def add_membership(self, membership: TeamMembership) -> TeamMembership:
        self.session.add(membership_to_record(membership))
        try:
            await self.session.flush()
        except IntegrityError:
            raise AlreadyMemberError() from None
        return membership

    async def update_membership(self, membership: TeamMembership) -> TeamMembership:
        record = await self._get_membership_record(membership.team_id, membership.user_id)
        if record is None:
            raise NotMemberError()

        record.role = membership.role
        self.session.add(record)
        await self.session.flush()
        return membership

    async def remove_membership(self, team_id: TeamId, user_id: UserId) -> None:
        await self.session.execute(
            delete(TeamMembershipRecord).where(
                TeamMembershipRecord.team_id == team_id.value,
                TeamMembershipRecord.user_id == user_id.value,
            )
        )
        await self.session.flush()

    async def count_members(self, team_id: TeamId) -> int:
        stmt = (
            select(func.count())
            .select_from(TeamMembershipRecord)
            .where(TeamMembershipRecord.team_id == team_id.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def is_member(self, team_id: TeamId, user_id: UserId) -> bool:
        return await self._get_membership_record(team_id, user_id) is not None

    async def is_email_member(self, team_id: TeamId, email: Email) -> bool:
        stmt = (
            select(TeamMembershipRecord.id)
            .join(UserRecord, UserRecord.id == TeamMembershipRecord.user_id)
            .where(
                TeamMembershipRecord.team_id == team_id.value,
                UserRecord.email == email.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def _get_team_record(self, team_id: TeamId) -> Optional[TeamRecord]:
        stmt = select(TeamRecord).where(TeamRecord.id == team_id.value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_membership_record(
        self, team_id: TeamId, user_id: UserId
    ) -> Optional[TeamMembershipRecord]:
        stmt = select(TeamMembershipRecord).where(
            TeamMembershipRecord.team_id == team_id.value,
            TeamMembershipRecord.user_id == user_id.value,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
