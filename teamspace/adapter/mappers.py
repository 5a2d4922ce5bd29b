"""Conversions between domain entities and SQLModel records"""

from datetime import UTC, datetime
from typing import Optional

from teamspace.domain.entities import Project, Team, TeamInvitation, TeamMembership, User
from teamspace.domain.value_objects import (
    AvatarUrl,
    Email,
    InvitationId,
    InvitationToken,
    MembershipId,
    ProjectId,
    ProjectName,
    TeamId,
    TeamName,
    UserId,
)

from .tables import (
    ProjectRecord,
    TeamInvitationRecord,
    TeamMembershipRecord,
    TeamRecord,
    UserRecord,
)


def to_db_time(value: Optional[datetime]) -> Optional[datetime]:
    """Naive UTC for storage"""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.replace(tzinfo=None)


def from_db_time(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def user_to_entity(record: UserRecord) -> User:
    return User(
        id=UserId(value=record.id),
        email=Email(value=record.email),
        name=record.name,
        avatar_url=AvatarUrl(value=record.avatar_url) if record.avatar_url else None,
    )


def team_to_entity(record: TeamRecord) -> Team:
    return Team(
        id=TeamId(value=record.id),
        name=TeamName(value=record.name),
        description=record.description,
        created_at=from_db_time(record.created_at),
        updated_at=from_db_time(record.updated_at),
    )


def team_to_record(team: Team) -> TeamRecord:
    return TeamRecord(
        id=team.id.value,
        name=team.name.value,
        description=team.description,
        created_at=to_db_time(team.created_at),
        updated_at=to_db_time(team.updated_at),
    )


def membership_to_entity(record: TeamMembershipRecord) -> TeamMembership:
    return TeamMembership(
        id=MembershipId(value=record.id),
        user_id=UserId(value=record.user_id),
        team_id=TeamId(value=record.team_id),
        role=record.role,
        joined_at=from_db_time(record.joined_at),
    )


def membership_to_record(membership: TeamMembership) -> TeamMembershipRecord:
    return TeamMembershipRecord(
        id=membership.id.value,
        user_id=membership.user_id.value,
        team_id=membership.team_id.value,
        role=membership.role,
        joined_at=to_db_time(membership.joined_at),
    )


def invitation_to_entity(record: TeamInvitationRecord) -> TeamInvitation:
    return TeamInvitation(
        id=InvitationId(value=record.id),
        team_id=TeamId(value=record.team_id),
        email=Email(value=record.email),
        role=record.role,
        invited_by=UserId(value=record.invited_by),
        token=InvitationToken(value=record.token),
        status=record.status,
        expires_at=from_db_time(record.expires_at),
        created_at=from_db_time(record.created_at),
        responded_at=from_db_time(record.responded_at),
    )


def invitation_to_record(invitation: TeamInvitation) -> TeamInvitationRecord:
    return TeamInvitationRecord(
        id=invitation.id.value,
        team_id=invitation.team_id.value,
        email=invitation.email.value,
        role=invitation.role,
        invited_by=invitation.invited_by.value,
        token=invitation.token.value,
        status=invitation.status,
        expires_at=to_db_time(invitation.expires_at),
        created_at=to_db_time(invitation.created_at),
        responded_at=to_db_time(invitation.responded_at),
    )


def project_to_entity(record: ProjectRecord) -> Project:
    return Project(
        id=ProjectId(value=record.id),
        team_id=TeamId(value=record.team_id),
        name=ProjectName(value=record.name),
        description=record.description,
        status=record.status,
        position=record.position,
        created_by=UserId(value=record.created_by),
        created_at=from_db_time(record.created_at),
        updated_at=from_db_time(record.updated_at),
    )


def project_to_record(project: Project) -> ProjectRecord:
    return ProjectRecord(
        id=project.id.value,
        team_id=project.team_id.value,
        name=project.name.value,
        description=project.description,
        status=project.status,
        position=project.position,
        created_by=project.created_by.value,
        created_at=to_db_time(project.created_at),
        updated_at=to_db_time(project.updated_at),
    )
