"""
SQLModel tables

Persistence records for the domain entities. Timestamps are stored as naive
UTC and get their timezone back in the mappers.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from teamspace.domain.entities import InvitationStatus, ProjectStatus, TeamRole


class UserRecord(SQLModel, table=True):
    """Account projection of the identity system, read-only for this service"""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True, nullable=False)
    name: str = Field(max_length=255, nullable=False)
    avatar_url: Optional[str] = Field(default=None, max_length=500)


class TeamRecord(SQLModel, table=True):
    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, nullable=False)
    description: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(sa_column=Column(DateTime, nullable=False))


class TeamMembershipRecord(SQLModel, table=True):
    __tablename__ = "team_memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)

    role: TeamRole = Field(nullable=False)
    joined_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_team_membership_user_team", "user_id", "team_id", unique=True),
    )


class TeamInvitationRecord(SQLModel, table=True):
    __tablename__ = "team_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)
    role: TeamRole = Field(nullable=False)
    invited_by: UUID = Field(foreign_key="users.id", nullable=False)
    token: str = Field(unique=True, index=True, max_length=64)
    status: InvitationStatus = Field(default=InvitationStatus.pending)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    responded_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    __table_args__ = (
        Index("idx_team_invitation_team_email", "team_id", "email"),
        Index("idx_team_invitation_status", "status"),
    )


class ProjectRecord(SQLModel, table=True):
    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    name: str = Field(max_length=100, nullable=False)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: ProjectStatus = Field(default=ProjectStatus.active)
    position: int = Field(default=0, nullable=False)
    created_by: UUID = Field(foreign_key="users.id", nullable=False)

    created_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_project_team_status", "team_id", "status"),)
