from typing import List, Optional, Tuple

from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from teamspace.adapter.mappers import project_to_entity, project_to_record, to_db_time
from teamspace.adapter.tables import ProjectRecord
from teamspace.app.repositories.project_repository import IProjectRepository
from teamspace.domain.base import utcnow
from teamspace.domain.entities import Project, ProjectStatus
from teamspace.domain.value_objects import ProjectId, TeamId


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, project: Project) -> Project:
        stmt = select(ProjectRecord).where(ProjectRecord.id == project.id.value)
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()

        if record is None:
            self.session.add(project_to_record(project))
        else:
            record.name = project.name.value
            record.description = project.description
            record.status = project.status
            record.position = project.position
            record.updated_at = to_db_time(project.updated_at)
            self.session.add(record)

        await self.session.flush()
        return project

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        stmt = select(ProjectRecord).where(ProjectRecord.id == project_id.value)
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()
        return project_to_entity(record) if record else None

    async def find_by_team_id(
        self, team_id: TeamId, include_archived: bool = False
    ) -> List[Project]:
        stmt = select(ProjectRecord).where(ProjectRecord.team_id == team_id.value)
        if not include_archived:
            stmt = stmt.where(ProjectRecord.status == ProjectStatus.active)
        stmt = stmt.order_by(ProjectRecord.position, ProjectRecord.created_at)

        result = await self.session.execute(stmt)
        return [project_to_entity(record) for record in result.scalars().all()]

    async def delete(self, project_id: ProjectId) -> None:
        await self.session.execute(
            delete(ProjectRecord).where(ProjectRecord.id == project_id.value)
        )
        await self.session.flush()

    async def get_next_position(self, team_id: TeamId) -> int:
        stmt = select(func.max(ProjectRecord.position)).where(
            ProjectRecord.team_id == team_id.value
        )
        result = await self.session.execute(stmt)
        highest = result.scalar_one_or_none()
        return 0 if highest is None else highest + 1

    async def update_positions(self, positions: List[Tuple[ProjectId, int]]) -> None:
        now = to_db_time(utcnow())
        for project_id, position in positions:
            await self.session.execute(
                update(ProjectRecord)
                .where(ProjectRecord.id == project_id.value)
                .values(position=position, updated_at=now)
                .execution_options(synchronize_session="evaluate")
            )
        await self.session.flush()
