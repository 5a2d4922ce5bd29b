from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from teamspace.domain.entities import Project
from teamspace.domain.value_objects import ProjectId, TeamId


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Insert or update a project"""
        pass

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        pass

    @abstractmethod
    async def find_by_team_id(
        self, team_id: TeamId, include_archived: bool = False
    ) -> List[Project]:
        """Get team projects ordered by position"""
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> None:
        pass

    @abstractmethod
    async def get_next_position(self, team_id: TeamId) -> int:
        """One past the highest position in the team, 0 for an empty team"""
        pass

    @abstractmethod
    async def update_positions(self, positions: List[Tuple[ProjectId, int]]) -> None:
        pass
