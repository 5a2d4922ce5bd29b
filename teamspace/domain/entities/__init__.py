from .enums import InvitationStatus, ProjectStatus, TeamRole
from .invitation import TeamInvitation
from .membership import TeamMembership
from .project import Project
from .team import Team
from .user import User

__all__ = [
    "InvitationStatus",
    "ProjectStatus",
    "TeamRole",
    "Team",
    "TeamMembership",
    "TeamInvitation",
    "Project",
    "User",
]
