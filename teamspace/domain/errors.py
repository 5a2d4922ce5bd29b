"""
Teamspace Domain Errors

Every expected failure of the engine is a TeamspaceError subclass with a
stable ``code`` and a ``category``. Domain objects raise them; use cases
convert them into ``Error`` values with ``exc.error``.
"""

from enum import Enum
from typing import Dict, Optional

from teamspace.libs.result import Error


class ErrorCategory(str, Enum):
    """Error kind, used by callers to pick a transport-level status"""

    validation = "validation"
    not_found = "not_found"
    permission = "permission"
    invariant = "invariant"
    conflict = "conflict"


_CATEGORIES: Dict[str, ErrorCategory] = {}


def category_for(code: str) -> Optional[ErrorCategory]:
    """Return the category registered for an error code, None if unknown"""
    return _CATEGORIES.get(code)


class TeamspaceError(Exception):
    code: str = "TEAMSPACE_ERROR"
    category: ErrorCategory = ErrorCategory.validation

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _CATEGORIES[cls.code] = cls.category

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def error(self) -> Error:
        return Error(self.code, self.message)


# ============================================================================
# Validation
# ============================================================================


class InvalidUserIdError(TeamspaceError):
    code = "INVALID_USER_ID"

    def __init__(self, value: str):
        super().__init__(f"Invalid user ID: {value}")


class InvalidTeamIdError(TeamspaceError):
    code = "INVALID_TEAM_ID"

    def __init__(self, value: str):
        super().__init__(f"Invalid team ID: {value}")


class InvalidMembershipIdError(TeamspaceError):
    code = "INVALID_MEMBERSHIP_ID"

    def __init__(self, value: str):
        super().__init__(f"Invalid membership ID: {value}")


class InvalidInvitationIdError(TeamspaceError):
    code = "INVALID_INVITATION_ID"

    def __init__(self, value: str):
        super().__init__(f"Invalid invitation ID: {value}")


class InvalidProjectIdError(TeamspaceError):
    code = "INVALID_PROJECT_ID"

    def __init__(self, value: str):
        super().__init__(f"Invalid project ID: {value}")


class InvalidEmailError(TeamspaceError):
    code = "INVALID_EMAIL"

    def __init__(self, value: str):
        super().__init__(f"Invalid email address: {value}")


class InvalidAvatarUrlError(TeamspaceError):
    code = "INVALID_AVATAR_URL"

    def __init__(self, reason: str):
        super().__init__(f"Invalid avatar URL: {reason}")


class TeamNameInvalidError(TeamspaceError):
    code = "TEAM_NAME_INVALID"

    def __init__(self, reason: str):
        super().__init__(f"Invalid team name: {reason}")


class TeamDescriptionInvalidError(TeamspaceError):
    code = "TEAM_DESCRIPTION_INVALID"

    def __init__(self, reason: str):
        super().__init__(f"Invalid team description: {reason}")


class ProjectNameInvalidError(TeamspaceError):
    code = "PROJECT_NAME_INVALID"

    def __init__(self, reason: str):
        super().__init__(f"Invalid project name: {reason}")


class ProjectDescriptionInvalidError(TeamspaceError):
    code = "PROJECT_DESCRIPTION_INVALID"

    def __init__(self, reason: str):
        super().__init__(f"Invalid project description: {reason}")


class InvalidTeamRoleError(TeamspaceError):
    code = "INVALID_TEAM_ROLE"

    def __init__(self, value: str, allowed: str = "owner, admin, member"):
        super().__init__(f"Invalid team role: {value}. Valid roles are: {allowed}")


class InvalidInvitationStatusError(TeamspaceError):
    code = "INVALID_INVITATION_STATUS"

    def __init__(self, value: str):
        super().__init__(f"Invalid invitation status: {value}")


class InvalidInvitationTokenError(TeamspaceError):
    code = "INVALID_INVITATION_TOKEN"

    def __init__(self):
        super().__init__("Invalid invitation token")


class InvalidProjectStatusError(TeamspaceError):
    code = "INVALID_PROJECT_STATUS"

    def __init__(self, value: str):
        super().__init__(f"Invalid project status: {value}. Valid statuses are: active, archived")


# ============================================================================
# Not found
# ============================================================================


class TeamNotFoundError(TeamspaceError):
    code = "TEAM_NOT_FOUND"
    category = ErrorCategory.not_found

    def __init__(self, team_id: Optional[str] = None):
        super().__init__(f"Team not found: {team_id}" if team_id else "Team not found")


class NotMemberError(TeamspaceError):
    code = "NOT_MEMBER"
    category = ErrorCategory.not_found

    def __init__(self):
        super().__init__("User is not a member of this team")


class InvitationNotFoundError(TeamspaceError):
    code = "INVITATION_NOT_FOUND"
    category = ErrorCategory.not_found

    def __init__(self):
        super().__init__("Invitation not found")


class ProjectNotFoundError(TeamspaceError):
    code = "PROJECT_NOT_FOUND"
    category = ErrorCategory.not_found

    def __init__(self, project_id: Optional[str] = None):
        super().__init__(
            f"Project not found: {project_id}" if project_id else "Project not found"
        )


# ============================================================================
# Permission
# ============================================================================


class InsufficientPermissionError(TeamspaceError):
    code = "INSUFFICIENT_PERMISSION"
    category = ErrorCategory.permission

    def __init__(self, action: Optional[str] = None):
        super().__init__(
            f"Insufficient permission to {action}" if action else "Insufficient permission"
        )


# ============================================================================
# Invariant violations
# ============================================================================


class CannotRemoveOwnerError(TeamspaceError):
    code = "CANNOT_REMOVE_OWNER"
    category = ErrorCategory.invariant

    def __init__(self):
        super().__init__("Cannot remove the team owner")


class CannotDemoteOwnerError(TeamspaceError):
    code = "CANNOT_DEMOTE_OWNER"
    category = ErrorCategory.invariant

    def __init__(self):
        super().__init__("Cannot demote the owner. Transfer ownership first.")


class OwnerCannotLeaveError(TeamspaceError):
    code = "OWNER_CANNOT_LEAVE"
    category = ErrorCategory.invariant

    def __init__(self):
        super().__init__(
            "Owner cannot leave the team. Transfer ownership first or delete the team."
        )


class InvitationExpiredError(TeamspaceError):
    code = "INVITATION_EXPIRED"
    category = ErrorCategory.invariant

    def __init__(self):
        super().__init__("Invitation has expired")


class InvitationNotPendingError(TeamspaceError):
    code = "INVITATION_NOT_PENDING"
    category = ErrorCategory.invariant

    def __init__(self):
        super().__init__("Invitation is no longer pending")


class InvitationEmailMismatchError(TeamspaceError):
    code = "INVITATION_EMAIL_MISMATCH"
    category = ErrorCategory.permission

    def __init__(self):
        super().__init__("This invitation was sent to a different email address")


class ProjectAlreadyArchivedError(TeamspaceError):
    code = "PROJECT_ALREADY_ARCHIVED"
    category = ErrorCategory.invariant

    def __init__(self, project_id: Optional[str] = None):
        super().__init__(
            f"Project is already archived: {project_id}"
            if project_id
            else "Project is already archived"
        )


class ProjectNotArchivedError(TeamspaceError):
    code = "PROJECT_NOT_ARCHIVED"
    category = ErrorCategory.invariant

    def __init__(self, project_id: Optional[str] = None):
        super().__init__(
            f"Project is not archived: {project_id}" if project_id else "Project is not archived"
        )


class CannotUpdateArchivedProjectError(TeamspaceError):
    code = "CANNOT_UPDATE_ARCHIVED_PROJECT"
    category = ErrorCategory.invariant

    def __init__(self, project_id: Optional[str] = None):
        super().__init__(
            f"Cannot update archived project: {project_id}"
            if project_id
            else "Cannot update archived project"
        )


# ============================================================================
# Conflicts
# ============================================================================


class AlreadyMemberError(TeamspaceError):
    code = "ALREADY_MEMBER"
    category = ErrorCategory.conflict

    def __init__(self, email: Optional[str] = None):
        super().__init__(
            f"User {email} is already a member of this team"
            if email
            else "User is already a member of this team"
        )


class InvitationAlreadyExistsError(TeamspaceError):
    code = "INVITATION_ALREADY_EXISTS"
    category = ErrorCategory.conflict

    def __init__(self, email: str):
        super().__init__(f"A pending invitation already exists for {email}")


class ReorderProjectsInvalidError(TeamspaceError):
    code = "REORDER_PROJECTS_INVALID"
    category = ErrorCategory.conflict

    def __init__(self, message: str):
        super().__init__(message)
