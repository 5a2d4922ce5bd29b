"""
Remove Member Use Case

Handles removing a member from a team.
"""

import logging

from teamspace.app.services.team_permission import load_team_membership
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import (
    CannotRemoveOwnerError,
    InsufficientPermissionError,
    NotMemberError,
    TeamspaceError,
)
from teamspace.domain.value_objects import TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing a member from a team.

    Business Rules:
    - Only owner/admin can remove members
    - The owner can never be removed
    - Admin can only remove members, not other admins
    - Removing yourself is not allowed; use leave team instead
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: str, team_id: str, target_user_id: str
    ) -> Result[RemoveMemberResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(actor_user_id)
                team_vo = TeamId.create(team_id)
                target_id = UserId.create(target_user_id)

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)

                if not context.membership.can_manage_members():
                    raise InsufficientPermissionError("remove team members")

                target = await self.uow.teams.get_membership(team_vo, target_id)
                if target is None:
                    raise NotMemberError()

                if target.is_owner():
                    raise CannotRemoveOwnerError()

                if not context.membership.can_remove(target.role):
                    raise InsufficientPermissionError(f"remove a team {target.role.value}")

                if actor_id == target_id:
                    raise InsufficientPermissionError(
                        "remove yourself, use leave team instead"
                    )

                await self.uow.teams.remove_membership(team_vo, target_id)
                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info("User %s removed from team %s by user %s", target_id, team_vo, actor_id)
            return Return.ok(RemoveMemberResponse(success=True))
