"""
Change Member Role Use Case

Handles changing a member's role within a team.
"""

import logging

from teamspace.app.services.team_permission import (
    load_team_membership,
    parse_assignable_role,
)
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import (
    CannotDemoteOwnerError,
    InsufficientPermissionError,
    NotMemberError,
    TeamspaceError,
)
from teamspace.domain.value_objects import TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import ChangeMemberRoleCommand, ChangeMemberRoleResponse, MemberInfo

logger = logging.getLogger(__name__)


class ChangeMemberRoleUseCase:
    """
    Use case for changing a member's role within a team.

    Business Rules:
    - Role must be admin or member; owner is rejected as invalid input
    - Only owner/admin can change roles
    - The owner's role can never be changed
    - Admin cannot assign a role higher than its own
    - Admin cannot change another admin's role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_user_id: str,
        team_id: str,
        target_user_id: str,
        command: ChangeMemberRoleCommand,
    ) -> Result[ChangeMemberRoleResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(actor_user_id)
                team_vo = TeamId.create(team_id)
                target_id = UserId.create(target_user_id)
                new_role = parse_assignable_role(command.role)

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)
                actor_role = context.membership.role

                if not context.membership.can_change_roles():
                    raise InsufficientPermissionError("change member roles")

                target = await self.uow.teams.get_membership(team_vo, target_id)
                if target is None:
                    raise NotMemberError()

                if target.is_owner():
                    raise CannotDemoteOwnerError()

                if actor_role.is_admin() and new_role.is_higher_than(actor_role):
                    raise InsufficientPermissionError("assign a role higher than your own")

                if actor_role.is_admin() and target.is_admin():
                    raise InsufficientPermissionError("change another admin's role")

                old_role = target.role
                await self.uow.teams.update_membership(target.change_role(new_role))

                members = await self.uow.teams.get_memberships(team_vo)
                member = next(
                    (m for m in members if m.membership.user_id == target_id), None
                )
                if member is None:
                    raise NotMemberError()

                await self.uow.commit()
            except TeamspaceError as exc:
                return Return.err(exc.error)

            logger.info(
                "Role of user %s in team %s changed from %s to %s by user %s",
                target_id,
                team_vo,
                old_role.value,
                new_role.value,
                actor_id,
            )
            return Return.ok(ChangeMemberRoleResponse(member=MemberInfo.from_read_model(member)))
