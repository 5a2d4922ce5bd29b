from teamspace.app.services.team_permission import load_team_membership
from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.base import utcnow
from teamspace.domain.errors import InsufficientPermissionError, TeamspaceError
from teamspace.domain.value_objects import TeamId, UserId
from teamspace.libs.result import Result, Return

from .dtos import GetTeamInvitationsResponse, InvitationInfo


class GetTeamInvitationsUseCase:
    """List all invitations of a team, newest first - owner/admin only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: str, team_id: str
    ) -> Result[GetTeamInvitationsResponse]:
        async with self.uow:
            try:
                actor_id = UserId.create(actor_user_id)
                team_vo = TeamId.create(team_id)

                context = await load_team_membership(self.uow.teams, team_vo, actor_id)

                if not context.membership.can_manage_members():
                    raise InsufficientPermissionError("view team invitations")

                invitations = await self.uow.invitations.find_by_team(team_vo)
            except TeamspaceError as exc:
                return Return.err(exc.error)

            now = utcnow()
            return Return.ok(
                GetTeamInvitationsResponse(
                    invitations=[
                        InvitationInfo.from_entity(invitation, now=now)
                        for invitation in invitations
                    ]
                )
            )
