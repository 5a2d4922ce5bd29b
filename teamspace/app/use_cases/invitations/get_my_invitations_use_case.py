from teamspace.app.services.unit_of_work import UnitOfWork
from teamspace.domain.errors import TeamspaceError
from teamspace.domain.value_objects import UserId
from teamspace.libs.result import Result, Return

from .dtos import GetMyInvitationsResponse, InvitationInfo, InvitationWithTeamInfo


class GetMyInvitationsUseCase:
    """
    List live pending invitations addressed to the caller's email.

    An unknown user simply has no invitations.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[GetMyInvitationsResponse]:
        async with self.uow:
            try:
                user_vo = UserId.create(user_id)
            except TeamspaceError as exc:
                return Return.err(exc.error)

            user = await self.uow.users.find_by_id(user_vo)
            if user is None:
                return Return.ok(GetMyInvitationsResponse(invitations=[]))

            pending = await self.uow.invitations.find_pending_by_email(user.email)

            return Return.ok(
                GetMyInvitationsResponse(
                    invitations=[
                        InvitationWithTeamInfo(
                            invitation=InvitationInfo.from_entity(
                                item.invitation, inviter_name=item.inviter_name
                            ),
                            team_name=item.team_name,
                            inviter_name=item.inviter_name,
                        )
                        for item in pending
                    ]
                )
            )
