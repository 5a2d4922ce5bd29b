from uuid import uuid4

import pytest

from teamspace.app.repositories.read_models import TeamWithRole
from teamspace.app.use_cases.teams import (
    CreateTeamCommand,
    CreateTeamUseCase,
    DeleteTeamUseCase,
    GetMyTeamsUseCase,
    GetTeamMembersUseCase,
    GetTeamUseCase,
    UpdateTeamCommand,
    UpdateTeamUseCase,
)
from teamspace.domain.entities import TeamRole
from teamspace.domain.value_objects import UserId
from tests.unit.factories import (
    make_membership,
    make_team,
    make_user,
    member_view,
    team_context,
)


@pytest.mark.asyncio
async def test_create_team_persists_team_with_owner(mock_uow):
    # Arrange
    user_id = str(uuid4())
    mock_uow.teams.create.side_effect = lambda team, owner_id: team

    # Act
    use_case = CreateTeamUseCase(mock_uow)
    result = await use_case.execute(user_id, CreateTeamCommand(name="  Acme  ", description="x"))

    # Assert
    assert result.is_ok()
    assert result.value.team.name == "Acme"
    team_arg, owner_arg = mock_uow.teams.create.call_args.args
    assert owner_arg == UserId.create(user_id)
    assert str(team_arg.name) == "Acme"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_team_rejects_blank_name_before_persistence(mock_uow):
    use_case = CreateTeamUseCase(mock_uow)
    result = await use_case.execute(str(uuid4()), CreateTeamCommand(name="   "))

    assert result.is_err()
    assert result.error.code == "TEAM_NAME_INVALID"
    mock_uow.teams.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_team_rejects_long_description(mock_uow):
    use_case = CreateTeamUseCase(mock_uow)
    result = await use_case.execute(
        str(uuid4()), CreateTeamCommand(name="Acme", description="d" * 1001)
    )

    assert result.error.code == "TEAM_DESCRIPTION_INVALID"
    mock_uow.teams.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_team_rejects_malformed_user_id(mock_uow):
    use_case = CreateTeamUseCase(mock_uow)
    result = await use_case.execute("nope", CreateTeamCommand(name="Acme"))

    assert result.error.code == "INVALID_USER_ID"


@pytest.mark.asyncio
async def test_get_team_returns_role_and_member_count(mock_uow):
    user = make_user()
    team = make_team()
    membership = make_membership(team, user.id, TeamRole.admin)
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, membership)
    mock_uow.teams.count_members.return_value = 4

    use_case = GetTeamUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(team.id))

    assert result.is_ok()
    assert result.value.role == "admin"
    assert result.value.member_count == 4
    assert result.value.team.id == str(team.id)


@pytest.mark.asyncio
async def test_get_team_not_found(mock_uow):
    mock_uow.teams.find_by_id_with_membership.return_value = None

    use_case = GetTeamUseCase(mock_uow)
    result = await use_case.execute(str(uuid4()), str(uuid4()))

    assert result.error.code == "TEAM_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_team_requires_membership(mock_uow):
    team = make_team()
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, None)

    use_case = GetTeamUseCase(mock_uow)
    result = await use_case.execute(str(uuid4()), str(team.id))

    assert result.error.code == "NOT_MEMBER"
    mock_uow.teams.count_members.assert_not_called()


@pytest.mark.asyncio
async def test_get_team_rejects_malformed_team_id(mock_uow):
    use_case = GetTeamUseCase(mock_uow)
    result = await use_case.execute(str(uuid4()), "bad-id")

    assert result.error.code == "INVALID_TEAM_ID"
    mock_uow.teams.find_by_id_with_membership.assert_not_called()


@pytest.mark.asyncio
async def test_get_my_teams(mock_uow):
    team = make_team()
    mock_uow.teams.find_by_user_id.return_value = [TeamWithRole(team=team, role=TeamRole.owner)]

    use_case = GetMyTeamsUseCase(mock_uow)
    result = await use_case.execute(str(uuid4()))

    assert result.is_ok()
    assert len(result.value.teams) == 1
    assert result.value.teams[0].role == "owner"
    assert result.value.teams[0].team.name == "Acme"


@pytest.mark.asyncio
async def test_update_team_by_admin(mock_uow):
    user = make_user()
    team = make_team()
    membership = make_membership(team, user.id, TeamRole.admin)
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, membership)
    mock_uow.teams.update.side_effect = lambda updated: updated

    use_case = UpdateTeamUseCase(mock_uow)
    result = await use_case.execute(
        str(user.id), str(team.id), UpdateTeamCommand(name="Renamed")
    )

    assert result.is_ok()
    assert result.value.team.name == "Renamed"
    assert result.value.team.description == team.description
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_team_clears_description_when_explicitly_null(mock_uow):
    user = make_user()
    team = make_team()
    membership = make_membership(team, user.id, TeamRole.owner)
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, membership)
    mock_uow.teams.update.side_effect = lambda updated: updated

    use_case = UpdateTeamUseCase(mock_uow)
    result = await use_case.execute(
        str(user.id), str(team.id), UpdateTeamCommand(description=None)
    )

    assert result.value.team.description is None


@pytest.mark.asyncio
async def test_update_team_denied_for_member(mock_uow):
    user = make_user()
    team = make_team()
    membership = make_membership(team, user.id, TeamRole.member)
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, membership)

    use_case = UpdateTeamUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(team.id), UpdateTeamCommand(name="X"))

    assert result.error.code == "INSUFFICIENT_PERMISSION"
    assert "update team" in result.error.message
    mock_uow.teams.update.assert_not_called()


@pytest.mark.asyncio
async def test_noop_update_requires_membership_and_writes_nothing(mock_uow):
    user = make_user()
    team = make_team()
    membership = make_membership(team, user.id, TeamRole.owner)
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, membership)

    use_case = UpdateTeamUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(team.id), UpdateTeamCommand())

    assert result.is_ok()
    assert result.value.team.id == str(team.id)
    mock_uow.teams.update.assert_not_called()
    mock_uow.commit.assert_not_called()

    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, None)
    result = await use_case.execute(str(uuid4()), str(team.id), UpdateTeamCommand())
    assert result.error.code == "NOT_MEMBER"


@pytest.mark.asyncio
async def test_delete_team_owner_only(mock_uow):
    user = make_user()
    team = make_team()
    admin = make_membership(team, user.id, TeamRole.admin)
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, admin)

    use_case = DeleteTeamUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(team.id))

    assert result.error.code == "INSUFFICIENT_PERMISSION"
    mock_uow.teams.delete.assert_not_called()

    owner = make_membership(team, user.id, TeamRole.owner)
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, owner)

    result = await use_case.execute(str(user.id), str(team.id))

    assert result.is_ok()
    assert result.value.success is True
    mock_uow.teams.delete.assert_called_once_with(team.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_get_team_members(mock_uow):
    owner_user = make_user("owner@example.com", "Owner")
    member_user = make_user("member@example.com", "Member")
    team = make_team()
    owner = make_membership(team, owner_user.id, TeamRole.owner)
    member = make_membership(team, member_user.id, TeamRole.member)
    mock_uow.teams.find_by_id_with_membership.return_value = team_context(team, member)
    mock_uow.teams.get_memberships.return_value = [
        member_view(owner, owner_user),
        member_view(member, member_user),
    ]

    use_case = GetTeamMembersUseCase(mock_uow)
    result = await use_case.execute(str(member_user.id), str(team.id))

    assert result.is_ok()
    assert [m.user_name for m in result.value.members] == ["Owner", "Member"]
    assert result.value.members[0].role == "owner"
    assert result.value.members[1].user_email == "member@example.com"


@pytest.mark.asyncio
async def test_update_team_rejects_long_description_before_loading_team(mock_uow):
    use_case = UpdateTeamUseCase(mock_uow)
    result = await use_case.execute(
        str(uuid4()), str(uuid4()), UpdateTeamCommand(description="d" * 1001)
    )

    assert result.error.code == "TEAM_DESCRIPTION_INVALID"
    mock_uow.teams.find_by_id_with_membership.assert_not_awaited()
    mock_uow.teams.update.assert_not_awaited()
