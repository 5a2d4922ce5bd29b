from uuid import uuid4

import pytest

from teamspace.app.use_cases.projects import (
    ArchiveProjectUseCase,
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    GetTeamProjectsUseCase,
    ReorderProjectsCommand,
    ReorderProjectsUseCase,
    RestoreProjectUseCase,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from teamspace.domain.entities import ProjectStatus, TeamRole
from tests.unit.factories import make_membership, make_project, make_team, make_user


def given_role(mock_uow, role):
    """Make the acting user a team member with ``role`` (None for outsiders)"""
    team = make_team()
    user = make_user()
    membership = make_membership(team, user.id, role) if role else None
    mock_uow.teams.get_membership.return_value = membership
    mock_uow.projects.save.side_effect = lambda project: project
    return team, user


def assert_no_writes(mock_uow):
    mock_uow.projects.save.assert_not_called()
    mock_uow.projects.delete.assert_not_called()
    mock_uow.projects.update_positions.assert_not_called()
    mock_uow.commit.assert_not_called()


# ============================================================================
# Create / read
# ============================================================================


@pytest.mark.asyncio
async def test_create_project_appends_to_end(mock_uow):
    # Arrange
    team, user = given_role(mock_uow, TeamRole.admin)
    mock_uow.projects.get_next_position.return_value = 3

    # Act
    use_case = CreateProjectUseCase(mock_uow)
    result = await use_case.execute(
        str(user.id), str(team.id), CreateProjectCommand(name="Roadmap", description="Q3")
    )

    # Assert
    assert result.is_ok()
    project = result.value.project
    assert project.name == "Roadmap"
    assert project.status == "active"
    assert project.position == 3
    assert project.created_by == str(user.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_member_cannot_create_project(mock_uow):
    team, user = given_role(mock_uow, TeamRole.member)

    use_case = CreateProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(team.id), CreateProjectCommand(name="X"))

    assert result.error.code == "INSUFFICIENT_PERMISSION"
    assert "create projects" in result.error.message
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_create_project_rejects_blank_name(mock_uow):
    team, user = given_role(mock_uow, TeamRole.owner)

    use_case = CreateProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(team.id), CreateProjectCommand(name=" "))

    assert result.error.code == "PROJECT_NAME_INVALID"
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_get_project_requires_team_membership(mock_uow):
    team, user = given_role(mock_uow, None)
    project = make_project(team.id)
    mock_uow.projects.find_by_id.return_value = project

    use_case = GetProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(project.id))

    assert result.error.code == "NOT_MEMBER"


@pytest.mark.asyncio
async def test_get_project_as_member(mock_uow):
    team, user = given_role(mock_uow, TeamRole.member)
    project = make_project(team.id)
    mock_uow.projects.find_by_id.return_value = project

    use_case = GetProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(project.id))

    assert result.value.project.id == str(project.id)


@pytest.mark.asyncio
async def test_get_missing_project(mock_uow):
    mock_uow.projects.find_by_id.return_value = None

    use_case = GetProjectUseCase(mock_uow)
    result = await use_case.execute(str(uuid4()), str(uuid4()))

    assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_team_projects_passes_archive_filter(mock_uow):
    team, user = given_role(mock_uow, TeamRole.member)
    mock_uow.projects.find_by_team_id.return_value = [
        make_project(team.id, "A", 0),
        make_project(team.id, "B", 1),
    ]

    use_case = GetTeamProjectsUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(team.id), include_archived=True)

    assert [p.name for p in result.value.projects] == ["A", "B"]
    mock_uow.projects.find_by_team_id.assert_called_once_with(team.id, include_archived=True)


# ============================================================================
# Update / archive / restore / delete
# ============================================================================


@pytest.mark.asyncio
async def test_update_project(mock_uow):
    team, user = given_role(mock_uow, TeamRole.owner)
    project = make_project(team.id)
    mock_uow.projects.find_by_id.return_value = project

    use_case = UpdateProjectUseCase(mock_uow)
    result = await use_case.execute(
        str(user.id), str(project.id), UpdateProjectCommand(name="Renamed", description=None)
    )

    assert result.value.project.name == "Renamed"
    assert result.value.project.description is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_archived_project_fails_even_without_changes(mock_uow):
    team, user = given_role(mock_uow, TeamRole.owner)
    project = make_project(team.id).archive()
    mock_uow.projects.find_by_id.return_value = project

    use_case = UpdateProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(project.id), UpdateProjectCommand())

    assert result.error.code == "CANNOT_UPDATE_ARCHIVED_PROJECT"
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_noop_project_update_writes_nothing(mock_uow):
    team, user = given_role(mock_uow, TeamRole.admin)
    project = make_project(team.id)
    mock_uow.projects.find_by_id.return_value = project

    use_case = UpdateProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(project.id), UpdateProjectCommand())

    assert result.value.project.id == str(project.id)
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_archive_project(mock_uow):
    team, user = given_role(mock_uow, TeamRole.admin)
    project = make_project(team.id)
    mock_uow.projects.find_by_id.return_value = project

    use_case = ArchiveProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(project.id))

    assert result.value.project.status == "archived"
    saved = mock_uow.projects.save.call_args.args[0]
    assert saved.status is ProjectStatus.archived


@pytest.mark.asyncio
async def test_archive_twice(mock_uow):
    team, user = given_role(mock_uow, TeamRole.admin)
    mock_uow.projects.find_by_id.return_value = make_project(team.id).archive()

    use_case = ArchiveProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(uuid4()))

    assert result.error.code == "PROJECT_ALREADY_ARCHIVED"
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_restore_moves_project_to_end(mock_uow):
    team, user = given_role(mock_uow, TeamRole.owner)
    project = make_project(team.id, position=0).archive()
    mock_uow.projects.find_by_id.return_value = project
    mock_uow.projects.get_next_position.return_value = 5

    use_case = RestoreProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(project.id))

    assert result.value.project.status == "active"
    assert result.value.project.position == 5


@pytest.mark.asyncio
async def test_restore_active_project(mock_uow):
    team, user = given_role(mock_uow, TeamRole.owner)
    mock_uow.projects.find_by_id.return_value = make_project(team.id)

    use_case = RestoreProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(uuid4()))

    assert result.error.code == "PROJECT_NOT_ARCHIVED"
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_only_owner_deletes_project(mock_uow):
    team, user = given_role(mock_uow, TeamRole.admin)
    project = make_project(team.id)
    mock_uow.projects.find_by_id.return_value = project

    use_case = DeleteProjectUseCase(mock_uow)
    result = await use_case.execute(str(user.id), str(project.id))

    assert result.error.code == "INSUFFICIENT_PERMISSION"
    assert_no_writes(mock_uow)

    mock_uow.teams.get_membership.return_value = make_membership(team, user.id, TeamRole.owner)
    result = await use_case.execute(str(user.id), str(project.id))

    assert result.is_ok()
    mock_uow.projects.delete.assert_called_once_with(project.id)


# ============================================================================
# Reorder
# ============================================================================


def given_active_projects(mock_uow, team, count=3):
    projects = [make_project(team.id, f"P{i}", i) for i in range(count)]
    mock_uow.projects.find_by_team_id.return_value = projects
    return projects


@pytest.mark.asyncio
async def test_reorder_assigns_list_positions(mock_uow):
    team, user = given_role(mock_uow, TeamRole.admin)
    a, b, c = given_active_projects(mock_uow, team)

    use_case = ReorderProjectsUseCase(mock_uow)
    command = ReorderProjectsCommand(project_ids=[str(c.id), str(a.id), str(b.id)])
    result = await use_case.execute(str(user.id), str(team.id), command)

    assert result.is_ok()
    mock_uow.projects.update_positions.assert_called_once_with([(c.id, 0), (a.id, 1), (b.id, 2)])
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_reorder_rejects_duplicates(mock_uow):
    team, user = given_role(mock_uow, TeamRole.admin)
    a, b, c = given_active_projects(mock_uow, team)

    use_case = ReorderProjectsUseCase(mock_uow)
    command = ReorderProjectsCommand(project_ids=[str(a.id), str(a.id), str(b.id), str(c.id)])
    result = await use_case.execute(str(user.id), str(team.id), command)

    assert result.error.code == "REORDER_PROJECTS_INVALID"
    assert "Duplicate" in result.error.message
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_reorder_rejects_partial_list(mock_uow):
    team, user = given_role(mock_uow, TeamRole.admin)
    a, b, _ = given_active_projects(mock_uow, team)

    use_case = ReorderProjectsUseCase(mock_uow)
    command = ReorderProjectsCommand(project_ids=[str(a.id), str(b.id)])
    result = await use_case.execute(str(user.id), str(team.id), command)

    assert result.error.code == "REORDER_PROJECTS_INVALID"
    assert "Missing" in result.error.message
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_reorder_rejects_unknown_or_archived_ids(mock_uow):
    team, user = given_role(mock_uow, TeamRole.admin)
    a, b, c = given_active_projects(mock_uow, team)

    use_case = ReorderProjectsUseCase(mock_uow)
    command = ReorderProjectsCommand(
        project_ids=[str(a.id), str(b.id), str(c.id), str(uuid4())]
    )
    result = await use_case.execute(str(user.id), str(team.id), command)

    assert result.error.code == "REORDER_PROJECTS_INVALID"
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_member_cannot_reorder(mock_uow):
    team, user = given_role(mock_uow, TeamRole.member)

    use_case = ReorderProjectsUseCase(mock_uow)
    command = ReorderProjectsCommand(project_ids=[str(uuid4())])
    result = await use_case.execute(str(user.id), str(team.id), command)

    assert result.error.code == "INSUFFICIENT_PERMISSION"
    mock_uow.projects.find_by_team_id.assert_not_called()


@pytest.mark.asyncio
async def test_create_project_rejects_long_description_before_any_lookup(mock_uow):
    use_case = CreateProjectUseCase(mock_uow)
    result = await use_case.execute(
        str(uuid4()), str(uuid4()), CreateProjectCommand(name="Roadmap", description="d" * 1001)
    )

    assert result.error.code == "PROJECT_DESCRIPTION_INVALID"
    mock_uow.teams.get_membership.assert_not_awaited()
    mock_uow.projects.get_next_position.assert_not_awaited()
    assert_no_writes(mock_uow)


@pytest.mark.asyncio
async def test_update_project_rejects_long_description_before_any_lookup(mock_uow):
    use_case = UpdateProjectUseCase(mock_uow)
    result = await use_case.execute(
        str(uuid4()), str(uuid4()), UpdateProjectCommand(description="d" * 1001)
    )

    assert result.error.code == "PROJECT_DESCRIPTION_INVALID"
    mock_uow.projects.find_by_id.assert_not_awaited()
    mock_uow.teams.get_membership.assert_not_awaited()
    assert_no_writes(mock_uow)
