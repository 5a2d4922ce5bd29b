import itertools

import pytest

from teamspace.domain.entities import InvitationStatus, ProjectStatus, TeamRole
from teamspace.domain.errors import (
    InvalidInvitationStatusError,
    InvalidProjectStatusError,
    InvalidTeamRoleError,
)

ORDER = [TeamRole.member, TeamRole.admin, TeamRole.owner]


@pytest.mark.parametrize("role", list(TeamRole))
def test_role_parses_from_its_own_value(role):
    assert TeamRole.create(role.value) is role


def test_role_parsing_normalizes_case_and_whitespace():
    assert TeamRole.create(" Admin ") is TeamRole.admin


@pytest.mark.parametrize("value", ["", "viewer", "root", "owners"])
def test_unknown_role_rejected(value):
    with pytest.raises(InvalidTeamRoleError) as exc:
        TeamRole.create(value)
    assert exc.value.code == "INVALID_TEAM_ROLE"


def test_roles_are_totally_ordered():
    for low, high in itertools.combinations(ORDER, 2):
        assert high.is_at_least(low)
        assert not low.is_at_least(high)
        assert high.is_higher_than(low)
        assert not low.is_higher_than(high)

    for role in ORDER:
        assert role.is_at_least(role)
        assert not role.is_higher_than(role)


def test_role_predicates():
    assert TeamRole.owner.is_owner() and not TeamRole.owner.is_admin()
    assert TeamRole.admin.is_admin() and not TeamRole.admin.is_member()
    assert TeamRole.member.is_member() and not TeamRole.member.is_owner()


def test_status_enums_parse_and_reject():
    assert InvitationStatus.create("PENDING") is InvitationStatus.pending
    assert ProjectStatus.create("archived").can_restore()
    assert ProjectStatus.active.can_archive()

    with pytest.raises(InvalidInvitationStatusError):
        InvitationStatus.create("cancelled")
    with pytest.raises(InvalidProjectStatusError):
        ProjectStatus.create("deleted")
