from uuid import uuid4

import pytest

from teamspace.domain.errors import (
    InvalidAvatarUrlError,
    InvalidEmailError,
    InvalidInvitationTokenError,
    InvalidTeamIdError,
    InvalidUserIdError,
    ProjectNameInvalidError,
    TeamNameInvalidError,
)
from teamspace.domain.value_objects import (
    AvatarUrl,
    Email,
    InvitationToken,
    ProjectName,
    TeamId,
    TeamName,
    UserId,
)


def test_user_id_accepts_uuid_string():
    raw = uuid4()
    assert UserId.create(str(raw)).value == raw
    assert UserId.create(raw) == UserId.create(str(raw))


def test_malformed_ids_raise_kind_specific_errors():
    with pytest.raises(InvalidUserIdError) as user_exc:
        UserId.create("not-a-uuid")
    with pytest.raises(InvalidTeamIdError) as team_exc:
        TeamId.create("not-a-uuid")

    assert user_exc.value.code == "INVALID_USER_ID"
    assert team_exc.value.code == "INVALID_TEAM_ID"
    assert team_exc.value.error.code == "INVALID_TEAM_ID"


def test_email_is_normalized():
    assert Email.create("  Alice@Example.COM ").value == "alice@example.com"
    assert Email.create("a@b.io") == Email.create("A@B.IO")


@pytest.mark.parametrize(
    "value",
    ["", "plain", "a@b", "a b@c.io", "@example.com", "alice@example..com", "alice.@example.com"],
)
def test_invalid_email_rejected(value):
    with pytest.raises(InvalidEmailError):
        Email.create(value)


def test_invitation_token_generation():
    token = InvitationToken.generate()
    assert len(token.value) == 64
    assert InvitationToken.create(token.value) == token
    assert InvitationToken.generate() != token


def test_invitation_token_rejects_foreign_values():
    with pytest.raises(InvalidInvitationTokenError):
        InvitationToken.create("abc")
    with pytest.raises(InvalidInvitationTokenError):
        InvitationToken.create("z" * 64)


def test_team_name_is_trimmed_and_bounded():
    assert TeamName.create("  Acme  ").value == "Acme"
    assert TeamName.create("x" * 100).value == "x" * 100

    with pytest.raises(TeamNameInvalidError):
        TeamName.create("   ")
    with pytest.raises(TeamNameInvalidError):
        TeamName.create("x" * 101)


def test_project_name_is_bounded():
    with pytest.raises(ProjectNameInvalidError):
        ProjectName.create("")
    with pytest.raises(ProjectNameInvalidError) as exc:
        ProjectName.create("p" * 101)
    assert exc.value.code == "PROJECT_NAME_INVALID"


def test_avatar_url():
    assert AvatarUrl.create(None) is None
    assert AvatarUrl.create("   ") is None
    assert AvatarUrl.create("https://cdn.example.com/a.png").value == "https://cdn.example.com/a.png"

    with pytest.raises(InvalidAvatarUrlError):
        AvatarUrl.create("http://cdn.example.com/a.png")
    with pytest.raises(InvalidAvatarUrlError):
        AvatarUrl.create("https://cdn.example.com/" + "a" * 500)
