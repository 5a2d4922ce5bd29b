import pytest
from httpx import AsyncClient

from tests.integration.api.flows import API, create_team, join


@pytest.fixture
def team_url():
    return lambda team_id, *parts: "/".join([f"{API}/teams/{team_id}", *parts])


async def staffed_team(client: AsyncClient, auth, users) -> str:
    """alice owner, bob admin, carol member"""
    team = await create_team(client, auth("alice"))
    await join(client, auth("alice"), auth("bob"), team["id"], "bob@example.com", "admin")
    await join(client, auth("alice"), auth("carol"), team["id"], "carol@example.com", "member")
    return team["id"]


@pytest.mark.asyncio
async def test_change_role(client: AsyncClient, auth, users, team_url):
    team_id = await staffed_team(client, auth, users)

    response = await client.put(
        team_url(team_id, "members", users["carol"]), json={"role": "admin"}, headers=auth("bob")
    )
    assert response.status_code == 200
    assert response.json()["member"]["role"] == "admin"
    assert response.json()["member"]["user_name"] == "Carol Member"

    # carol is an admin now, so bob can no longer touch her
    response = await client.put(
        team_url(team_id, "members", users["carol"]), json={"role": "member"}, headers=auth("bob")
    )
    assert response.status_code == 403

    response = await client.put(
        team_url(team_id, "members", users["carol"]), json={"role": "member"}, headers=auth("alice")
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_owner_role_is_fixed(client: AsyncClient, auth, users, team_url):
    team_id = await staffed_team(client, auth, users)

    response = await client.put(
        team_url(team_id, "members", users["alice"]), json={"role": "member"}, headers=auth("bob")
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CANNOT_DEMOTE_OWNER"

    response = await client.put(
        team_url(team_id, "members", users["carol"]), json={"role": "owner"}, headers=auth("alice")
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TEAM_ROLE"

    response = await client.delete(team_url(team_id, "members", users["alice"]), headers=auth("bob"))
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CANNOT_REMOVE_OWNER"

    response = await client.post(team_url(team_id, "leave"), headers=auth("alice"))
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "OWNER_CANNOT_LEAVE"


@pytest.mark.asyncio
async def test_remove_member(client: AsyncClient, auth, users, team_url):
    team_id = await staffed_team(client, auth, users)

    response = await client.delete(team_url(team_id, "members", users["bob"]), headers=auth("carol"))
    assert response.status_code == 403

    response = await client.delete(team_url(team_id, "members", users["carol"]), headers=auth("bob"))
    assert response.status_code == 200

    response = await client.get(team_url(team_id), headers=auth("carol"))
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_MEMBER"

    response = await client.delete(team_url(team_id, "members", users["carol"]), headers=auth("bob"))
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_leave_team(client: AsyncClient, auth, users, team_url):
    team_id = await staffed_team(client, auth, users)

    response = await client.post(team_url(team_id, "leave"), headers=auth("bob"))
    assert response.status_code == 200

    response = await client.get(team_url(team_id), headers=auth("alice"))
    assert response.json()["member_count"] == 2

    response = await client.post(team_url(team_id, "leave"), headers=auth("dave"))
    assert response.status_code == 404
