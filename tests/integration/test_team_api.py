"""
Integration tests for the team and player endpoints.

Tests cover:
- Team creation and listing
- Player assignment and listing
- Team deletion
- 401 "Invalid teamId." for unknown or malformed ids
"""

import pytest
from bson import ObjectId

PIRATES = {"name": "Pirates", "mascot": "Parrot"}
CLEMENTE = {"firstName": "Roberto", "lastName": "Clemente", "salary": 100000.0}
STARGELL = {"firstName": "Willie", "lastName": "Stargell", "salary": 90000.0}


@pytest.fixture
def team_id(client) -> str:
    response = client.post("/api/teams", json=PIRATES)
    assert response.status_code == 200
    return response.json()["_id"]


class TestTeamApi:
    """Tests for /api/teams."""

    def test_create_team_without_players(self, client):
        response = client.post("/api/teams", json=PIRATES)

        assert response.status_code == 200
        assert response.json()["players"] == []

    def test_list_teams(self, client, team_id):
        response = client.get("/api/teams")

        assert response.status_code == 200
        assert response.json() == [{"_id": team_id, **PIRATES, "players": []}]

    def test_assign_players(self, client, team_id):
        client.post(f"/api/teams/{team_id}/players", json=CLEMENTE)
        response = client.post(f"/api/teams/{team_id}/players", json=STARGELL)

        assert response.status_code == 200
        assert response.json()["players"] == [CLEMENTE, STARGELL]

        players = client.get(f"/api/teams/{team_id}/players")
        assert players.status_code == 200
        assert players.json() == [CLEMENTE, STARGELL]

    def test_delete_team(self, client, team_id):
        response = client.delete(f"/api/teams/{team_id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Pirates"
        assert client.get("/api/teams").json() == []

    def test_player_salary_must_be_numeric(self, client, team_id):
        response = client.post(
            f"/api/teams/{team_id}/players",
            json={**CLEMENTE, "salary": "lots"}
        )

        assert response.status_code == 501
        assert "salary" in response.json()["message"]


class TestTeamErrors:
    """Tests for unknown team ids."""

    @pytest.mark.parametrize("request_args", [
        ("post", "/players", CLEMENTE),
        ("get", "/players", None),
        ("delete", "", None),
    ])
    @pytest.mark.parametrize("lookup_id", [str(ObjectId()), "not-an-id"])
    def test_unknown_team(self, client, request_args, lookup_id):
        method, suffix, body = request_args
        kwargs = {"json": body} if body is not None else {}

        response = client.request(method.upper(), f"/api/teams/{lookup_id}{suffix}", **kwargs)

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid teamId."}


class TestNullPlayerList:
    """Tests for teams stored with ``players: null``."""

    @pytest.fixture
    def legacy_team_id(self, database) -> str:
        oid = ObjectId()
        database["teams"].documents.append(
            {"_id": oid, "name": "Pirates", "mascot": "Parrot", "players": None}
        )
        return str(oid)

    def test_list_players_returns_empty(self, client, legacy_team_id):
        response = client.get(f"/api/teams/{legacy_team_id}/players")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_teams_renders_empty_roster(self, client, legacy_team_id):
        response = client.get("/api/teams")

        assert response.status_code == 200
        assert response.json()[0]["players"] == []

    def test_assign_player_starts_new_list(self, client, legacy_team_id, database):
        response = client.post(f"/api/teams/{legacy_team_id}/players", json=CLEMENTE)

        assert response.status_code == 200
        assert response.json()["players"] == [CLEMENTE]
        assert database["teams"].documents[0]["players"] == [CLEMENTE]
