import pytest
from fastapi.testclient import TestClient

from conftest import FakeDirectory
from lument.api.v1.endpoints import members
from lument.core.config import Settings, get_settings
from lument.main import app
from lument.services.discord import get_discord_client
from lument.services.roster import MemberAggregator


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _use_aggregator(config, directory):
    app.dependency_overrides[members.get_aggregator] = lambda: MemberAggregator(config, directory)


def test_root(client):
    assert client.get("/").json() == {"status": "ok"}


def test_members_ok(client, roster_config, sample_members, sample_roles):
    _use_aggregator(roster_config, FakeDirectory(sample_members, sample_roles))

    resp = client.get("/api/members")

    assert resp.status_code == 200
    body = resp.json()
    assert [m["id"] for m in body] == ["B", "A"]
    assert body[1] == {
        "id": "A",
        "handle": "@userA",
        "global_name": None,
        "nickname": None,
        "avatar": None,
        "roles": [{"id": "R2", "name": "Core", "color": "#ff0000"}],
        "joined_at": "2024-01-01",
    }


def test_members_missing_config(client):
    directory = FakeDirectory()
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, guild_id="G1", target_role_id="T", priority_role_id="P", discord_bot_token=None
    )
    app.dependency_overrides[get_discord_client] = lambda: directory

    resp = client.get("/api/members")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Environment variables are not defined"}
    assert directory.calls == 0


def test_members_upstream_failure(client, roster_config, sample_members):
    _use_aggregator(roster_config, FakeDirectory(sample_members, fail_roles=503))

    resp = client.get("/api/members")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch data from Discord"}


def test_members_unexpected_failure(client, roster_config):
    # a member record without "user" cannot be validated
    _use_aggregator(roster_config, FakeDirectory([{"roles": ["TARGET"]}], []))

    resp = client.get("/api/members")

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Internal Server Error"
    assert "user" in body["details"]


def test_projects(client):
    body = client.get("/api/projects").json()
    assert [p["id"] for p in body] == [1, 2, 3]
    assert body[0]["title"] == "morae.me"
    assert body[0]["link"] == "https://morae.me"


def test_links(client):
    body = client.get("/api/links").json()
    assert {link["name"] for link in body} == {"discord", "github"}


def test_health_reports_roster_configuration(client):
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, guild_id="G", target_role_id="T", priority_role_id="P", discord_bot_token="x"
    )
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["roster_configured"] is True
