import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Keep a developer's .env / shell from leaking roster settings into tests
for _name in ("GUILD_ID", "TARGET_ROLE_ID", "PRIORITY_ROLE_ID", "DISCORD_BOT_TOKEN"):
    os.environ.pop(_name, None)

from lument.services.discord import UpstreamError  # noqa: E402
from lument.services.roster import RosterConfig  # noqa: E402


class FakeDirectory:
    """In-memory stand-in for DiscordClient that counts calls."""

    def __init__(self, members=None, roles=None, *, fail_members=None, fail_roles=None):
        self.members = members or []
        self.roles = roles or []
        self.fail_members = fail_members
        self.fail_roles = fail_roles
        self.member_calls = []
        self.role_calls = []

    @property
    def calls(self) -> int:
        return len(self.member_calls) + len(self.role_calls)

    async def list_guild_members(self, guild_id, token, *, limit=1000):
        self.member_calls.append((guild_id, token, limit))
        if self.fail_members is not None:
            raise UpstreamError(f"/guilds/{guild_id}/members", self.fail_members)
        return self.members

    async def list_guild_roles(self, guild_id, token):
        self.role_calls.append((guild_id, token))
        if self.fail_roles is not None:
            raise UpstreamError(f"/guilds/{guild_id}/roles", self.fail_roles)
        return self.roles


def make_member(user_id, roles, joined_at=None, **overrides):
    user = {
        "id": user_id,
        "username": overrides.pop("username", f"user{user_id}"),
        "global_name": overrides.pop("global_name", None),
        "avatar": overrides.pop("avatar", None),
    }
    member = {"user": user, "roles": list(roles), "joined_at": joined_at, "nick": None}
    member.update(overrides)
    return member


@pytest.fixture
def roster_config():
    return RosterConfig(
        guild_id="G1",
        target_role_id="TARGET",
        priority_role_id="PRIORITY",
        bot_token="test-token",
    )


@pytest.fixture
def sample_roles():
    return [
        {"id": "R1", "name": "@everyone", "color": 0},
        {"id": "R2", "name": "Core", "color": 16711680},
    ]


@pytest.fixture
def sample_members():
    return [
        make_member("A", ["TARGET", "R2"], "2024-01-01"),
        make_member("B", ["TARGET", "PRIORITY"], "2024-06-01"),
    ]
