"""Guild roster aggregation.

Fetches a guild's members and roles from Discord, keeps the members holding
the target role, orders them (priority-role holders first, then by join
time) and attaches resolved role details to each one.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from lument.core.config import Settings
from lument.schemas.discord import GuildMember, GuildRole
from lument.schemas.members import MemberOut, RoleOut
from lument.services.discord import UpstreamError

__all__ = [
    "ConfigurationError",
    "MemberAggregator",
    "RosterConfig",
    "UpstreamError",
    "build_role_lookup",
    "format_role_color",
    "sort_members",
    "to_member_out",
]

logger = logging.getLogger(__name__)

EVERYONE_ROLE_NAME = "@everyone"


class ConfigurationError(Exception):
    pass


class GuildDirectory(Protocol):
    async def list_guild_members(self, guild_id: str, token: str, *, limit: int = ...) -> list[dict]: ...

    async def list_guild_roles(self, guild_id: str, token: str) -> list[dict]: ...


@dataclass(frozen=True)
class RosterConfig:
    guild_id: str | None
    target_role_id: str | None
    priority_role_id: str | None
    bot_token: str | None
    member_limit: int = 1000

    @classmethod
    def from_settings(cls, settings: Settings) -> "RosterConfig":
        return cls(
            guild_id=settings.guild_id,
            target_role_id=settings.target_role_id,
            priority_role_id=settings.priority_role_id,
            bot_token=settings.discord_bot_token,
            member_limit=settings.discord_member_limit,
        )

    def missing(self) -> list[str]:
        required = [
            ("GUILD_ID", self.guild_id),
            ("TARGET_ROLE_ID", self.target_role_id),
            ("PRIORITY_ROLE_ID", self.priority_role_id),
            ("DISCORD_BOT_TOKEN", self.bot_token),
        ]
        return [name for name, val in required if not val]


def format_role_color(color: int | None) -> str | None:
    if not color:
        return None
    return f"#{color:06x}"


def build_role_lookup(roles: list[GuildRole]) -> dict[str, RoleOut]:
    return {r.id: RoleOut(id=r.id, name=r.name, color=format_role_color(r.color)) for r in roles}


def sort_members(members: list[GuildMember], priority_role_id: str) -> list[GuildMember]:
    # False sorts before True, so holders of the priority role come first.
    return sorted(
        members,
        key=lambda m: (not m.has_role(priority_role_id), m.joined_timestamp),
    )


def to_member_out(member: GuildMember, role_lookup: dict[str, RoleOut]) -> MemberOut:
    roles: list[RoleOut] = []
    for role_id in member.roles:
        role = role_lookup.get(role_id)
        if role is None or role.name == EVERYONE_ROLE_NAME:
            continue
        roles.append(role)
    return MemberOut(
        id=member.user.id,
        handle=f"@{member.user.username}",
        global_name=member.user.global_name,
        nickname=member.nick,
        avatar=member.user.avatar,
        roles=roles,
        joined_at=member.joined_at,
    )


class MemberAggregator:
    def __init__(self, config: RosterConfig, directory: GuildDirectory) -> None:
        self.config = config
        self.directory = directory

    async def get_roster(self) -> list[MemberOut]:
        missing = self.config.missing()
        if missing:
            raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")
        cfg = self.config

        raw_members, raw_roles = await asyncio.gather(
            self.directory.list_guild_members(cfg.guild_id, cfg.bot_token, limit=cfg.member_limit),
            self.directory.list_guild_roles(cfg.guild_id, cfg.bot_token),
        )

        role_lookup = build_role_lookup([GuildRole.model_validate(r) for r in raw_roles])
        members = [GuildMember.model_validate(m) for m in raw_members]
        eligible = [m for m in members if m.has_role(cfg.target_role_id)]
        ordered = sort_members(eligible, cfg.priority_role_id)

        logger.info(
            "Roster built: %d of %d members hold the target role", len(ordered), len(members)
        )
        return [to_member_out(m, role_lookup) for m in ordered]
