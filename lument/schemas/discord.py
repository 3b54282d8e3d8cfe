from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class DiscordUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    username: str
    global_name: str | None = None
    avatar: str | None = None


class GuildMember(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user: DiscordUser
    nick: str | None = None
    roles: list[str] = Field(default_factory=list)
    # Kept as the raw string Discord sent; it is echoed back untouched.
    joined_at: str | None = None

    def has_role(self, role_id: str) -> bool:
        return role_id in self.roles

    @property
    def joined_timestamp(self) -> float:
        """Join time in epoch seconds, 0.0 when missing or unreadable."""
        if not self.joined_at:
            return 0.0
        try:
            dt = datetime.fromisoformat(self.joined_at.replace("Z", "+00:00"))
        except ValueError:
            return 0.0
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.timestamp()


class GuildRole(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    color: int | None = None
