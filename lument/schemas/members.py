from __future__ import annotations

from pydantic import BaseModel


class RoleOut(BaseModel):
    id: str
    name: str
    color: str | None = None


class MemberOut(BaseModel):
    id: str
    handle: str
    global_name: str | None = None
    nickname: str | None = None
    avatar: str | None = None
    roles: list[RoleOut]
    joined_at: str | None = None


class ErrorOut(BaseModel):
    error: str
    details: str | None = None
