from __future__ import annotations

from pydantic import BaseModel


class ProjectOut(BaseModel):
    id: int
    title: str
    description: str
    link: str | None = None
    image: str | None = None


class LinkOut(BaseModel):
    name: str
    href: str
