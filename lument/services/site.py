from __future__ import annotations

from lument.schemas.site import LinkOut, ProjectOut

PROJECTS: list[ProjectOut] = [
    ProjectOut(
        id=1,
        title="morae.me",
        description="온라인 끝말잇기 게임 '끄투' 전적 검색 사이트",
        link="https://morae.me",
        image="/moraeme.png",
    ),
    ProjectOut(
        id=2,
        title="이하봇",
        description="이터널 리턴 전적 검색 디스코드 봇",
        link="https://discord.com/discovery/applications/769163955137675275",
        image="/ihahbot.png",
    ),
    ProjectOut(
        id=3,
        title="메버에 진심인 봇",
        description="1:1 덱 빌딩 결투 보드게임 '메타버서스 시리즈' 정보 검색 디스코드 봇",
        link="https://discord.com/discovery/applications/1421287090015965224",
        image="/metaversus.webp",
    ),
]

LINKS: list[LinkOut] = [
    LinkOut(name="discord", href="https://discord.gg/cf3D2HCzEh"),
    LinkOut(name="github", href="https://github.com/team-lument"),
]


def list_projects() -> list[ProjectOut]:
    return sorted(PROJECTS, key=lambda p: p.id)


def list_links() -> list[LinkOut]:
    return list(LINKS)
