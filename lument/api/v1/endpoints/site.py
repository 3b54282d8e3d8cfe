from fastapi import APIRouter

from lument.schemas.site import LinkOut, ProjectOut
from lument.services.site import list_links, list_projects

router = APIRouter(tags=["site"])


@router.get("/projects", response_model=list[ProjectOut])
def projects():
    return list_projects()


@router.get("/links", response_model=list[LinkOut])
def links():
    return list_links()
