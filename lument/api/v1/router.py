from fastapi import APIRouter
from lument.api.v1.endpoints import health, members, site

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(members.router)
api_router.include_router(site.router)
