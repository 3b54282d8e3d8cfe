import time
from fastapi import APIRouter, Depends

from lument import __version__
from lument.core.config import Settings, get_settings
from lument.services.roster import RosterConfig

router = APIRouter(tags=["health"])


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "service": "lument-api",
        "version": __version__,
        "roster_configured": not RosterConfig.from_settings(settings).missing(),
        "ts": int(time.time()),
    }
