from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from lument.core.config import Settings, get_settings
from lument.schemas.members import ErrorOut, MemberOut
from lument.services.discord import DiscordClient, get_discord_client
from lument.services.roster import ConfigurationError, MemberAggregator, RosterConfig, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["members"])


def get_aggregator(
    settings: Settings = Depends(get_settings),
    client: DiscordClient = Depends(get_discord_client),
) -> MemberAggregator:
    return MemberAggregator(RosterConfig.from_settings(settings), client)


def _error(error: str, details: str | None = None) -> JSONResponse:
    body = ErrorOut(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(body, status_code=500)


@router.get(
    "/members",
    response_model=list[MemberOut],
    responses={500: {"model": ErrorOut}},
)
async def list_members(aggregator: MemberAggregator = Depends(get_aggregator)):
    try:
        return await aggregator.get_roster()
    except ConfigurationError as exc:
        logger.error("Roster not configured: %s", exc)
        return _error("Environment variables are not defined")
    except UpstreamError as exc:
        logger.warning("Discord fetch failed: %s", exc)
        return _error("Failed to fetch data from Discord")
    except Exception as exc:
        logger.exception("Unexpected error while building roster")
        return _error("Internal Server Error", str(exc))
