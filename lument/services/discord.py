from __future__ import annotations

import hashlib
import logging
import time
from typing import Any

import httpx

from lument.core.config import get_settings

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    def __init__(self, path: str, status_code: int | None = None, message: str | None = None) -> None:
        self.path = path
        self.status_code = status_code
        if message is None:
            message = f"Discord request {path} failed"
            if status_code is not None:
                message += f" with status {status_code}"
        super().__init__(message)


class DiscordClient:
    """Read-only Discord REST client.

    Successful list payloads are cached per (token, URL) for `cache_ttl`
    seconds, so a client shared between bot tokens never serves one token's
    data to another.
    """

    def __init__(
        self,
        *,
        base_url: str = "https://discord.com/api/v10",
        timeout: float = 5.0,
        cache_ttl: float = 3600,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cache_ttl = cache_ttl
        self._transport = transport
        # (token digest, url) -> (monotonic time stored, payload)
        self._cache: dict[tuple[str, str], tuple[float, Any]] = {}

    def _cached(self, key: tuple[str, str]) -> Any | None:
        hit = self._cache.get(key)
        if hit is None:
            return None
        stored_at, payload = hit
        if time.monotonic() - stored_at >= self.cache_ttl:
            del self._cache[key]
            return None
        return payload

    def clear_cache(self) -> None:
        self._cache.clear()

    async def _get_list(self, path: str, token: str, params: dict[str, Any] | None = None) -> list[Any]:
        url = str(httpx.URL(f"{self.base_url}{path}", params=params))
        key = (hashlib.sha256(token.encode("utf-8")).hexdigest(), url)
        if self.cache_ttl > 0:
            payload = self._cached(key)
            if payload is not None:
                logger.debug("Cache hit for %s", path)
                return payload

        headers = {"Authorization": f"Bot {token}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            raise UpstreamError(path, message=f"Discord request {path} failed: {exc}") from exc

        if not resp.is_success:
            raise UpstreamError(path, resp.status_code)
        try:
            payload = resp.json()
        except ValueError as exc:
            raise UpstreamError(path, resp.status_code, f"Discord returned invalid JSON for {path}") from exc
        if not isinstance(payload, list):
            raise UpstreamError(path, resp.status_code, f"Discord returned non-list JSON for {path}")

        if self.cache_ttl > 0:
            self._cache[key] = (time.monotonic(), payload)
        return payload

    async def list_guild_members(self, guild_id: str, token: str, *, limit: int = 1000) -> list[dict[str, Any]]:
        return await self._get_list(f"/guilds/{guild_id}/members", token, {"limit": limit})

    async def list_guild_roles(self, guild_id: str, token: str) -> list[dict[str, Any]]:
        return await self._get_list(f"/guilds/{guild_id}/roles", token)


_client: DiscordClient | None = None


def get_discord_client() -> DiscordClient:
    global _client
    if _client is None:
        s = get_settings()
        _client = DiscordClient(
            base_url=s.discord_api_base_url,
            timeout=s.discord_timeout_seconds,
            cache_ttl=s.discord_cache_ttl_seconds,
        )
    return _client
