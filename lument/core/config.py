from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Team Lument API"
    api_prefix: str = "/api"
    backend_cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    # Discord guild roster
    guild_id: Optional[str] = None
    target_role_id: Optional[str] = None
    priority_role_id: Optional[str] = None
    discord_bot_token: Optional[str] = None

    # Discord REST
    discord_api_base_url: str = "https://discord.com/api/v10"
    discord_member_limit: int = 1000
    discord_timeout_seconds: float = 5.0
    discord_cache_ttl_seconds: int = 3600

    # Runtime (Uvicorn)
    uvicorn_host: str | None = None
    uvicorn_port: int | None = None
    uvicorn_log_level: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
