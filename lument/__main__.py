import uvicorn

from lument.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "lument.main:app",
        host=settings.uvicorn_host or "127.0.0.1",
        port=settings.uvicorn_port or 8000,
        log_level=(settings.uvicorn_log_level or settings.log_level).lower(),
    )


if __name__ == "__main__":
    main()
