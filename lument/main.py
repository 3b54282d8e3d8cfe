from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lument import __version__
from lument.core.config import get_settings
from lument.core.logging_config import configure_logging
from lument.api.v1.router import api_router

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name, version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
def root():
    return {"status": "ok"}
