"""Application entry point and FastAPI app factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.api.router import api_router
from app.core.config import Settings, get_settings
from app.core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events (startup/shutdown)."""
    # Startup: configure logging (console + optional app.log)
    settings: Settings = app.state.settings
    setup_logging(log_dir=settings.LOG_DIR, log_level=settings.LOG_LEVEL)
    yield
    # Shutdown


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application: routing table mounted under CONTEXT_PATH, logging on startup.

    Interactive docs are disabled; GET {CONTEXT_PATH}/ is the only route.
    """
    settings = settings or get_settings()
    application = FastAPI(
        title="Greeting Service",
        version="1.0.0",
        description="Returns a static plain-text greeting.",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.state.settings = settings
    application.include_router(api_router, prefix=settings.CONTEXT_PATH)
    return application


app = create_app()
