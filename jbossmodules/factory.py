"""FastAPI application factory."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .modules.attachmodules import attachmodules_router
from .settings import Settings, get_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.version)
    app.include_router(health_router)
    app.include_router(attachmodules_router)
    app.state.container = ServiceContainer(settings)
    return app
