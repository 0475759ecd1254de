"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .settings import Settings, get_settings
from artifact_installer.modules.installfile import installfile_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    services = ServiceContainer(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):  # pragma: no cover - invoked by FastAPI
        yield
        services.close()

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.include_router(health_router)
    app.include_router(installfile_router)
    app.state.container = services
    return app
