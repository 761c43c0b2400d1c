"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.database import Database
from shared.logging_config import configure_logging

# Table modules register themselves on Base.metadata
import modules.auth.tables  # noqa: F401
import modules.properties.tables  # noqa: F401
from modules.properties.routes import router as properties_router

from .dependencies import ServiceContainer
from .errors import register_exception_handlers
from .routes import health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the database and service container on startup and releases
    the engine on shutdown.
    """
    settings: Settings = app.state.settings
    if not settings.jwt_secret:
        raise RuntimeError(
            "Token signing secret missing. Set the JWT_SECRET environment variable."
        )

    database = Database(settings.database_url)
    await database.create_all()
    app.state.container = ServiceContainer(settings, database)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    logger.info("Shutting down %s", settings.app_name)
    await database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; defaults to the environment

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Real-estate listings API with account authentication",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(properties_router, prefix="/api/properties", tags=["properties"])

    return app
