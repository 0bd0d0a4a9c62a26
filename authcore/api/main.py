"""
FastAPI application factory.

Sets up:
- Logging
- Backing stores and security adapters (in the lifespan)
- Middleware and exception handlers
- API routes
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI

from authcore.api.handlers import register_exception_handlers
from authcore.api.middleware import RequestIDMiddleware
from authcore.api.routes import auth, health, users
from authcore.application.ports.outbound.session_store_port import SessionStorePort
from authcore.infrastructure.config.database import DatabaseConfig
from authcore.infrastructure.config.dependencies import (
    create_database_config,
    create_password_hasher,
    create_session_store,
    create_token_issuer,
)
from authcore.infrastructure.config.logging import setup_logging
from authcore.infrastructure.config.settings import Settings, get_settings


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the backing stores on startup and release them on shutdown.

    Components already placed on ``app.state`` (tests) are left alone.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s v%s (%s)", settings.app_name, settings.version, settings.environment)

    owned = []
    if getattr(app.state, "db_config", None) is None:
        app.state.db_config = create_database_config(settings)
        owned.append(app.state.db_config)
    if getattr(app.state, "session_store", None) is None:
        app.state.session_store = create_session_store(settings)
        owned.append(app.state.session_store)

    try:
        yield
    finally:
        logger.info("Shutting down %s", settings.app_name)
        for resource in owned:
            await resource.close()


def create_app(
    settings: Optional[Settings] = None,
    *,
    db_config: Optional[DatabaseConfig] = None,
    session_store: Optional[SessionStorePort] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use (defaults to ``get_settings()``)
        db_config: Pre-built database configuration
        session_store: Pre-built session store
        configure_logging: Whether to apply the logging configuration

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db_config = db_config
    app.state.session_store = session_store
    app.state.password_hasher = create_password_hasher(settings)
    app.state.token_issuer = create_token_issuer(settings)

    register_exception_handlers(app)
    app.add_middleware(RequestIDMiddleware)

    api_router = APIRouter(prefix=settings.api_prefix)
    api_router.include_router(auth.router)
    api_router.include_router(users.router)

    app.include_router(health.router)
    app.include_router(api_router)

    return app
