"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from infrastructure.config import Settings, get_settings, setup_logger
from infrastructure.container import Repositories, build_repositories
from presentation.api.error_handlers import (
    invalid_json_handler,
    http_exception_handler,
    unhandled_exception_handler,
)
from presentation.api.v1.adapter import InvalidJSONBody
from presentation.api.v1.dependencies import build_controllers
from presentation.api.v1.endpoints import health, products, coupons


def create_app(
    settings: Optional[Settings] = None,
    repositories: Optional[Repositories] = None,
) -> FastAPI:
    """
    Build the API.

    Args:
        settings: Settings to use, defaults to the cached environment settings
        repositories: Prebuilt repositories; when omitted they are built
            from settings.storage_backend on startup and closed on shutdown

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger = setup_logger(
            level=settings.log_level,
            log_format=settings.log_format,
        )
        logger.info(f"🚀 Starting {settings.app_name} v{settings.app_version}")

        repos = repositories or await build_repositories(settings)
        app.state.controllers = build_controllers(repos)

        yield

        # Shutdown
        if repositories is None:
            await repos.close()
        logger.info("👋 Shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidJSONBody, invalid_json_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(products.router, prefix=settings.api_prefix)
    app.include_router(coupons.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
        }

    return app
