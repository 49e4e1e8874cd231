import os
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from .core.config import Settings, settings as default_settings
from .core.exceptions import LevelLoreError
from .core.logging_config import configure_logging
from .api import build_api_router
from .api.errors import (
    http_exception_handler,
    levellore_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .db import Store
from .services.service_coordinator import ServiceCoordinator


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """Build the application; tests pass their own settings and store"""
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    services = ServiceCoordinator(settings, store=store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        settings.ensure_directories()
        await services.initialize()

        yield

        # Shutdown
        await services.cleanup()

    app = FastAPI(
        title="LevelLore API",
        description="Daily XP, trivia quiz, chat and leaderboard for the LevelLore community",
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.services = services

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    # Add exception handlers
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(LevelLoreError, levellore_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include API routes
    app.include_router(build_api_router(settings.API_PREFIX))

    if settings.STATIC_DIR and os.path.isdir(settings.STATIC_DIR):
        # Client shell; unknown non-API paths fall back to index.html in the 404 handler
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="client")
    else:
        @app.get("/")
        async def root():
            return {
                "message": "LevelLore API",
                "version": settings.VERSION,
                "status": "operational",
                "docs_url": "/docs"
            }

    return app


app = create_app()
