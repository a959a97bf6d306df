"""FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bulletin.config import Settings
from bulletin.domain.service import FileStore
from bulletin.interface.api.routes import (
    boards,
    comments,
    database,
    files,
    health,
    replies,
    screen_layouts,
)
from bulletin.util.di.container import create_container, setup_di
from bulletin.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the upload directory on startup; close the container on shutdown."""
    container = app.state.dishka_container
    await container.get(FileStore)
    yield
    await container.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Bulletin Board API",
        description="Backend API for a bulletin board with nested comments, "
        "file attachments and configurable screen layouts",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
            "X-Database-Type",
        ],
        expose_headers=["Content-Disposition", "Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(boards.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(replies.router)
    app_instance.include_router(files.router)
    app_instance.include_router(screen_layouts.router)
    app_instance.include_router(database.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
