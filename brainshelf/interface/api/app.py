"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brainshelf.application.worker import DiscardingDispatcher
from brainshelf.config import Settings
from brainshelf.interface.api.error import register_error_handlers
from brainshelf.interface.api.routes import (
    entries,
    health,
    projects,
    search,
    tags,
    templates,
)
from brainshelf.persistence.database import create_engine, create_session_factory
from brainshelf.util.di import create_metadata_worker
from brainshelf.util.observability import (
    instrument_fastapi,
    instrument_httpx,
    instrument_sqlalchemy,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the metadata worker and release the engine on shutdown."""
    worker = app.state.metadata_worker
    if worker is not None:
        await worker.start()
    logfire.info("BrainShelf API started", environment=app.state.settings.environment)
    try:
        yield
    finally:
        if worker is not None:
            await worker.stop()
        await app.state.engine.dispose()
        logfire.info("BrainShelf API stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    The engine connects lazily, so building the app needs no database;
    tests override the repository dependencies instead.

    Args:
        settings: Application settings, loaded from the environment if omitted

    Returns:
        Configured application
    """
    settings = settings or Settings()

    # Instrument httpx for metadata page fetches
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="BrainShelf API",
        description=(
            "Backend API for BrainShelf - projects, entries, tags and full-text search"
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    engine = create_engine(settings)
    instrument_sqlalchemy(engine)
    session_factory = create_session_factory(engine)

    app_instance.state.settings = settings
    app_instance.state.engine = engine
    app_instance.state.session_factory = session_factory

    if settings.metadata.enabled:
        worker = create_metadata_worker(settings, session_factory)
        app_instance.state.metadata_worker = worker
        app_instance.state.event_dispatcher = worker
    else:
        app_instance.state.metadata_worker = None
        app_instance.state.event_dispatcher = DiscardingDispatcher()

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(search.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(entries.router)
    app_instance.include_router(projects.router)
    app_instance.include_router(templates.router)

    return app_instance


def get_app() -> FastAPI:
    """App factory for uvicorn (`--factory`)."""
    return create_app()
