"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from chirpy.api import admin, chirps, health, users
from chirpy.api.errors import register_exception_handlers
from chirpy.config import Settings, get_settings
from chirpy.logging_config import setup_logging
from chirpy.metrics import CountHitsMiddleware, HitCounter


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application with its own settings and hit counter."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        setup_logging(settings.log_level, settings.log_format)
        yield

    app = FastAPI(
        title="Chirpy API",
        description="Short text posts with moderation",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.hits = HitCounter()

    register_exception_handlers(app)

    # Register routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(chirps.router)
    app.include_router(admin.router)

    # Static site; every request to it counts as a visit
    static_files = StaticFiles(directory=settings.filepath_root, html=True, check_dir=False)
    app.mount("/app", CountHitsMiddleware(static_files, app.state.hits), name="app")

    return app


app = create_app()
