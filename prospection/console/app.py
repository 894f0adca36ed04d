from __future__ import annotations

from fastapi import Depends, FastAPI

from prospection import __version__
from prospection.console.routes import analysis, health
from prospection.console.security import require_console_user


def create_app() -> FastAPI:
    """Build and configure the FastAPI application for the scoring console."""
    app = FastAPI(
        title="Prospection Console",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    protected_dependencies = [Depends(require_console_user)]

    app.include_router(health.router)
    app.include_router(analysis.router, dependencies=protected_dependencies)
    return app


app = create_app()


__all__ = ["create_app", "app"]
