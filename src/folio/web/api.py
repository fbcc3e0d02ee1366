"""FastAPI application factory.

Main entry point for the folio Web API:

    uvicorn folio.web.api:app
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio.config.app_config import load_app_config
from folio.db.database import init_db
from folio.web.errors import register_error_handlers
from folio.web.routes import (
    health_router,
    pages_router,
    projects_router,
    public_router,
    templates_router,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan context manager for startup/shutdown events."""
    # Startup
    config = load_app_config()
    init_db(Path(config.storage.db_path))
    logger.info(
        "api.startup",
        db_path=config.storage.db_path,
        themes=list(config.pages.themes),
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    app = FastAPI(
        title="Folio API",
        description="Personal pages and project showcases from YAML",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware for web clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(pages_router)
    app.include_router(projects_router)
    app.include_router(public_router)
    app.include_router(templates_router)

    return app


# Default app instance for uvicorn
app = create_app()
