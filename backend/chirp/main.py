"""Chirp API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ChirpError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema creation on startup is opt-out (DATABASE_CREATE_SCHEMA=false when
      alembic owns the schema)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chirp import __version__
from chirp.api.error_handlers import register_error_handlers
from chirp.api.routes import authors, cheeps, health
from chirp.config import get_settings
from chirp.infrastructure.database import init_db
from chirp.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info("Chirp API started")
    yield
    await manager.dispose()
    logger.info("Chirp API shutting down")


app = FastAPI(title="Chirp API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(cheeps.router)
app.include_router(authors.router)

register_error_handlers(app)
