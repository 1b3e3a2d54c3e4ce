"""Korfbal Stream API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map KorfbalStreamError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import (
    health, matches, persons, positions, productions, segment_assignments,
    segment_defaults, segments, skills, titles,
)
from app.config import get_settings
from app.infrastructure import database
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Korfbal Stream API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Korfbal Stream API shutting down")


app = FastAPI(
    title="Korfbal Stream API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(matches.router)
app.include_router(productions.router)
app.include_router(segments.router)
app.include_router(segment_assignments.router)
app.include_router(segment_defaults.router)
app.include_router(titles.router)
app.include_router(skills.router)
app.include_router(positions.router)
app.include_router(persons.router)

register_error_handlers(app)
