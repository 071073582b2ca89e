"""Folio API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FolioError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and invariant locks initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers (api/error_handlers.py) render every failure as a FolioError envelope
    - career and education live under /api/v1/portfolios/ and are registered before
      the portfolios router, whose /{portfolio_id} would otherwise capture them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app.infrastructure.database as database
from app.api.error_handlers import register_error_handlers
from app.api.routes import careers, educations, health, personal_information, portfolios
from app.config import SERVICE_NAME, SERVICE_VERSION, get_settings
from app.infrastructure.invariant_locks import init_invariant_locks
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_invariant_locks()
    logger.info(f"{SERVICE_NAME} {SERVICE_VERSION} started")
    yield
    logger.info("Folio API shutting down")
    if database.db_manager:
        await database.db_manager.dispose()


app = FastAPI(
    title="Folio API", version=SERVICE_VERSION, lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(personal_information.router)
app.include_router(careers.router)
app.include_router(educations.router)
app.include_router(portfolios.router)

register_error_handlers(app)
