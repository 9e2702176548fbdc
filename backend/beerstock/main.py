"""Beerstock API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BeerstockError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema managed by Alembic; the app never calls create_all
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beerstock.api.error_handlers import register_error_handlers
from beerstock.api.routes import beers, health
from beerstock.infrastructure import database
from beerstock.infrastructure.observability import setup_logging
from beerstock.config import get_settings

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
    logger.info("Beerstock API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Beerstock API shutting down")


app = FastAPI(
    title="Beerstock API",
    description="Beer catalog with bounded stock control",
    version="1.0.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(beers.router)

register_error_handlers(app)


if __name__ == "__main__":
    uvicorn.run("beerstock.main:app", host="0.0.0.0", port=8000, reload=True)
