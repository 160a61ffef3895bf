"""mediahub API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MediaHubError to structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediahub.api.error_handlers import register_error_handlers
from mediahub.api.routes import health, medias, posts, publications
from mediahub.config import get_settings
from mediahub.infrastructure import database
from mediahub.infrastructure.observability import setup_logging

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
        echo=settings.database_echo,
    )
    logger.info("mediahub API started")
    yield
    if database.db_manager is not None:
        await database.db_manager.dispose()
    logger.info("mediahub API shutting down")


app = FastAPI(title="mediahub API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(medias.router)
app.include_router(posts.router)
app.include_router(publications.router)

register_error_handlers(app)
