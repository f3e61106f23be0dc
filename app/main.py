"""Employee Admin API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map failures to the JSON envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager; a failed
      connection test is logged and startup continues

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables auto-created only when database_create_tables is set (local SQLite);
      production schemas come from alembic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import employees, health, info
from app.config import get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.effective_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(
        f"Configured for {manager.dialect_name} ({settings.app_env})",
        extra={"dialect": manager.dialect_name},
    )

    logger.info("Testing database connection...")
    if await manager.health_check():
        logger.info(f"Database connection successful: {manager.database_name}")
        if settings.database_create_tables:
            await manager.create_tables()
    else:
        logger.error("Database connection failed; continuing without it")

    logger.info(f"{settings.app_name} started")
    yield
    await close_db()
    logger.info(f"{settings.app_name} shutting down")


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="API for managing employees.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes, explicit registration
app.include_router(info.router)
app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)
