"""Crowdfund API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CrowdfundError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging and database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Listen host/port come from settings; `python -m crowdfund.main` runs uvicorn
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crowdfund.api.error_handlers import register_error_handlers
from crowdfund.api.routes import auth, health, projects
from crowdfund.config import get_settings
import crowdfund.infrastructure.database as database
from crowdfund.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Crowdfund API started")
    yield
    await manager.dispose()
    logger.info("Crowdfund API shutting down")


app = FastAPI(title="Crowdfund API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(projects.router)

register_error_handlers(app)


if __name__ == "__main__":
    uvicorn.run("crowdfund.main:app", host=settings.host, port=settings.port)
