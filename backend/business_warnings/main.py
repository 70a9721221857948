"""Business Warnings API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BusinessWarningsError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Resolvers built and validated on startup via lifespan: an incomplete
      template table or catalog aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - NoticeService stored on app.state, read through a dependency (overridable in tests)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from business_warnings.api.error_handlers import register_error_handlers
from business_warnings.api.routes import dialogs, entity_warnings, health
from business_warnings.config import get_settings
from business_warnings.infrastructure.observability import setup_logging
from business_warnings.services.notice_service import build_notice_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.notice_service = build_notice_service(settings)
    logger.info("Business Warnings API started")
    yield
    app.state.notice_service = None
    logger.info("Business Warnings API shutting down")


app = FastAPI(
    title="Business Warnings API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes - explicit registration
app.include_router(health.router)
app.include_router(entity_warnings.router)
app.include_router(dialogs.router)

register_error_handlers(app)
