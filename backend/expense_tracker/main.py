"""Expense Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExpenseTrackerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage Port and services constructed once on startup via the lifespan
      and stored on app.state; nothing is looked up from module globals

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI servers taken from settings so /docs can target local and deployed hosts
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expense_tracker import __version__
from expense_tracker.api.dependencies import build_services
from expense_tracker.api.error_handlers import register_error_handlers
from expense_tracker.api.routes import categories, expenses, health
from expense_tracker.config import Settings, get_settings
from expense_tracker.infrastructure.database import DatabaseSessionManager
from expense_tracker.infrastructure.observability import setup_logging
from expense_tracker.infrastructure.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.services = build_services(db_manager)
    logger.info("Expense Tracker API started")
    yield
    logger.info("Expense Tracker API shutting down")
    await db_manager.dispose()


def _openapi_servers(settings: Settings) -> list[dict]:
    servers = [{"url": settings.docs_local_url, "description": "Local development server"}]
    if settings.docs_prod_url:
        servers.append({"url": settings.docs_prod_url, "description": "Production server"})
    return servers


settings = get_settings()
app = FastAPI(
    title="Expense Tracker API",
    version=__version__,
    description="Personal expense tracking: categories and dated expenses.",
    servers=_openapi_servers(settings),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
if settings.log_requests:
    app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(categories.router)
app.include_router(expenses.router)

register_error_handlers(app)
