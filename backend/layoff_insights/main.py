"""Layoff Insights API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Middleware chain: CORS → security headers → access log → body parsing
    - Global error handlers map every failure to a fixed JSON body
    - Settings passed into create_app()/run(), never read as module constants

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Analytics backend bound on app.state at construction: one instance per
      app, replaceable without touching controllers
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI

from layoff_insights.api.dependencies import parse_body
from layoff_insights.api.error_handlers import register_error_handlers
from layoff_insights.api.middleware import register_middleware
from layoff_insights.api.routes import analytics
from layoff_insights.config import Settings, get_settings
from layoff_insights.core.analytics_protocols import AnalyticsBackend
from layoff_insights.infrastructure.observability import setup_logging
from layoff_insights.services.analytics_service import MockAnalyticsService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Server is running on port {settings.port}",
        extra={"port": settings.port},
    )
    yield
    logger.info("Layoff Insights API shutting down")


def create_app(
    settings: Settings | None = None,
    analytics_service: AnalyticsBackend | None = None,
) -> FastAPI:
    """Build the ASGI app with its middleware chain, routes and handlers."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Layoff Insights API", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
        dependencies=[Depends(parse_body)],
    )
    app.state.settings = settings
    app.state.analytics_service = analytics_service or MockAnalyticsService()

    register_middleware(app, settings)
    app.include_router(analytics.router)
    register_error_handlers(app)
    return app


def run(settings: Settings | None = None) -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = settings or get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        access_log=False,
        log_config=None,
    )


app = create_app()
