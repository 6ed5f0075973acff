"""Error Handlers — terminal handlers for unmatched routes and failures.

Invariants:
    - Routing HTTPExceptions (only 404 and 405 occur) → 404 {"message": "Route not found"}
    - LayoffInsightsError → 500 {"message": "Internal Server Error"}, code logged
    - Exception (catch-all) → same 500 body, traceback logged, never leaked

Design Decisions:
    - Three-layer handler: routing (HTTPException), domain (LayoffInsightsError),
      catch-all (Exception)
    - internal_error_response shared with the access-log middleware: unexpected
      exceptions become the 500 inside the middleware stack, so CORS and
      security headers apply to it like any other response
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from layoff_insights.core.errors import LayoffInsightsError

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = {"message": "Route not found"}
INTERNAL_SERVER_ERROR = {"message": "Internal Server Error"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_not_found_handler(app)
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_not_found_handler(app: FastAPI) -> None:
    """Register routing-mismatch handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content=ROUTE_NOT_FOUND,
        )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register typed application error handler."""

    @app.exception_handler(LayoffInsightsError)
    async def domain_error_handler(request: Request, exc: LayoffInsightsError):
        logger.error(
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_SERVER_ERROR,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        return internal_error_response(request, exc)


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and build the generic 500 — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        extra={"path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_SERVER_ERROR,
    )
