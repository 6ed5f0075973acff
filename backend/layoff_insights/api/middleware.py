"""HTTP Middleware — CORS, security headers and access logging.

Invariants:
    - Order (outermost first): CORS → security headers → access log → routing
    - Security headers never overwrite a header the handler already set
    - Exactly one access-log line per request, including failed requests

Design Decisions:
    - Starlette add_middleware wraps, so registration runs innermost first
    - Access log is innermost and turns unexpected exceptions into the generic
      500, so outer steps (CORS, security headers) still see a response
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from layoff_insights.api.error_handlers import internal_error_response
from layoff_insights.config import Settings

logger = logging.getLogger("layoff_insights.access")

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Install the middleware chain on the app."""
    _register_access_log(app)
    _register_security_headers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def apply_security_headers(headers) -> None:
    for name, value in SECURITY_HEADERS.items():
        headers.setdefault(name, value)


def _register_security_headers(app: FastAPI) -> None:

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        apply_security_headers(response.headers)
        return response


def _register_access_log(app: FastAPI) -> None:

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = internal_error_response(request, exc)
        duration_ms = round((time.perf_counter() - start) * 1000, 3)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms:.3f} ms",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "client": request.client.host if request.client else None,
            },
        )
        return response
