"""Request Dependencies — body deserialization and analytics backend injection.

Invariants:
    - parse_body runs once per request; the payload is cached on request.state.body
    - Empty bodies and unknown content types parse to {}
    - Undecodable JSON/form bodies raise BodyParseError (→ generic 500)

Design Decisions:
    - Body parsing as a router-level dependency over middleware: failures reach
      the FastAPI exception handlers like any controller failure
    - Backend bound on app.state at startup: tests swap it via dependency_overrides
"""

import json
from typing import Any
from urllib.parse import parse_qs

from fastapi import Request

from layoff_insights.core.analytics_protocols import AnalyticsBackend
from layoff_insights.core.errors import BodyParseError, ErrorContext

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"


async def parse_body(request: Request) -> Any:
    """Decode the request body according to its Content-Type."""
    cached = getattr(request.state, "body", None)
    if cached is not None:
        return cached

    media_type = _media_type(request.headers.get("content-type", ""))
    raw = await request.body()
    context = ErrorContext(path=request.url.path)
    if not raw:
        body: Any = {}
    elif media_type == JSON_MEDIA_TYPE or media_type.endswith("+json"):
        try:
            body = json.loads(raw)
        except ValueError as e:
            raise BodyParseError(JSON_MEDIA_TYPE, context) from e
    elif media_type == FORM_MEDIA_TYPE:
        try:
            body = decode_form(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise BodyParseError(FORM_MEDIA_TYPE, context) from e
    else:
        body = {}

    request.state.body = body
    return body


def decode_form(text: str) -> dict[str, str | list[str]]:
    """URL-encoded form → dict; repeated keys collapse into a list."""
    return {
        key: values[0] if len(values) == 1 else values
        for key, values in parse_qs(text, keep_blank_values=True).items()
    }


def get_analytics_service(request: Request) -> AnalyticsBackend:
    return request.app.state.analytics_service


def _media_type(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()
