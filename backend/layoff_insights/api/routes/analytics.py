"""Analytics Routes — tech layoff data and trend analysis controllers.

Invariants:
    - GET (and HEAD) /api/tech-layoffs → 200 with the backend's layoff records
    - POST /api/analyze → 200 with the backend's insight for body["data"]
    - Controllers never catch errors: failures propagate to the global handlers
    - `data` is passed through unvalidated (missing or non-object body → None)

Design Decisions:
    - Backend injected via Depends(get_analytics_service): controllers see only
      the AnalyticsBackend protocol
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from layoff_insights.api.dependencies import get_analytics_service, parse_body
from layoff_insights.core.analytics_protocols import AnalyticsBackend
from layoff_insights.schemas.analytics import LayoffRecord, TrendInsight

router = APIRouter(prefix="/api", tags=["analytics"])


@router.api_route(
    "/tech-layoffs", methods=["GET", "HEAD"], response_model=list[LayoffRecord],
    status_code=status.HTTP_200_OK,
)
async def get_tech_layoffs(
    service: AnalyticsBackend = Depends(get_analytics_service),
):
    """Layoff records from the analytics backend."""
    return await service.fetch_tech_layoffs()


@router.post(
    "/analyze", response_model=TrendInsight,
    status_code=status.HTTP_200_OK,
)
async def analyze_trends(
    body: Any = Depends(parse_body),
    service: AnalyticsBackend = Depends(get_analytics_service),
):
    """Trend insight for the submitted `data` field."""
    data = body.get("data") if isinstance(body, dict) else None
    return await service.analyze_trends(data)
