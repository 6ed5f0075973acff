"""Mock Analytics Service — constant layoff data and a stubbed trend analysis.

Invariants:
    - fetch_tech_layoffs always returns the same record sequence
    - analyze_trends ignores its input and always returns the same insight
    - Neither operation raises

Design Decisions:
    - Async methods that resolve immediately: call sites stay unchanged when a
      real data source or model replaces this class
"""

import logging
from typing import Any

from layoff_insights.core.mock_datasets import (
    build_layoff_records, build_trend_insight,
)

logger = logging.getLogger(__name__)


class MockAnalyticsService:
    """AnalyticsBackend backed by fixed datasets."""

    async def fetch_tech_layoffs(self) -> list[dict]:
        records = build_layoff_records()
        logger.debug(f"Serving {len(records)} mock layoff records")
        return records

    async def analyze_trends(self, data: Any) -> dict:
        logger.debug(f"Mock trend analysis (input type: {type(data).__name__})")
        return build_trend_insight()
