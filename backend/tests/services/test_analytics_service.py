"""Tests for MockAnalyticsService — constant async results, input ignored."""

import pytest

from layoff_insights.core.analytics_protocols import AnalyticsBackend
from layoff_insights.core.mock_datasets import build_layoff_records, build_trend_insight
from layoff_insights.services.analytics_service import MockAnalyticsService


@pytest.fixture
def service() -> AnalyticsBackend:
    return MockAnalyticsService()


async def test_fetch_returns_fixed_records(service):
    assert await service.fetch_tech_layoffs() == build_layoff_records()


async def test_fetch_results_are_independent(service):
    first = await service.fetch_tech_layoffs()
    first.clear()
    assert len(await service.fetch_tech_layoffs()) == 2


@pytest.mark.parametrize("data", [None, [], [1, 2, 3], {"k": "v"}, "text", 0])
async def test_analyze_ignores_input(service, data):
    assert await service.analyze_trends(data) == build_trend_insight()
