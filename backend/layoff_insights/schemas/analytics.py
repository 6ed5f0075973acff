"""Analytics Schemas — Pydantic models for the /api response bodies.

Invariants:
    - LayoffRecord serializes as {company, year, layoffs} in that order
    - TrendInsight serializes as {trend, predictions} in that order

Design Decisions:
    - No request schema for /api/analyze: the `data` field is passed through
      unvalidated, so the body is read from the parsed payload instead
"""

from pydantic import BaseModel


class LayoffRecord(BaseModel):
    """One company's layoff count for one year."""
    company: str
    year: int
    layoffs: int


class TrendInsight(BaseModel):
    """Trend analysis result."""
    trend: str
    predictions: str
