"""Mock Datasets — fixed layoff records and trend insight served by the mock backend.

Invariants:
    - LAYOFF_RECORDS order is the response order (insertion order, no dedup)
    - Constants are immutable; builders return fresh dicts per call
    - analysis input never influences the insight

Design Decisions:
    - Tuples of MappingProxyType over module-level lists: a handler mutating its
      response cannot leak into the next request
"""

from types import MappingProxyType

LAYOFF_RECORDS = (
    MappingProxyType({"company": "TechCorp", "year": 2025, "layoffs": 500}),
    MappingProxyType({"company": "InnovateX", "year": 2025, "layoffs": 200}),
)

TREND_INSIGHT = MappingProxyType({
    "trend": "Increasing Layoffs",
    "predictions": "Expected rise in layoffs by 5% next quarter",
})


def build_layoff_records() -> list[dict]:
    """Fresh copy of the fixed layoff sequence."""
    return [dict(record) for record in LAYOFF_RECORDS]


def build_trend_insight() -> dict:
    """Fresh copy of the fixed trend insight."""
    return dict(TREND_INSIGHT)
