"""Boundary Protocols — contract between controllers and analytics backends.

Invariants:
    - Controllers depend on AnalyticsBackend only, never on a concrete class
    - Both operations are async: real implementations will do IO

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Any, Protocol


class AnalyticsBackend(Protocol):
    """Contract for layoff data access and trend analysis — implemented by services."""
    async def fetch_tech_layoffs(self) -> list[dict]: ...
    async def analyze_trends(self, data: Any) -> dict: ...
