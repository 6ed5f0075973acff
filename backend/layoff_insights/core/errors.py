"""Error Hierarchy — typed, categorized exceptions for analytics failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error surfaces to clients as the same generic 500 body
    - to_log_extra() feeds structured logging; nothing here is sent to clients

Design Decisions:
    - Single hierarchy with LayoffInsightsError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for log routing."""
    REQUEST = "request"
    DATA_SOURCE = "data_source"
    ANALYSIS = "analysis"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class LayoffInsightsError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_log_extra(self) -> dict:
        """Structured fields for the operator log line."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "severity": self.severity.value,
            "error_timestamp": self.context.timestamp.isoformat(),
        }


# ─── Request Errors ─────────────────────────────────────────────

class BodyParseError(LayoffInsightsError):
    """Request body could not be decoded for its declared content type."""
    def __init__(self, content_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Could not decode request body as {content_type}",
            "BODY_PARSE_ERROR", ErrorCategory.REQUEST,
            ErrorSeverity.WARNING, context,
        )
        self.content_type = content_type


# ─── Backend Errors ─────────────────────────────────────────────

class DataSourceError(LayoffInsightsError):
    """Layoff data could not be fetched."""
    def __init__(self, message: str, source: str, context: ErrorContext | None = None):
        super().__init__(
            f"Layoff data source '{source}' failed: {message}",
            "DATA_SOURCE_ERROR", ErrorCategory.DATA_SOURCE,
            ErrorSeverity.CRITICAL, context,
        )
        self.source = source


class TrendAnalysisError(LayoffInsightsError):
    """Trend analysis backend failed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Trend analysis failed: {message}",
            "TREND_ANALYSIS_ERROR", ErrorCategory.ANALYSIS,
            ErrorSeverity.CRITICAL, context,
        )
