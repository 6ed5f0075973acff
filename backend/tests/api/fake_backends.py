"""Test doubles for the AnalyticsBackend protocol."""


class FailingAnalyticsService:
    """Backend whose every call blows up with internal detail in the message."""

    def __init__(self, exc: Exception | None = None):
        self.exc = exc or RuntimeError("connection refused: postgres://admin:hunter2@db")

    async def fetch_tech_layoffs(self):
        raise self.exc

    async def analyze_trends(self, data):
        raise self.exc


class RecordingAnalyticsService:
    """Backend that remembers the `data` each analyze call received."""

    def __init__(self):
        self.received = []

    async def fetch_tech_layoffs(self):
        return []

    async def analyze_trends(self, data):
        self.received.append(data)
        return {"trend": "Recorded", "predictions": "n/a"}
