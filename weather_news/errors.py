from __future__ import annotations

from typing import Optional


class DashboardError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code = 500
    error = "Failed to fetch data"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.error
        super().__init__(self.message)


class MissingParameterError(DashboardError):
    status_code = 400
    error = "Missing required parameter"


class NotFoundError(DashboardError):
    """The weather provider does not recognise the city name."""

    status_code = 404
    error = "City not found"


class InvalidCredentialsError(DashboardError):
    status_code = 401
    error = "Invalid API key"


class RateLimitedError(DashboardError):
    status_code = 429
    error = "API rate limit exceeded"


class UpstreamFailureError(DashboardError):
    """Network failure, unexpected status or malformed upstream payload."""

    status_code = 500
    error = "Upstream request failed"
