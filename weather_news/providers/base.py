from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Any, Mapping, Optional

import requests

from ..errors import DashboardError, InvalidCredentialsError, UpstreamFailureError
from ..models import NewsResult, WeatherReport

logger = logging.getLogger(__name__)


class BaseWeatherProvider(ABC):
    """Abstract base class for current-weather sources."""

    @abstractmethod
    def fetch(self, city: str) -> WeatherReport:
        """Return the current ``WeatherReport`` for ``city``."""


class BaseNewsProvider(ABC):
    """Abstract base class for article search sources."""

    @abstractmethod
    def fetch(self, city: Optional[str] = None, country: Optional[str] = None) -> NewsResult:
        """Return up to one page of articles about ``city`` (or ``country``)."""


class HTTPProvider:
    """Shared plumbing for providers backed by a keyed JSON REST endpoint."""

    name = "upstream"

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 10.0,
    ) -> None:
        if not api_key:
            raise ValueError(f"{type(self).__name__} requires an API key")
        self._api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def _get_json(
        self,
        params: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> Mapping[str, Any]:
        try:
            response = requests.get(
                self.base_url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.warning("%s request failed with status code %s", self.name, status)
            raise self._translate_status(status, exc) from exc
        except requests.RequestException as exc:
            logger.warning("%s request failed: %s", self.name, type(exc).__name__)
            raise UpstreamFailureError(f"{self.name} request failed: {type(exc).__name__}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamFailureError(f"{self.name} returned a non-JSON response") from exc
        if not isinstance(payload, Mapping):
            raise UpstreamFailureError(f"{self.name} returned an unexpected payload")
        return payload

    def _translate_status(self, status: Optional[int], exc: requests.HTTPError) -> DashboardError:
        if status == 401:
            return InvalidCredentialsError(f"Please check your {self.name} API key")
        return UpstreamFailureError(f"Request failed with status code {status}")
