from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
import logging
from typing import Optional, TypeVar

from .config import DashboardConfig
from .errors import MissingParameterError
from .models import CombinedResult, NewsResult, Outcome, WeatherReport
from .providers.base import BaseNewsProvider, BaseWeatherProvider
from .providers.newsapi_provider import NewsAPIProvider
from .providers.openweather_provider import OpenWeatherProvider

T = TypeVar("T")

NEWS_UNAVAILABLE = "News data unavailable"

logger = logging.getLogger(__name__)


class Dashboard:
    """Combines the weather and news providers behind one facade.

    Weather is the required payload: its failures always reach the caller.
    News is best-effort enrichment inside :meth:`combined`, where any failure
    is flattened into a degraded ``NewsResult``.
    """

    def __init__(self, weather_provider: BaseWeatherProvider, news_provider: BaseNewsProvider) -> None:
        self.weather_provider = weather_provider
        self.news_provider = news_provider

    @classmethod
    def from_config(cls, config: Optional[DashboardConfig] = None) -> "Dashboard":
        config = config or DashboardConfig.from_env()
        return cls(
            weather_provider=OpenWeatherProvider(config.openweather_api_key, timeout=config.http_timeout),
            news_provider=NewsAPIProvider(
                config.news_api_key,
                timeout=config.http_timeout,
                page_size=config.news_page_size,
            ),
        )

    def weather(self, city: Optional[str]) -> WeatherReport:
        return self.weather_provider.fetch(_require_city(city))

    def news(self, city: Optional[str] = None, country: Optional[str] = None) -> NewsResult:
        return self.news_provider.fetch(city=city, country=country)

    def combined(self, city: Optional[str]) -> CombinedResult:
        city = _require_city(city)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="dashboard") as pool:
            weather_future = pool.submit(self.weather_provider.fetch, city)
            news_future = pool.submit(self.news_provider.fetch, city=city)
            weather_outcome = _settle(weather_future)
            news_outcome = _settle(news_future)

        weather = weather_outcome.unwrap()
        news = degrade_news(news_outcome)
        return CombinedResult(weather=weather, news=news)


def degrade_news(outcome: Outcome[NewsResult]) -> NewsResult:
    """Replace any news failure with an explicit empty placeholder."""
    if outcome.ok:
        return outcome.value  # type: ignore[return-value]
    logger.warning("News fetch failed (non-blocking): %s", outcome.error)
    return NewsResult.degraded(NEWS_UNAVAILABLE)


def _settle(future: "Future[T]") -> Outcome[T]:
    try:
        return Outcome(value=future.result())
    except Exception as exc:  # noqa: BLE001 - the caller decides whether to propagate
        return Outcome(error=exc)


def _require_city(city: Optional[str]) -> str:
    if not city or not city.strip():
        raise MissingParameterError("City parameter is required")
    return city.strip()
