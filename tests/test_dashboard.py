from __future__ import annotations

import pytest

from fakes import FakeNewsProvider, FakeWeatherProvider, sample_news, sample_report
from weather_news import Dashboard
from weather_news.dashboard import NEWS_UNAVAILABLE, degrade_news
from weather_news.errors import (
    InvalidCredentialsError,
    MissingParameterError,
    NotFoundError,
    RateLimitedError,
    UpstreamFailureError,
)
from weather_news.models import NewsResult, Outcome


def test_combined_returns_weather_and_news() -> None:
    weather = FakeWeatherProvider()
    news = FakeNewsProvider()
    dashboard = Dashboard(weather, news)

    result = dashboard.combined("London")

    assert result.weather == sample_report("London")
    assert result.news == sample_news("London")
    assert weather.calls == ["London"]
    assert news.calls == [("London", None)]


def test_combined_propagates_weather_error_unchanged() -> None:
    error = NotFoundError("Please check the city name and try again")
    dashboard = Dashboard(FakeWeatherProvider(error=error), FakeNewsProvider())

    with pytest.raises(NotFoundError) as excinfo:
        dashboard.combined("UnknownPlace123")

    assert excinfo.value is error


@pytest.mark.parametrize(
    "error",
    [
        RateLimitedError("Please try again later"),
        InvalidCredentialsError("Please check your News API key"),
        UpstreamFailureError("connection reset"),
        RuntimeError("unexpected"),
    ],
)
def test_combined_degrades_news_failures(error) -> None:
    dashboard = Dashboard(FakeWeatherProvider(), FakeNewsProvider(error=error))

    result = dashboard.combined("London")

    assert result.weather.city == "London"
    assert result.news.total_results == 0
    assert result.news.articles == []
    assert result.news.error == NEWS_UNAVAILABLE
    assert result.news.is_degraded


def test_weather_error_wins_when_both_fail() -> None:
    dashboard = Dashboard(
        FakeWeatherProvider(error=UpstreamFailureError("weather down")),
        FakeNewsProvider(error=UpstreamFailureError("news down")),
    )

    with pytest.raises(UpstreamFailureError, match="weather down"):
        dashboard.combined("London")


def test_combined_requires_city() -> None:
    weather = FakeWeatherProvider()
    news = FakeNewsProvider()
    dashboard = Dashboard(weather, news)

    with pytest.raises(MissingParameterError):
        dashboard.combined("  ")

    assert weather.calls == []
    assert news.calls == []


def test_standalone_news_surfaces_errors() -> None:
    dashboard = Dashboard(FakeWeatherProvider(), FakeNewsProvider(error=RateLimitedError()))

    with pytest.raises(RateLimitedError):
        dashboard.news(city="London")


def test_weather_strips_city() -> None:
    weather = FakeWeatherProvider()
    dashboard = Dashboard(weather, FakeNewsProvider())

    dashboard.weather("  Berlin ")

    assert weather.calls == ["Berlin"]


def test_degrade_news_passes_success_through() -> None:
    result = NewsResult(total_results=3, articles=[])

    assert degrade_news(Outcome(value=result)) is result


def test_outcome_unwrap_reraises() -> None:
    with pytest.raises(NotFoundError):
        Outcome(error=NotFoundError()).unwrap()
