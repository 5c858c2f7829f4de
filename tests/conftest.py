from __future__ import annotations

import os

import pytest

os.environ.setdefault("OPENWEATHER_API_KEY", "test-weather-key")
os.environ.setdefault("NEWS_API_KEY", "test-news-key")

from app import create_app  # noqa: E402
from weather_news import Dashboard, DashboardConfig  # noqa: E402


@pytest.fixture()
def config() -> DashboardConfig:
    return DashboardConfig(openweather_api_key="test-weather-key", news_api_key="test-news-key")


@pytest.fixture()
def client(config):
    app = create_app(config, dashboard=Dashboard.from_config(config))
    app.config["TESTING"] = True
    return app.test_client()
