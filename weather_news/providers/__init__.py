"""Upstream weather and news providers."""

from .base import BaseNewsProvider, BaseWeatherProvider
from .newsapi_provider import NewsAPIProvider
from .openweather_provider import OpenWeatherProvider

__all__ = ["BaseNewsProvider", "BaseWeatherProvider", "NewsAPIProvider", "OpenWeatherProvider"]
