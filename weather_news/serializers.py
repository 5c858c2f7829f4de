"""JSON shapes served to the browser client."""

from __future__ import annotations

from typing import Any, Dict

from .models import CombinedResult, NewsArticle, NewsResult, WeatherReport


def weather_to_dict(report: WeatherReport) -> Dict[str, Any]:
    return {
        "temperature": report.temperature,
        "description": report.description,
        "coordinates": {"lat": report.coordinates.lat, "lon": report.coordinates.lon},
        "feelsLike": report.feels_like,
        "windSpeed": report.wind_speed,
        "countryCode": report.country_code,
        "rainVolume": report.rain_volume,
        "city": report.city,
        "humidity": report.humidity,
        "pressure": report.pressure,
        "icon": report.icon,
    }


def article_to_dict(article: NewsArticle) -> Dict[str, Any]:
    return {
        "title": article.title,
        "description": article.description,
        "url": article.url,
        "publishedAt": article.published_at,
        "source": article.source,
        "imageUrl": article.image_url,
    }


def news_to_dict(result: NewsResult) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "totalResults": result.total_results,
        "articles": [article_to_dict(article) for article in result.articles],
    }
    if result.error is not None:
        data["error"] = result.error
    return data


def combined_to_dict(result: CombinedResult) -> Dict[str, Any]:
    return {
        "weather": weather_to_dict(result.weather),
        "news": news_to_dict(result.news),
    }
