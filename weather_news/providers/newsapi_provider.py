from __future__ import annotations

from typing import Any, List, Mapping, Optional

import requests

from ..errors import DashboardError, MissingParameterError, RateLimitedError, UpstreamFailureError
from ..models import NewsArticle, NewsResult
from .base import BaseNewsProvider, HTTPProvider


class NewsAPIProvider(HTTPProvider, BaseNewsProvider):
    """Searches articles on newsapi.org."""

    BASE_URL = "https://newsapi.org/v2/everything"
    name = "News"

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float = 10.0,
        page_size: int = 5,
        language: str = "en",
        sort_by: str = "publishedAt",
    ) -> None:
        super().__init__(api_key, base_url, timeout=timeout)
        self.page_size = page_size
        self.language = language
        self.sort_by = sort_by

    def fetch(self, city: Optional[str] = None, country: Optional[str] = None) -> NewsResult:
        query = search_term(city, country)
        params = {
            "q": query,
            "language": self.language,
            "sortBy": self.sort_by,
            "pageSize": self.page_size,
        }
        payload = self._get_json(params, headers={"X-Api-Key": self._api_key})
        try:
            return _to_result(payload)
        except (AttributeError, TypeError, ValueError) as exc:
            raise UpstreamFailureError(f"Malformed News payload: {exc!r}") from exc

    def _translate_status(self, status: Optional[int], exc: requests.HTTPError) -> DashboardError:
        if status == 429:
            return RateLimitedError("Please try again later")
        return super()._translate_status(status, exc)


def search_term(city: Optional[str], country: Optional[str]) -> str:
    """City wins over country; at least one must be non-blank."""
    for candidate in (city, country):
        if candidate and candidate.strip():
            return candidate.strip()
    raise MissingParameterError("City or country parameter is required")


def _to_result(payload: Mapping[str, Any]) -> NewsResult:
    articles = payload.get("articles") or []
    if not isinstance(articles, list):
        raise TypeError("articles is not a list")
    parsed: List[NewsArticle] = [_to_article(article) for article in articles]
    total = payload.get("totalResults")
    return NewsResult(
        total_results=int(total) if total is not None else len(parsed),
        articles=parsed,
    )


def _to_article(article: Mapping[str, Any]) -> NewsArticle:
    return NewsArticle(
        title=article.get("title") or "",
        description=article.get("description") or "",
        url=article.get("url") or "",
        published_at=article.get("publishedAt") or "",
        source=(article.get("source") or {}).get("name") or "Unknown",
        image_url=article.get("urlToImage") or None,
    )
