from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEMO_KEY = "demo_key"


@dataclass(slots=True)
class DashboardConfig:
    """Runtime configuration for the weather & news dashboard."""

    openweather_api_key: str = DEMO_KEY
    news_api_key: str = DEMO_KEY
    host: str = "0.0.0.0"
    port: int = 3000
    http_timeout: float = 10.0
    news_page_size: int = 5
    cors_origin: str = "*"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        import os

        return cls(
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY") or DEMO_KEY,
            news_api_key=os.getenv("NEWS_API_KEY") or DEMO_KEY,
            host=os.getenv("HOST", "0.0.0.0"),
            port=_parse_int("PORT", os.getenv("PORT"), default=3000),
            http_timeout=_parse_float("HTTP_TIMEOUT", os.getenv("HTTP_TIMEOUT"), default=10.0),
            news_page_size=_parse_int("NEWS_PAGE_SIZE", os.getenv("NEWS_PAGE_SIZE"), default=5),
            cors_origin=os.getenv("CORS_ORIGIN", "*"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def uses_demo_keys(self) -> bool:
        return DEMO_KEY in (self.openweather_api_key, self.news_api_key)


def _parse_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer if set") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed


def _parse_float(name: str, value: Optional[str], default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number if set") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed
