from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class WeatherReport:
    """Current conditions for a city, in metric units."""

    temperature: int
    description: str
    coordinates: Coordinates
    feels_like: int
    wind_speed: float
    country_code: str
    rain_volume: float
    city: str
    humidity: int
    pressure: int
    icon: str


@dataclass(frozen=True, slots=True)
class NewsArticle:
    """A single article returned by the news provider."""

    title: str
    description: str
    url: str
    published_at: str
    source: str
    image_url: Optional[str] = None


@dataclass(slots=True)
class NewsResult:
    """Articles matching a search term, or an explicitly degraded placeholder."""

    total_results: int
    articles: List[NewsArticle] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def degraded(cls, note: str) -> "NewsResult":
        return cls(total_results=0, articles=[], error=note)

    @property
    def is_degraded(self) -> bool:
        return self.error is not None


@dataclass(slots=True)
class CombinedResult:
    weather: WeatherReport
    news: NewsResult


@dataclass(slots=True)
class Outcome(Generic[T]):
    """Settled result of a provider call: either a value or the raised error."""

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
