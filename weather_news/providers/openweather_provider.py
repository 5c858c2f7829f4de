from __future__ import annotations

import math
from typing import Any, Mapping, Optional

import requests

from ..errors import DashboardError, MissingParameterError, NotFoundError, UpstreamFailureError
from ..models import Coordinates, WeatherReport
from .base import BaseWeatherProvider, HTTPProvider


class OpenWeatherProvider(HTTPProvider, BaseWeatherProvider):
    """Fetches current conditions from the OpenWeather city-name endpoint."""

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
    name = "OpenWeather"

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        super().__init__(api_key, base_url, timeout=timeout)

    def fetch(self, city: str) -> WeatherReport:
        if not city or not city.strip():
            raise MissingParameterError("City parameter is required")
        params = {"q": city.strip(), "appid": self._api_key, "units": "metric"}
        payload = self._get_json(params)
        try:
            return _to_report(payload)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            raise UpstreamFailureError(f"Malformed OpenWeather payload: {exc!r}") from exc

    def _translate_status(self, status: Optional[int], exc: requests.HTTPError) -> DashboardError:
        if status == 404:
            return NotFoundError("Please check the city name and try again")
        return super()._translate_status(status, exc)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity (14.5 -> 15, -2.5 -> -2)."""
    return int(math.floor(float(value) + 0.5))


def _optional_float(section: Optional[Mapping[str, Any]], key: str) -> float:
    # Absent for calm or dry conditions; a reported 0 is kept as-is.
    if not section:
        return 0.0
    value = section.get(key)
    if value is None:
        return 0.0
    return float(value)


def _to_report(payload: Mapping[str, Any]) -> WeatherReport:
    main = payload["main"]
    condition = payload["weather"][0]
    coord = payload["coord"]
    return WeatherReport(
        temperature=round_half_up(main["temp"]),
        description=condition["description"],
        coordinates=Coordinates(lat=float(coord["lat"]), lon=float(coord["lon"])),
        feels_like=round_half_up(main["feels_like"]),
        wind_speed=_optional_float(payload.get("wind"), "speed"),
        country_code=payload["sys"]["country"],
        rain_volume=_optional_float(payload.get("rain"), "3h"),
        city=payload["name"],
        humidity=int(main["humidity"]),
        pressure=int(main["pressure"]),
        icon=condition["icon"],
    )
