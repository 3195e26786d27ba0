"""Access the World Air Quality Index (WAQI) station feed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..services.advice import normalize_index
from ..utils.dates import format_hour, parse_timestamp

LOGGER = logging.getLogger(__name__)

WAQI_BASE_URL = "https://api.waqi.info"
HERE_QUERY = "here"
POLLUTANT_KEYS = ("pm25", "pm10", "no2", "so2", "co", "o3")
FORECAST_KEYS = ("pm25", "pm10", "o3")
TREND_FALLBACK_KEYS = ("pm25", "pm10", "o3", "no2", "so2", "co")
MAX_FORECAST_DAYS = 3
MAX_TREND_POINTS = 24
NOT_FOUND_MESSAGE = "City not found or API error"


class WaqiError(Exception):
    """Base class for failures talking to the WAQI feed."""


class WaqiNetworkError(WaqiError):
    """The request could not be completed or returned a non-2xx status."""


class StationNotFoundError(WaqiError):
    """WAQI answered with ``status: error`` (unknown city, bad token, ...)."""


class WaqiResponseError(WaqiError):
    """The body could not be understood as a feed response."""


@dataclass
class Pollutants:
    pm25: Optional[float] = None
    pm10: Optional[float] = None
    no2: Optional[float] = None
    so2: Optional[float] = None
    co: Optional[float] = None
    o3: Optional[float] = None

    def as_dict(self) -> Dict[str, Optional[float]]:
        return {key: getattr(self, key) for key in POLLUTANT_KEYS}


@dataclass
class ForecastDay:
    day: str
    pm25: Optional[float] = None
    pm10: Optional[float] = None
    o3: Optional[float] = None


@dataclass
class TrendPoint:
    label: str
    value: float


@dataclass
class StationReport:
    query: str
    location_name: str
    index: Optional[float] = None
    pollutants: Pollutants = field(default_factory=Pollutants)
    forecast: List[ForecastDay] = field(default_factory=list)
    hourly: List[TrendPoint] = field(default_factory=list)
    observed_at: Optional[datetime] = None


def geo_query(latitude: float, longitude: float) -> str:
    """Return the feed query for the station nearest to a coordinate."""
    return f"geo:{latitude};{longitude}"


def _reading(entry: Any, key: str = "v") -> Optional[float]:
    if not isinstance(entry, dict):
        return None
    return normalize_index(entry.get(key))


def _parse_pollutants(iaqi: Dict[str, Any]) -> Pollutants:
    return Pollutants(**{key: _reading(iaqi.get(key)) for key in POLLUTANT_KEYS})


def _daily_average(daily: Dict[str, Any], key: str, day: str) -> Optional[float]:
    entries = daily.get(key)
    if not isinstance(entries, list):
        return None
    for entry in entries:
        if isinstance(entry, dict) and entry.get("day") == day:
            return _reading(entry, "avg")
    return None


def _parse_forecast(daily: Dict[str, Any]) -> List[ForecastDay]:
    days: List[ForecastDay] = []
    seen = set()
    for entries in daily.values():
        if not isinstance(entries, list):
            continue
        for entry in entries[:MAX_FORECAST_DAYS]:
            day = entry.get("day") if isinstance(entry, dict) else None
            if not isinstance(day, str) or day in seen:
                continue
            seen.add(day)
            days.append(
                ForecastDay(day=day, **{key: _daily_average(daily, key, day) for key in FORECAST_KEYS})
            )
            if len(days) >= MAX_FORECAST_DAYS:
                return days
    return days


def _parse_hourly(hourly: Dict[str, Any], iaqi: Dict[str, Any], now: datetime) -> List[TrendPoint]:
    points: List[TrendPoint] = []
    series = hourly.get("pm25")
    if isinstance(series, list):
        for entry in series[:MAX_TREND_POINTS]:
            if isinstance(entry, dict):
                label = entry.get("hour") or entry.get("day") or ""
                raw = entry.get("avg")
                value = normalize_index(raw if raw is not None else entry.get("v"))
            else:
                label, value = "", normalize_index(entry)
            if value is None:
                continue
            points.append(TrendPoint(label=str(label), value=value))
    if points:
        return points

    # No hourly feed for this station: fall back to the current readings.
    for offset, key in enumerate(TREND_FALLBACK_KEYS):
        value = _reading(iaqi.get(key))
        points.append(
            TrendPoint(
                label=format_hour(now - timedelta(hours=offset)),
                value=value if value is not None else 0.0,
            )
        )
    return points


def _location_name(city: Dict[str, Any], query: str) -> str:
    name = city.get("name")
    if isinstance(name, str) and name.strip():
        return name
    return query


def parse_station(payload: Dict[str, Any], query: str, now: Optional[datetime] = None) -> StationReport:
    """Shape a WAQI ``feed`` response body into a :class:`StationReport`.

    Missing or malformed fields default to "no reading" rather than failing.
    """
    data = payload.get("data")
    if not isinstance(data, dict):
        data = {}
    city = data.get("city") if isinstance(data.get("city"), dict) else {}
    iaqi = data.get("iaqi") if isinstance(data.get("iaqi"), dict) else {}
    forecast = data.get("forecast") if isinstance(data.get("forecast"), dict) else {}
    daily = forecast.get("daily") if isinstance(forecast.get("daily"), dict) else {}
    hourly = forecast.get("hourly") if isinstance(forecast.get("hourly"), dict) else {}
    time_info = data.get("time") if isinstance(data.get("time"), dict) else {}

    return StationReport(
        query=query,
        location_name=_location_name(city, query),
        index=normalize_index(data.get("aqi")),
        pollutants=_parse_pollutants(iaqi),
        forecast=_parse_forecast(daily),
        hourly=_parse_hourly(hourly, iaqi, now or datetime.now()),
        observed_at=parse_timestamp(time_info.get("iso")),
    )


class WaqiClient:
    """Thin wrapper around the WAQI ``feed`` endpoint."""

    def __init__(
        self,
        token: str,
        base_url: str = WAQI_BASE_URL,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def feed(self, query: str) -> Dict[str, Any]:
        """Return the raw feed body for a city name, ``geo:lat;lon`` or ``here``."""
        url = f"{self.base_url}/feed/{quote(query, safe='')}/"
        LOGGER.debug("Requesting WAQI feed query=%s", query)
        try:
            response = self.session.get(url, params={"token": self.token}, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            LOGGER.warning("WAQI request for %s failed: %s", query, exc)
            raise WaqiNetworkError("Network error") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise WaqiResponseError("Malformed response from WAQI") from exc
        if not isinstance(payload, dict):
            raise WaqiResponseError("Malformed response from WAQI")

        if payload.get("status") == "error":
            detail = payload.get("data")
            message = detail if isinstance(detail, str) and detail else NOT_FOUND_MESSAGE
            LOGGER.info("WAQI returned an error for %s: %s", query, message)
            raise StationNotFoundError(message)
        return payload

    def station(self, query: str) -> StationReport:
        return parse_station(self.feed(query), query)
