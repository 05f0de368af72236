from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pirate_weather.errors import DecodeError


@dataclass(frozen=True)
class CurrentConditions:
    icon: str
    summary: str
    time: int
    temperature: float
    apparent_temperature: float
    precip_probability: float
    wind_speed: float
    humidity: float


@dataclass(frozen=True)
class DailySummary:
    moon_phase: float
    sunrise_time: int
    sunset_time: int


@dataclass(frozen=True)
class WeatherSnapshot:
    lat: float
    lon: float
    timezone: str
    currently: CurrentConditions
    today: DailySummary

    @classmethod
    def from_payload(cls, payload: Any, *, lat: float, lon: float) -> WeatherSnapshot:
        """Decode a forecast document into a snapshot.

        Coordinates echo the request rather than the provider's rounded
        values. Missing or null fields take zero values; wrong types and an
        empty ``daily.data`` raise :class:`DecodeError`.
        """
        data = _object(payload, "response")
        current = _object(data.get("currently"), "currently")
        daily = _object(data.get("daily"), "daily")
        days = daily.get("data")
        if not isinstance(days, list) or not days:
            raise DecodeError("daily.data must contain at least one entry")
        first = _object(days[0], "daily.data[0]")

        return cls(
            lat=lat,
            lon=lon,
            timezone=_get_value(data, "timezone", cast=str),
            currently=CurrentConditions(
                icon=_get_value(current, "icon", cast=str),
                summary=_get_value(current, "summary", cast=str),
                time=_get_value(current, "time", cast=int),
                temperature=_get_value(current, "temperature"),
                apparent_temperature=_get_value(current, "apparentTemperature"),
                precip_probability=_get_value(current, "precipProbability"),
                wind_speed=_get_value(current, "windSpeed"),
                humidity=_get_value(current, "humidity"),
            ),
            today=DailySummary(
                moon_phase=_get_value(first, "moonPhase"),
                sunrise_time=_get_value(first, "sunriseTime", cast=int),
                sunset_time=_get_value(first, "sunsetTime", cast=int),
            ),
        )


def _object(value: Any, name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"{name} must be an object, got {type(value).__name__}")
    return value


def _get_value(section: dict, key: str, cast=float):
    value = section.get(key)
    if value is None:
        return cast()
    if cast is str:
        if not isinstance(value, str):
            raise DecodeError(f"{key} must be a string, got {type(value).__name__}")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{key} must be a number, got {type(value).__name__}")
    if cast is int and isinstance(value, float) and not value.is_integer():
        raise DecodeError(f"{key} must be an integer, got {value!r}")
    try:
        return cast(value)
    except (OverflowError, ValueError) as exc:
        raise DecodeError(f"{key}: {exc}") from exc
