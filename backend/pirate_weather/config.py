from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pirate_weather.errors import ConfigError

log = logging.getLogger(__name__)

ENV_LAT = "PIRATE_WEATHER_LAT"
ENV_LON = "PIRATE_WEATHER_LON"
ENV_UNITS = "PIRATE_WEATHER_UNITS"
ENV_API_KEY = "PIRATE_WEATHER_API_KEY"

# New York City
DEFAULT_LAT = 40.7128
DEFAULT_LON = -74.0060
DEFAULT_UNITS = "us"
VALID_UNITS = ("us", "si", "ca", "uk")


@dataclass(frozen=True)
class Settings:
    lat: float
    lon: float
    units: str
    api_key: str


def env_float(key: str, default: float, environ: Optional[Mapping[str, str]] = None) -> float:
    """Read a float env var, falling back to *default* when unset or unparseable.

    Surrounding whitespace, digit separators and non-finite results
    (``1e400``, ``nan``) all count as unparseable.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(key, "")
    if not raw:
        return default
    try:
        if raw != raw.strip() or "_" in raw:
            raise ValueError(raw)
        value = float(raw)
        if not math.isfinite(value):
            raise ValueError(raw)
    except ValueError:
        log.debug("Ignoring unparseable %s=%r, using %s", key, raw, default)
        return default
    return value


def resolve_settings(
    *,
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    units: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Merge flag values over environment defaults and validate the result.

    Flags left as ``None`` fall back to the environment, then to the NYC
    defaults. The API key only comes from the environment. Raises
    :class:`ConfigError` for a missing key or an unknown units preset.
    """
    environ = os.environ if environ is None else environ
    if lat is None:
        lat = env_float(ENV_LAT, DEFAULT_LAT, environ)
    if lon is None:
        lon = env_float(ENV_LON, DEFAULT_LON, environ)
    if units is None:
        units = environ.get(ENV_UNITS) or DEFAULT_UNITS

    api_key = environ.get(ENV_API_KEY, "")
    if not api_key:
        raise ConfigError(f"Please set {ENV_API_KEY} environment variable")
    if units not in VALID_UNITS:
        raise ConfigError(f"Invalid units. Must be one of: {', '.join(VALID_UNITS)}")

    return Settings(lat=lat, lon=lon, units=units, api_key=api_key)
