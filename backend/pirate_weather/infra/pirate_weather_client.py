from __future__ import annotations

import logging
from typing import Optional

import httpx

from pirate_weather.errors import DecodeError, ProviderHTTPError, TransportError

log = logging.getLogger(__name__)


class PirateWeatherClient:
    BASE_URL = "https://api.pirateweather.net/forecast"
    EXCLUDE = ("minutely", "hourly", "alerts")

    def __init__(self, api_key: str, *, transport: Optional[httpx.BaseTransport] = None):
        self.api_key = api_key
        self.transport = transport

    def build_url(self, lat: float, lon: float, units: str, *, redact: bool = False) -> str:
        key = "***" if redact else self.api_key
        return (
            f"{self.BASE_URL}/{key}/{lat:.6f},{lon:.6f}"
            f"?units={units}&exclude={','.join(self.EXCLUDE)}"
        )

    def fetch_forecast(self, lat: float, lon: float, units: str) -> dict:
        """Issue the single forecast GET and return the decoded JSON body."""
        url = self.build_url(lat, lon, units)
        log.debug("GET %s", self.build_url(lat, lon, units, redact=True))
        try:
            with httpx.Client(transport=self.transport) as client:
                resp = client.get(url)
                if resp.status_code != httpx.codes.OK:
                    raise ProviderHTTPError(f"{resp.status_code} {resp.reason_phrase}", resp.text)
                try:
                    data = resp.json()
                except ValueError as exc:
                    raise DecodeError(exc) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(exc) from exc
        log.debug("Forecast received for %.6f,%.6f", lat, lon)
        return data
