from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from pirate_weather.domain.snapshot import WeatherSnapshot
from pirate_weather.presentation.emoji import icon_emoji
from pirate_weather.presentation.timefmt import format_local_time

TITLE = "Pirate Weather"

WIND_UNITS: Mapping[str, str] = MappingProxyType(
    {
        "us": "mph",
        "si": "m/s",
        "ca": "km/h",
        "uk": "km/h",
    }
)


def temperature_unit(units: str) -> str:
    return "°F" if units == "us" else "°C"


def wind_unit(units: str) -> str:
    return WIND_UNITS.get(units, WIND_UNITS["us"])


def render_report(snapshot: WeatherSnapshot, units: str) -> List[str]:
    now = snapshot.currently
    today = snapshot.today
    temp_unit = temperature_unit(units)
    return [
        TITLE,
        f"📍 {snapshot.lat:.6f},{snapshot.lon:.6f}",
        f"{icon_emoji(now.icon, today.moon_phase)} {now.summary}",
        f"🌅 Sunrise:        {format_local_time(today.sunrise_time, snapshot.timezone)}",
        f"🌇 Sunset:         {format_local_time(today.sunset_time, snapshot.timezone)}",
        f"🌡️ Temperature:    {now.temperature:.1f}{temp_unit}",
        f"🌡️ Feels Like:     {now.apparent_temperature:.1f}{temp_unit}",
        f"☔️ Precip Chance:  {now.precip_probability * 100:.0f}%",
        f"💧 Humidity:       {now.humidity * 100:.0f}%",
        f"💨 Wind Speed:     {now.wind_speed:.1f} {wind_unit(units)}",
    ]
