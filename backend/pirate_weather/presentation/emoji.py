from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

FALLBACK_ICON = "🏴‍☠️"
CLEAR_NIGHT = "clear-night"

ICON_EMOJI: Mapping[str, str] = MappingProxyType(
    {
        "clear-day": "☀️",
        "rain": "🌧️",
        "snow": "🌨️",
        "sleet": "🌨️",
        "wind": "🌬️",
        "fog": "🌫️",
        "cloudy": "☁️",
        "partly-cloudy-day": "🌤️",
        "partly-cloudy-night": "☁️",
        "thunderstorm": "⛈️",
        "hail": "🌨️",
        "none": FALLBACK_ICON,
    }
)

# new, waxing crescent, first quarter, waxing gibbous,
# full, waning gibbous, last quarter, waning crescent
MOON_PHASES = ("🌑", "🌒", "🌓", "🌔", "🌕", "🌖", "🌗", "🌘")
PHASE_WIDTH = 1 / len(MOON_PHASES)


def moon_phase_emoji(phase: float) -> str:
    """Bucket a lunation fraction into one of eight emoji.

    Out-of-range input is clamped: negatives and NaN read as a new moon,
    anything >= 1 as a waning crescent.
    """
    if not phase >= 0.0:
        return MOON_PHASES[0]
    if phase >= 1.0:
        return MOON_PHASES[-1]
    return MOON_PHASES[min(int(phase / PHASE_WIDTH), len(MOON_PHASES) - 1)]


def icon_emoji(icon: str, moon_phase: float) -> str:
    if icon == CLEAR_NIGHT:
        return moon_phase_emoji(moon_phase)
    return ICON_EMOJI.get(icon, FALLBACK_ICON)
