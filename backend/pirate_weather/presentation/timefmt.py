from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

NOT_AVAILABLE = "N/A"


def format_local_time(timestamp: int, tz_name: str) -> str:
    """Render unix seconds as 12-hour wall time in *tz_name*, e.g. ``6:42 AM``.

    Returns ``N/A`` when the zone cannot be loaded or the timestamp falls
    outside the range ``datetime`` can represent. An empty name means UTC.
    """
    try:
        tz = ZoneInfo(tz_name or "UTC")
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return NOT_AVAILABLE
    try:
        local = datetime.fromtimestamp(timestamp, tz)
    except (OverflowError, ValueError, OSError):
        return NOT_AVAILABLE
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.hour % 12 or 12}:{local.minute:02d} {meridiem}"
