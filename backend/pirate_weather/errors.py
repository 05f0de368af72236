from __future__ import annotations


class PirateWeatherError(Exception):
    """Terminal failure of a lookup run. ``str(exc)`` is the user-facing message."""

    exit_code = 1


class ConfigError(PirateWeatherError):
    exit_code = 2


class TransportError(PirateWeatherError):
    def __init__(self, cause: Exception):
        super().__init__(f"Error making request: {cause}")
        self.cause = cause


class ProviderHTTPError(PirateWeatherError):
    def __init__(self, status_line: str, body: str):
        super().__init__(f"API returned error: {status_line}\n{body}")
        self.status_line = status_line
        self.body = body


class DecodeError(PirateWeatherError):
    def __init__(self, reason: object):
        super().__init__(f"Error decoding response: {reason}")
        self.reason = reason
