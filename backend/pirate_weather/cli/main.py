import logging
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv

from pirate_weather.config import ENV_LAT, ENV_LON, ENV_UNITS, VALID_UNITS, resolve_settings
from pirate_weather.domain.snapshot import WeatherSnapshot
from pirate_weather.errors import PirateWeatherError
from pirate_weather.infra.pirate_weather_client import PirateWeatherClient
from pirate_weather.presentation.report import render_report

app = typer.Typer(help="Current conditions from the Pirate Weather API", add_completion=False)
log = logging.getLogger("pirate_weather")


def _build_client(api_key: str) -> PirateWeatherClient:
    return PirateWeatherClient(api_key)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.setLevel(level)


@app.command()
def weather(
    lat: Optional[float] = typer.Option(None, help=f"Latitude (can also use {ENV_LAT} environment variable)"),
    lon: Optional[float] = typer.Option(None, help=f"Longitude (can also use {ENV_LON} environment variable)"),
    units: Optional[str] = typer.Option(
        None,
        help=f"Units system ({', '.join(VALID_UNITS)}) (can also use {ENV_UNITS} environment variable)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request details to stderr"),
):
    """Print current conditions and today's sunrise/sunset for a location."""
    _configure_logging(verbose)
    try:
        settings = resolve_settings(lat=lat, lon=lon, units=units)
        client = _build_client(settings.api_key)
        payload = client.fetch_forecast(settings.lat, settings.lon, settings.units)
        snapshot = WeatherSnapshot.from_payload(payload, lat=settings.lat, lon=settings.lon)
    except PirateWeatherError as exc:
        log.debug("Lookup failed: %r", exc)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exc.exit_code)
    for line in render_report(snapshot, settings.units):
        typer.echo(line)


def main() -> None:
    load_dotenv(find_dotenv(usecwd=True))
    app()


if __name__ == "__main__":
    main()
