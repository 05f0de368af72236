from __future__ import annotations

import copy

import pytest

from pirate_weather.domain.snapshot import WeatherSnapshot
from pirate_weather.errors import DecodeError

PAYLOAD = {
    "latitude": 40.7128,
    "longitude": -74.006,
    "timezone": "America/New_York",
    "offset": -5,
    "currently": {
        "time": 1699962120,
        "icon": "rain",
        "summary": "Light Rain",
        "temperature": 48.2,
        "apparentTemperature": 44.9,
        "precipProbability": 0.8,
        "windSpeed": 11.4,
        "humidity": 0.91,
        "pressure": 1012.3,
    },
    "daily": {
        "data": [
            {"moonPhase": 0.07, "sunriseTime": 1699962120, "sunsetTime": 1700001000},
            {"moonPhase": 0.1, "sunriseTime": 1700048580, "sunsetTime": 1700087340},
        ]
    },
    "flags": {"units": "us"},
}


def _payload(**changes):
    payload = copy.deepcopy(PAYLOAD)
    payload.update(changes)
    return payload


def test_decodes_current_and_first_day():
    snapshot = WeatherSnapshot.from_payload(PAYLOAD, lat=40.7, lon=-74.0)
    assert snapshot.lat == 40.7
    assert snapshot.lon == -74.0
    assert snapshot.timezone == "America/New_York"
    assert snapshot.currently.icon == "rain"
    assert snapshot.currently.summary == "Light Rain"
    assert snapshot.currently.time == 1699962120
    assert snapshot.currently.apparent_temperature == 44.9
    assert snapshot.currently.precip_probability == 0.8
    assert snapshot.currently.wind_speed == 11.4
    assert snapshot.currently.humidity == 0.91
    assert snapshot.today.moon_phase == 0.07
    assert snapshot.today.sunrise_time == 1699962120
    assert snapshot.today.sunset_time == 1700001000


def test_integer_numbers_become_floats():
    payload = _payload()
    payload["currently"]["temperature"] = 50
    snapshot = WeatherSnapshot.from_payload(payload, lat=0.0, lon=0.0)
    assert snapshot.currently.temperature == 50.0
    assert isinstance(snapshot.currently.temperature, float)


def test_missing_and_null_fields_take_zero_values():
    payload = _payload(timezone=None)
    del payload["currently"]["summary"]
    payload["currently"]["humidity"] = None
    snapshot = WeatherSnapshot.from_payload(payload, lat=0.0, lon=0.0)
    assert snapshot.timezone == ""
    assert snapshot.currently.summary == ""
    assert snapshot.currently.humidity == 0.0


@pytest.mark.parametrize("daily", [{"data": []}, {}, None])
def test_daily_requires_one_entry(daily):
    with pytest.raises(DecodeError):
        WeatherSnapshot.from_payload(_payload(daily=daily), lat=0.0, lon=0.0)


def test_wrong_types_are_decode_errors():
    payload = _payload()
    payload["currently"]["temperature"] = "warm"
    with pytest.raises(DecodeError) as excinfo:
        WeatherSnapshot.from_payload(payload, lat=0.0, lon=0.0)
    assert str(excinfo.value).startswith("Error decoding response:")

    payload = _payload()
    payload["currently"]["humidity"] = True
    with pytest.raises(DecodeError):
        WeatherSnapshot.from_payload(payload, lat=0.0, lon=0.0)

    with pytest.raises(DecodeError):
        WeatherSnapshot.from_payload(_payload(currently=[1, 2]), lat=0.0, lon=0.0)

    with pytest.raises(DecodeError):
        WeatherSnapshot.from_payload(["not", "an", "object"], lat=0.0, lon=0.0)


def test_fractional_time_is_decode_error():
    payload = _payload()
    payload["currently"]["time"] = 1699962120.7
    with pytest.raises(DecodeError):
        WeatherSnapshot.from_payload(payload, lat=0.0, lon=0.0)

    payload["currently"]["time"] = 1699962120.0
    assert WeatherSnapshot.from_payload(payload, lat=0.0, lon=0.0).currently.time == 1699962120
