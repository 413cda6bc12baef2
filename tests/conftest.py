# ABOUTME: Shared test fixtures for the weather search test suite.
# ABOUTME: Provides Open-Meteo sample payloads and mock HTTP client builders.

from unittest.mock import AsyncMock

import httpx
import pytest

from weather_search.models import LocationCandidate

LONDON_GEOCODING = {
    "results": [
        {
            "id": 2643743,
            "name": "London",
            "latitude": 51.5,
            "longitude": -0.12,
            "country": "United Kingdom",
            "timezone": "Europe/London",
        }
    ]
}

LONDON_FORECAST = {
    "latitude": 51.5,
    "longitude": -0.12,
    "current_units": {
        "temperature_2m": "°C",
        "relative_humidity_2m": "%",
        "apparent_temperature": "°C",
        "surface_pressure": "hPa",
        "wind_speed_10m": "km/h",
    },
    "current": {
        "time": "2025-01-15T12:00",
        "temperature_2m": 15,
        "relative_humidity_2m": 70,
        "apparent_temperature": 14,
        "surface_pressure": 1012,
        "wind_speed_10m": 10,
        "weather_code": 3,
    },
}


def make_response(json_data: dict, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def mock_client(json_data: dict, status_code: int = 200) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient whose get() always returns the given JSON response."""
    mock = AsyncMock(spec=httpx.AsyncClient)
    mock.get.return_value = make_response(json_data, status_code)
    return mock


@pytest.fixture
def london() -> LocationCandidate:
    return LocationCandidate(name="London", country="United Kingdom", latitude=51.5, longitude=-0.12)


@pytest.fixture
def paris() -> LocationCandidate:
    return LocationCandidate(name="Paris", country="France", latitude=48.85, longitude=2.35)
