# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Handles location search for suggestions and current-conditions retrieval.

import httpx

from weather_search import config
from weather_search.models import (
    ForecastResponse,
    GeocodingResponse,
    LocationCandidate,
    WeatherSnapshot,
)

SUGGESTION_COUNT = 5

CURRENT_PARAMS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,"
    "surface_pressure,wind_speed_10m,weather_code"
)


async def search_locations(
    client: httpx.AsyncClient, name: str, count: int = SUGGESTION_COUNT
) -> list[LocationCandidate]:
    """Search Open-Meteo geocoding for places matching `name`.

    A response without a `results` field means no matches, not an error.
    Raises httpx.HTTPError on transport/status failures and ValueError on a bad payload.
    """
    resp = await client.get(
        config.GEOCODING_URL,
        params={"name": name, "count": count, "language": "en", "format": "json"},
    )
    resp.raise_for_status()
    data = GeocodingResponse.model_validate(resp.json())
    return data.results or []


async def get_current_weather(client: httpx.AsyncClient, latitude: float, longitude: float) -> ForecastResponse:
    """Fetch current conditions for a coordinate pair from the Open-Meteo forecast API."""
    resp = await client.get(
        config.FORECAST_URL,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_PARAMS,
        },
    )
    resp.raise_for_status()
    return ForecastResponse.model_validate(resp.json())


def build_snapshot(forecast: ForecastResponse, location: LocationCandidate) -> WeatherSnapshot:
    """Merge forecast readings with the geocoded location label into one snapshot.

    The forecast API carries no place name, so name and country always come from the candidate.
    """
    current = forecast.current
    return WeatherSnapshot(
        temperature=current.temperature_2m,
        apparent_temperature=current.apparent_temperature,
        humidity=current.relative_humidity_2m,
        pressure=current.surface_pressure,
        wind_speed=current.wind_speed_10m,
        wind_speed_unit=forecast.current_units.wind_speed_10m,
        weather_code=current.weather_code,
        location_name=location.name,
        location_country=location.country,
    )
