# ABOUTME: Display formatting for weather readings and the session view model.
# ABOUTME: Produces the strings shown in the results panel and the JSON pushed to the browser.

import math

from weather_search.models import WeatherSnapshot
from weather_search.session import SearchSession


def _round_half_up(value: float) -> int:
    # Browser-style rounding: 14.5 -> 15, -0.5 -> 0
    return math.floor(value + 0.5)


def _plain_number(value: float) -> str:
    return f"{value:g}"


def format_temperature(value: float) -> str:
    return f"{_round_half_up(value)}°C"


def format_wind(speed: float, unit: str) -> str:
    return f"{_plain_number(speed)} {unit}"


def format_humidity(value: float) -> str:
    return f"{_plain_number(value)}%"


def format_pressure(value: float) -> str:
    return f"{_round_half_up(value)} hPa"


def render_weather(snapshot: WeatherSnapshot) -> dict[str, str]:
    """Build the results panel strings for one snapshot."""
    location = snapshot.location_name
    if snapshot.location_country:
        location = f"{location}, {snapshot.location_country}"
    return {
        "location": location,
        "temperature": format_temperature(snapshot.temperature),
        "condition": snapshot.description,
        "feels_like": format_temperature(snapshot.apparent_temperature),
        "wind": format_wind(snapshot.wind_speed, snapshot.wind_speed_unit),
        "humidity": format_humidity(snapshot.humidity),
        "pressure": format_pressure(snapshot.pressure),
    }


def render_state(session: SearchSession) -> dict:
    """Serialize everything the page needs to redraw itself."""
    search = session.search.state
    weather = session.weather.state
    return {
        "query": search.raw_input,
        "suggestions": [c.label for c in search.candidates],
        "loading": weather.loading,
        "error": weather.error,
        "weather": render_weather(weather.snapshot) if weather.snapshot is not None else None,
    }
