# ABOUTME: Static WMO weather code table used by Open-Meteo.
# ABOUTME: Resolves integer condition codes to human-readable descriptions.

from types import MappingProxyType

UNKNOWN_CONDITION = "Unknown"

WEATHER_CODES = MappingProxyType(
    {
        0: "Clear sky",
        1: "Mainly clear",
        2: "Partly cloudy",
        3: "Overcast",
        45: "Foggy",
        48: "Depositing rime fog",
        51: "Light drizzle",
        53: "Moderate drizzle",
        55: "Dense drizzle",
        61: "Slight rain",
        63: "Moderate rain",
        65: "Heavy rain",
        71: "Slight snow fall",
        73: "Moderate snow fall",
        75: "Heavy snow fall",
        77: "Snow grains",
        80: "Slight rain showers",
        81: "Moderate rain showers",
        82: "Violent rain showers",
        85: "Slight snow showers",
        86: "Heavy snow showers",
        95: "Thunderstorm",
        96: "Thunderstorm with slight hail",
        99: "Thunderstorm with heavy hail",
    }
)


def describe(code: int) -> str:
    """Return the condition description for a weather code, or "Unknown" if the table has none."""
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)
