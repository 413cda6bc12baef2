# ABOUTME: Pydantic BaseModels for Open-Meteo payloads and per-session UI state.
# ABOUTME: Defines location candidates, weather snapshots, and the search/weather state holders.

from pydantic import BaseModel, ConfigDict, field_validator

from weather_search.weather_codes import describe


class LocationCandidate(BaseModel):
    """A geocoded location offered as a search suggestion."""

    name: str
    country: str = ""
    latitude: float
    longitude: float

    @field_validator("country", mode="before")
    @classmethod
    def _country_or_empty(cls, value):
        # Open-Meteo sends null for places outside any country
        return "" if value is None else value

    @property
    def label(self) -> str:
        if not self.country:
            return self.name
        return f"{self.name}, {self.country}"


class GeocodingResponse(BaseModel):
    """Parsed response from the Open-Meteo geocoding endpoint."""

    results: list[LocationCandidate] | None = None


class CurrentConditions(BaseModel):
    """The `current` block of an Open-Meteo forecast response."""

    temperature_2m: float
    relative_humidity_2m: float
    apparent_temperature: float
    surface_pressure: float
    wind_speed_10m: float
    weather_code: int


class CurrentUnits(BaseModel):
    """The `current_units` block; only the wind unit is displayed."""

    temperature_2m: str = "°C"
    relative_humidity_2m: str = "%"
    apparent_temperature: str = "°C"
    surface_pressure: str = "hPa"
    wind_speed_10m: str = "km/h"


class ForecastResponse(BaseModel):
    """Parsed response from the Open-Meteo forecast endpoint (current conditions only)."""

    current: CurrentConditions
    current_units: CurrentUnits


class WeatherSnapshot(BaseModel):
    """Current readings for one location, taken at fetch time."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    apparent_temperature: float
    humidity: float
    pressure: float
    wind_speed: float
    wind_speed_unit: str
    weather_code: int
    location_name: str
    location_country: str

    @property
    def description(self) -> str:
        return describe(self.weather_code)


class SearchQueryState(BaseModel):
    """Input text and suggestion list for one search box."""

    raw_input: str = ""
    candidates: list[LocationCandidate] = []
    is_loading: bool = False
    error_message: str | None = None


class WeatherState(BaseModel):
    """Weather panel state: the shown snapshot plus loading and error flags."""

    snapshot: WeatherSnapshot | None = None
    loading: bool = False
    error: str | None = None
