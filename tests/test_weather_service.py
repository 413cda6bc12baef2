# ABOUTME: Contract tests for the weather service layer.
# ABOUTME: Validates geocoding search, current-weather calls, and snapshot building with mocked HTTP.

import httpx
import pytest
from pydantic import ValidationError

from conftest import LONDON_FORECAST, LONDON_GEOCODING, mock_client
from weather_search import config
from weather_search.models import ForecastResponse
from weather_search.weather_service import (
    CURRENT_PARAMS,
    build_snapshot,
    get_current_weather,
    search_locations,
)


class TestSearchLocations:
    @pytest.mark.asyncio
    async def test_returns_candidates(self):
        """search_locations maps geocoding hits to candidates.

        Implementation: Mocks the geocoding API to return London.
        Passing implies: Suggestions carry name, country and coordinates.
        """
        client = mock_client(LONDON_GEOCODING)
        result = await search_locations(client, "Lond")

        assert len(result) == 1
        assert result[0].name == "London"
        assert result[0].country == "United Kingdom"
        assert result[0].latitude == 51.5
        assert result[0].longitude == -0.12
        client.get.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_sends_suggestion_params(self):
        """search_locations asks for five English JSON results.

        Implementation: Inspects the mock client's call args.
        Passing implies: The request matches the geocoding contract.
        """
        client = mock_client({"results": []})
        await search_locations(client, "Lond")

        assert client.get.call_args.args[0] == config.GEOCODING_URL
        params = client.get.call_args.kwargs["params"]
        assert params == {"name": "Lond", "count": 5, "language": "en", "format": "json"}

    @pytest.mark.asyncio
    async def test_missing_results_key_is_empty(self):
        """A response without `results` yields no candidates.

        Implementation: Mocks the geocoding API to return an empty object.
        Passing implies: Unknown places are an empty list, not an error.
        """
        assert await search_locations(mock_client({}), "Xyzzyville") == []

    @pytest.mark.asyncio
    async def test_http_error_propagates(self):
        """Non-2xx geocoding responses raise httpx.HTTPStatusError.

        Implementation: Mocks a 500 response.
        Passing implies: The controller can tell failures apart from empty results.
        """
        with pytest.raises(httpx.HTTPStatusError):
            await search_locations(mock_client({}, status_code=500), "London")

    @pytest.mark.asyncio
    async def test_malformed_payload_raises(self):
        """A results list of the wrong shape raises ValidationError.

        Implementation: Mocks a payload whose results is a string.
        Passing implies: Bad payloads are reported to the caller.
        """
        with pytest.raises(ValidationError):
            await search_locations(mock_client({"results": "oops"}), "London")


class TestGetCurrentWeather:
    @pytest.mark.asyncio
    async def test_returns_forecast(self):
        """get_current_weather parses the current block.

        Implementation: Mocks the forecast API with the London payload.
        Passing implies: Readings and units are available to the controller.
        """
        result = await get_current_weather(mock_client(LONDON_FORECAST), 51.5, -0.12)

        assert result.current.temperature_2m == 15
        assert result.current.relative_humidity_2m == 70
        assert result.current_units.wind_speed_10m == "km/h"

    @pytest.mark.asyncio
    async def test_sends_correct_params(self):
        """get_current_weather sends coordinates and the current-field list.

        Implementation: Inspects the mock client's call args.
        Passing implies: The request matches the forecast contract.
        """
        client = mock_client(LONDON_FORECAST)
        await get_current_weather(client, 51.5, -0.12)

        assert client.get.call_args.args[0] == config.FORECAST_URL
        params = client.get.call_args.kwargs["params"]
        assert params["latitude"] == 51.5
        assert params["longitude"] == -0.12
        assert params["current"] == CURRENT_PARAMS
        assert params["current"].split(",") == [
            "temperature_2m",
            "relative_humidity_2m",
            "apparent_temperature",
            "surface_pressure",
            "wind_speed_10m",
            "weather_code",
        ]

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        """A 503 from the forecast API raises httpx.HTTPStatusError.

        Implementation: Mocks a 503 response.
        Passing implies: The controller sees the failure and shows its error message.
        """
        with pytest.raises(httpx.HTTPStatusError):
            await get_current_weather(mock_client({}, status_code=503), 51.5, -0.12)


class TestBuildSnapshot:
    def test_location_comes_from_candidate(self, london):
        """Snapshot name and country come from the candidate, not the weather payload.

        Implementation: Builds a snapshot from the London forecast and candidate.
        Passing implies: The panel label matches the chosen suggestion.
        """
        forecast = ForecastResponse.model_validate(LONDON_FORECAST)
        snap = build_snapshot(forecast, london)

        assert snap.location_name == "London"
        assert snap.location_country == "United Kingdom"
        assert snap.temperature == 15
        assert snap.apparent_temperature == 14
        assert snap.humidity == 70
        assert snap.pressure == 1012
        assert snap.wind_speed == 10
        assert snap.wind_speed_unit == "km/h"
        assert snap.weather_code == 3
