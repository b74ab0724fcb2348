"""ABOUTME: Tests for the MCP tool layer - result rendering and error conversion.

The service is replaced with mocks; these tests check that every outcome is
returned as a CallToolResult and never raised.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from common.error_handling import ERROR_UNEXPECTED, ERROR_VALIDATION_FAILED
from weather_mcp import server as weather_server
from weather_mcp.advisory import GOOD_CONDITIONS_ADVICE
from weather_mcp.errors import (
    ERROR_ADDRESS_NOT_FOUND,
    ERROR_INVALID_COORDINATES,
    ERROR_IP_LOCATION,
    ERROR_UNKNOWN,
    AddressNotFoundError,
    InvalidCoordinatesError,
    IpLocationUnavailableError,
    WeatherUnavailableError,
)
from weather_mcp.models import (
    CompassPoint,
    Coordinate,
    CurrentConditions,
    DailyForecastEntry,
    ForecastResult,
    GeocodeResult,
    ResolvedLocation,
)
from weather_mcp.service import WeatherService

BEIJING = GeocodeResult("Beijing, Beijing, China", Coordinate(39.9, 116.4), "Beijing", "China", 0.9)
BERLIN = ResolvedLocation("Berlin, Germany", Coordinate(52.52, 13.405), "Berlin", "Germany", "Europe/Berlin")
CONDITIONS = CurrentConditions(
    location_label="Beijing, Beijing, China",
    temperature_c=18,
    feels_like_c=17,
    description="Clear sky",
    humidity_pct=50,
    wind_speed_kph=10,
    wind_direction=CompassPoint.NE,
    pressure_hpa=1013,
    visibility_km=10,
    uv_index=0,
    observed_at="2024-01-15 14:30",
)
FORECAST = ForecastResult(
    location_label="Beijing, Beijing, China",
    current=CONDITIONS,
    days=(
        DailyForecastEntry("2024-01-15", 20, 8, "Clear sky", 50, 12, 0),
        DailyForecastEntry("2024-01-16", 15, 6, "Moderate rain", 50, 20, 80),
    ),
)


@pytest.fixture
def service(monkeypatch):
    mock = MagicMock(spec=WeatherService)
    mock.weather_for_address = AsyncMock(return_value=(BEIJING, CONDITIONS))
    mock.forecast_for_address = AsyncMock(return_value=(BEIJING, FORECAST))
    mock.current_location_weather = AsyncMock(return_value=(BERLIN, CONDITIONS))
    mock.current_location_forecast = AsyncMock(return_value=(BERLIN, FORECAST))
    mock.weather_by_coordinates = AsyncMock(return_value=CONDITIONS)
    mock.geocode_address = AsyncMock(return_value=BEIJING)
    monkeypatch.setattr(weather_server, "service", mock)
    return mock


def _text(result) -> str:
    return result.content[0].text


class TestAddressTools:
    """Tests for address-based tools."""

    @pytest.mark.asyncio
    async def test_weather_by_address_success(self, service):
        result = await weather_server.get_weather_by_address("Beijing")

        assert not result.isError
        text = _text(result)
        assert "📍 Location: Beijing, Beijing, China" in text
        assert "18°C" in text
        assert "(NE)" in text
        assert GOOD_CONDITIONS_ADVICE in text
        assert result.metadata["latitude"] == 39.9

    @pytest.mark.asyncio
    async def test_weather_by_address_not_found(self, service):
        service.weather_for_address.side_effect = AddressNotFoundError("zzzznotarealplace123")

        result = await weather_server.get_weather_by_address("zzzznotarealplace123")

        assert result.isError
        assert result.metadata["error_code"] == ERROR_ADDRESS_NOT_FOUND
        assert result.metadata["error_type"] == "location_error"
        assert "zzzznotarealplace123" in _text(result)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("address", ["", "   ", "x" * 300])
    async def test_invalid_address_is_validation_error(self, service, address):
        result = await weather_server.get_weather_by_address(address)

        assert result.isError
        assert result.metadata["error_code"] == ERROR_VALIDATION_FAILED
        service.weather_for_address.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_forecast_by_address_success(self, service):
        result = await weather_server.get_forecast_by_address("Beijing", 2)

        assert not result.isError
        text = _text(result)
        assert "Today (2024-01-15)" in text
        assert "Tomorrow (2024-01-16)" in text
        assert "Chance of rain: 80%" in text
        assert result.metadata["days"] == 2
        service.forecast_for_address.assert_awaited_once_with("Beijing", 2)

    @pytest.mark.asyncio
    async def test_forecast_weather_error(self, service):
        service.forecast_for_address.side_effect = WeatherUnavailableError("connection reset", ERROR_UNKNOWN)

        result = await weather_server.get_forecast_by_address("Beijing", 5)

        assert result.isError
        assert result.metadata["error_code"] == ERROR_UNKNOWN
        assert result.metadata["error_type"] == "weather_error"

    @pytest.mark.asyncio
    async def test_geocode_address_success(self, service):
        result = await weather_server.geocode_address("Beijing")

        text = _text(result)
        assert "Address: Beijing, Beijing, China" in text
        assert "Confidence: 0.9" in text
        assert result.metadata["confidence"] == 0.9


class TestLocationTools:
    """Tests for IP- and coordinate-based tools."""

    @pytest.mark.asyncio
    async def test_current_location_weather(self, service):
        result = await weather_server.get_current_location_weather()

        assert _text(result).startswith("🌍 Detected location: Berlin, Germany")

    @pytest.mark.asyncio
    async def test_current_location_failure(self, service):
        service.current_location_forecast.side_effect = IpLocationUnavailableError("reserved range")

        result = await weather_server.get_current_location_forecast(3)

        assert result.isError
        assert result.metadata["error_code"] == ERROR_IP_LOCATION

    @pytest.mark.asyncio
    async def test_weather_by_coordinates(self, service):
        result = await weather_server.get_weather_by_coordinates(39.9, 116.4)

        assert _text(result).startswith("📍 Coordinates: 39.9, 116.4")
        service.weather_by_coordinates.assert_awaited_once_with(39.9, 116.4)

    @pytest.mark.asyncio
    async def test_weather_by_invalid_coordinates(self, service):
        service.weather_by_coordinates.side_effect = InvalidCoordinatesError(100, 0)

        result = await weather_server.get_weather_by_coordinates(100, 0)

        assert result.isError
        assert result.metadata["error_code"] == ERROR_INVALID_COORDINATES

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_error_result(self, service):
        service.weather_by_coordinates.side_effect = RuntimeError("boom")

        result = await weather_server.get_weather_by_coordinates(1.0, 2.0)

        assert result.isError
        assert result.metadata["error_code"] == ERROR_UNEXPECTED
        assert "boom" in _text(result)


class TestResourcesAndPrompts:
    def test_status_resource(self):
        text = weather_server.weather_service_status()
        assert "Open-Meteo" in text
        assert "get_weather_by_coordinates" in text

    def test_prompt_with_location(self):
        messages = weather_server.weather_assistant(location="Paris", query_type="forecast")

        assert len(messages) == 1
        assert messages[0].role == "assistant"
        assert "weather forecast for Paris" in messages[0].content.text

    def test_prompt_defaults(self):
        messages = weather_server.weather_assistant()

        text = messages[0].content.text
        assert "current weather for your current location" in text
