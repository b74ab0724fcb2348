"""ABOUTME: Pytest configuration and shared fixtures for weather MCP tests.

Provides sample upstream payloads and helpers for stubbing the shared HTTP
helper so no test touches the network.
"""

from unittest.mock import AsyncMock

import httpx
import pytest


def make_response(payload, status_code: int = 200, url: str = "https://example.test/") -> httpx.Response:
    """Build an httpx.Response carrying a JSON payload."""
    return httpx.Response(status_code, json=payload, request=httpx.Request("GET", url))


def make_status_error(payload, status_code: int = 400) -> httpx.HTTPStatusError:
    """Build the error safe_http_get raises for a non-2xx response."""
    response = make_response(payload, status_code)
    return httpx.HTTPStatusError(
        f"Client error '{status_code}' for url 'https://example.test/'",
        request=response.request,
        response=response,
    )


@pytest.fixture
def stub_http(monkeypatch):
    """Patch safe_http_get inside a client module.

    Usage:
        mock = stub_http("weather_mcp.geocoding", return_value=make_response({...}))
        mock = stub_http("weather_mcp.ip_locator", side_effect=httpx.ConnectError("boom"))
    """
    def _stub(module_path: str, **kwargs) -> AsyncMock:
        mock = AsyncMock(**kwargs)
        monkeypatch.setattr(f"{module_path}.safe_http_get", mock)
        return mock

    return _stub


@pytest.fixture
def current_block():
    """Open-Meteo ``current`` block as returned with timezone=auto."""
    return {
        "time": "2024-01-15T14:30",
        "interval": 900,
        "temperature_2m": 21.5,
        "relative_humidity_2m": 65,
        "apparent_temperature": 20.4,
        "is_day": 1,
        "precipitation": 0.0,
        "weather_code": 2,
        "cloud_cover": 40,
        "pressure_msl": 1013.6,
        "wind_speed_10m": 12.5,
        "wind_direction_10m": 185.0,
    }


@pytest.fixture
def mock_current_weather(current_block):
    """Open-Meteo forecast response containing only current conditions."""
    return {
        "latitude": 39.875,
        "longitude": 116.375,
        "timezone": "Asia/Shanghai",
        "current": current_block,
    }


@pytest.fixture
def mock_forecast_weather(current_block):
    """Open-Meteo forecast response with current conditions and three days."""
    return {
        "latitude": 39.875,
        "longitude": 116.375,
        "timezone": "Asia/Shanghai",
        "current": current_block,
        "daily": {
            "time": ["2024-01-15", "2024-01-16", "2024-01-17"],
            "weather_code": [2, 63, 71],
            "temperature_2m_max": [24.6, 18.2, 1.5],
            "temperature_2m_min": [12.4, 9.5, -3.5],
            "uv_index_max": [4.1, 2.0, 1.2],
            "precipitation_sum": [0.0, 8.4, 2.1],
            "precipitation_probability_max": [5, 80, None],
            "wind_speed_10m_max": [14.4, 30.5, 22.0],
            "wind_direction_10m_dominant": [180, 200, 350],
        },
    }


@pytest.fixture
def mock_geocoding_hit():
    """Single Open-Meteo geocoding match for Beijing."""
    return {
        "id": 1816670,
        "name": "Beijing",
        "latitude": 39.9,
        "longitude": 116.4,
        "country_code": "CN",
        "admin1": "Beijing",
        "country": "China",
        "timezone": "Asia/Shanghai",
    }


@pytest.fixture
def mock_ip_location():
    """Successful ip-api.com response."""
    return {
        "status": "success",
        "country": "Germany",
        "city": "Berlin",
        "lat": 52.52,
        "lon": 13.405,
        "timezone": "Europe/Berlin",
        "query": "203.0.113.7",
    }
