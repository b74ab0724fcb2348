"""ABOUTME: Weather and location MCP server package.

The core (clients, normalizer, advisories, facade) is importable without
starting a server; ``weather_mcp.server`` builds the FastMCP instance.
"""

from .advisory import advise, advice_text
from .coordinates import validate_coordinates, distance_km
from .errors import (
    WeatherServiceError,
    LocationError,
    AddressNotFoundError,
    GeocodingUnavailableError,
    IpLocationUnavailableError,
    InvalidCoordinatesError,
    WeatherError,
    WeatherUnavailableError,
)
from .geocoding import GeocodingClient
from .ip_locator import IpLocator
from .models import (
    CompassPoint,
    Coordinate,
    CurrentConditions,
    DailyForecastEntry,
    ForecastResult,
    GeocodeResult,
    ResolvedLocation,
)
from .normalizer import angle_to_compass, weather_code_to_description
from .service import WeatherService
from .weather_client import WeatherClient

__version__ = "0.1.0"
__all__ = [
    "advise",
    "advice_text",
    "validate_coordinates",
    "distance_km",
    "WeatherServiceError",
    "LocationError",
    "AddressNotFoundError",
    "GeocodingUnavailableError",
    "IpLocationUnavailableError",
    "InvalidCoordinatesError",
    "WeatherError",
    "WeatherUnavailableError",
    "GeocodingClient",
    "IpLocator",
    "CompassPoint",
    "Coordinate",
    "CurrentConditions",
    "DailyForecastEntry",
    "ForecastResult",
    "GeocodeResult",
    "ResolvedLocation",
    "angle_to_compass",
    "weather_code_to_description",
    "WeatherService",
    "WeatherClient",
]
