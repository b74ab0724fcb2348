"""ABOUTME: Aggregation facade composing location lookup and weather fetching.

This is the operation set the MCP tools call. Compositions are strictly
sequential: the weather request is only issued once the location step has
fully succeeded, and errors from either step propagate unchanged.
"""

import logging
from typing import Optional, Tuple

from . import config
from .geocoding import GeocodingClient
from .ip_locator import IpLocator
from .models import Coordinate, CurrentConditions, ForecastResult, GeocodeResult, ResolvedLocation
from .weather_client import WeatherClient

logger = logging.getLogger(__name__)


class WeatherService:
    """Uniform entry point over the geocoding, IP location and weather clients."""

    def __init__(
        self,
        geocoder: Optional[GeocodingClient] = None,
        ip_locator: Optional[IpLocator] = None,
        weather: Optional[WeatherClient] = None,
    ):
        self.geocoder = geocoder or GeocodingClient()
        self.ip_locator = ip_locator or IpLocator()
        self.weather = weather or WeatherClient()

    async def weather_for_address(self, address: str) -> Tuple[GeocodeResult, CurrentConditions]:
        """Geocode an address, then fetch its current conditions."""
        location = await self.geocoder.forward(address)
        conditions = await self.weather.current(location.coordinate, location.display_address)
        return location, conditions

    async def forecast_for_address(
        self, address: str, days: int = config.DEFAULT_FORECAST_DAYS
    ) -> Tuple[GeocodeResult, ForecastResult]:
        """Geocode an address, then fetch its forecast."""
        location = await self.geocoder.forward(address)
        forecast = await self.weather.forecast(location.coordinate, days, location.display_address)
        return location, forecast

    async def current_location_weather(self) -> Tuple[ResolvedLocation, CurrentConditions]:
        """Locate the caller by IP, then fetch current conditions there."""
        location = await self.ip_locator.current_location()
        conditions = await self.weather.current(location.coordinate, location.display_address)
        return location, conditions

    async def current_location_forecast(
        self, days: int = config.DEFAULT_FORECAST_DAYS
    ) -> Tuple[ResolvedLocation, ForecastResult]:
        """Locate the caller by IP, then fetch the forecast there."""
        location = await self.ip_locator.current_location()
        forecast = await self.weather.forecast(location.coordinate, days, location.display_address)
        return location, forecast

    async def weather_by_coordinates(self, latitude: float, longitude: float) -> CurrentConditions:
        """Fetch current conditions for explicit coordinates.

        Labelled with the 4-decimal coordinate; no address lookup is made.

        Raises:
            InvalidCoordinatesError: Before any upstream call, if out of range
        """
        coordinate = Coordinate.create(latitude, longitude)
        return await self.weather.current(coordinate)

    async def geocode_address(self, address: str) -> GeocodeResult:
        return await self.geocoder.forward(address)

    async def reverse_geocode(self, latitude: float, longitude: float) -> str:
        coordinate = Coordinate.create(latitude, longitude)
        return await self.geocoder.reverse(coordinate)
