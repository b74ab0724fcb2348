"""ABOUTME: Open-Meteo forecast client - current conditions and multi-day forecasts.

Fetches raw data, validates it against the upstream schemas and hands it to
the normalizer. Upstream failures surface as WeatherUnavailableError:
API_ERROR when the upstream answered with an error, UNKNOWN_ERROR for
transport failures and malformed payloads.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from common.http_utils import safe_http_get, extract_error_reason

from . import config
from .coordinates import format_coordinate
from .errors import ERROR_API, ERROR_UNKNOWN, WeatherUnavailableError
from .models import Coordinate, CurrentConditions, ForecastResult
from .normalizer import normalize_current, normalize_forecast
from .schemas import OpenMeteoForecastResponse

logger = logging.getLogger(__name__)

# ============================================================================
# CONSTANTS
# ============================================================================

CURRENT_WEATHER_PARAMS = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "wind_speed_10m",
    "wind_direction_10m",
]

DAILY_FORECAST_PARAMS = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "uv_index_max",
    "precipitation_sum",
    "precipitation_probability_max",
    "wind_speed_10m_max",
    "wind_direction_10m_dominant",
]

LOCATION_LABEL_PRECISION = 4


def clamp_forecast_days(days: int) -> int:
    """Clamp a requested day count into the upstream's supported range."""
    return max(config.MIN_FORECAST_DAYS, min(config.MAX_FORECAST_DAYS, int(days)))


class WeatherClient:
    """Client for the Open-Meteo forecast endpoint.

    Stateless apart from its base URL and timeout; safe to share across
    concurrent requests.
    """

    def __init__(self, base_url: str = config.WEATHER_API_BASE, timeout: float = config.HTTP_TIMEOUT_SECONDS):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _build_base_params(self, coordinate: Coordinate) -> Dict[str, Any]:
        return {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "current": ",".join(CURRENT_WEATHER_PARAMS),
            "timezone": "auto",
        }

    async def _fetch(self, params: Dict[str, Any], kind: str) -> OpenMeteoForecastResponse:
        """Fetch and validate a forecast response.

        Raises:
            WeatherUnavailableError: API_ERROR for upstream error responses,
                UNKNOWN_ERROR for transport or parsing failures
        """
        lat, lon = params["latitude"], params["longitude"]
        try:
            resp = await safe_http_get(f"{self.base_url}/forecast", params=params, timeout=self.timeout)
            return OpenMeteoForecastResponse.model_validate(resp.json())
        except httpx.HTTPStatusError as e:
            reason = extract_error_reason(e) or str(e)
            logger.error(f"Upstream rejected {kind} weather request for ({lat}, {lon}): {reason}")
            raise WeatherUnavailableError(reason, ERROR_API) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch {kind} weather for ({lat}, {lon}): {e}")
            raise WeatherUnavailableError(str(e) or type(e).__name__, ERROR_UNKNOWN) from e

    async def current(self, coordinate: Coordinate, location_label: Optional[str] = None) -> CurrentConditions:
        """Fetch current conditions for a coordinate.

        Args:
            coordinate: Where to fetch weather for
            location_label: Display label; defaults to the 4-decimal coordinate

        Returns:
            Normalized CurrentConditions
        """
        coordinate = Coordinate.create(coordinate.latitude, coordinate.longitude)
        logger.debug(f"Fetching current weather for ({format_coordinate(coordinate)})")

        data = await self._fetch(self._build_base_params(coordinate), "current")
        label = location_label or format_coordinate(coordinate, LOCATION_LABEL_PRECISION)
        conditions = normalize_current(data.current, label)

        logger.debug(f"Current weather for {label}: {conditions.temperature_c}°C, {conditions.description}")
        return conditions

    async def forecast(
        self,
        coordinate: Coordinate,
        days: int = config.DEFAULT_FORECAST_DAYS,
        location_label: Optional[str] = None,
    ) -> ForecastResult:
        """Fetch current conditions plus a daily forecast.

        ``days`` is silently clamped into [1, 16].

        Args:
            coordinate: Where to fetch weather for
            days: Number of forecast days requested
            location_label: Display label; defaults to the upstream-reported
                grid coordinate with 4 decimals

        Returns:
            ForecastResult with one entry per upstream day, in upstream order
        """
        coordinate = Coordinate.create(coordinate.latitude, coordinate.longitude)
        forecast_days = clamp_forecast_days(days)
        if forecast_days != days:
            logger.debug(f"Clamped forecast days from {days} to {forecast_days}")

        params = self._build_base_params(coordinate)
        params["daily"] = ",".join(DAILY_FORECAST_PARAMS)
        params["forecast_days"] = forecast_days

        data = await self._fetch(params, "forecast")
        label = location_label or format_coordinate(
            Coordinate(data.latitude, data.longitude), LOCATION_LABEL_PRECISION
        )
        result = normalize_forecast(data, label)

        logger.debug(f"Fetched {len(result.days)}-day forecast for {label}")
        return result
