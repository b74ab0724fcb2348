"""ABOUTME: Environment-driven configuration for the weather MCP server.

Values come from the environment (or a .env file) once at import time. Clients
take explicit overrides in their constructors, so tests never need to touch
the environment.
"""

from pydantic_settings import BaseSettings


class WeatherConfig(BaseSettings):
    """Weather server configuration from environment."""

    # Upstream API base URLs (all keyless)
    weather_api_base: str = "https://api.open-meteo.com/v1"
    geocoding_api_base: str = "https://geocoding-api.open-meteo.com/v1"
    ip_api_base: str = "http://ip-api.com"  # free tier is HTTP only

    # Per-request timeout applied by the shared HTTP helper
    weather_http_timeout: float = 10.0

    default_forecast_days: int = 5

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = WeatherConfig()

WEATHER_API_BASE = settings.weather_api_base
GEOCODING_API_BASE = settings.geocoding_api_base
IP_API_BASE = settings.ip_api_base
HTTP_TIMEOUT_SECONDS = settings.weather_http_timeout

# Forecast limits (Open-Meteo supports up to 16 days)
MIN_FORECAST_DAYS = 1
MAX_FORECAST_DAYS = 16
DEFAULT_FORECAST_DAYS = settings.default_forecast_days

# Geocoding request options
GEOCODING_MAX_RESULTS = 1
GEOCODING_LANGUAGE = "zh,en"

# Tool input limits
MAX_ADDRESS_LENGTH = 256
