"""ABOUTME: Tests for environment-driven configuration."""

from weather_mcp.config import WeatherConfig


class TestWeatherConfig:
    def test_defaults(self, monkeypatch):
        for name in ("WEATHER_API_BASE", "GEOCODING_API_BASE", "IP_API_BASE",
                     "WEATHER_HTTP_TIMEOUT", "DEFAULT_FORECAST_DAYS"):
            monkeypatch.delenv(name, raising=False)

        config = WeatherConfig(_env_file=None)

        assert config.weather_api_base == "https://api.open-meteo.com/v1"
        assert config.geocoding_api_base == "https://geocoding-api.open-meteo.com/v1"
        assert config.ip_api_base == "http://ip-api.com"
        assert config.weather_http_timeout == 10.0
        assert config.default_forecast_days == 5

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WEATHER_API_BASE", "https://wx.internal/v1")
        monkeypatch.setenv("WEATHER_HTTP_TIMEOUT", "3.5")
        monkeypatch.setenv("DEFAULT_FORECAST_DAYS", "7")

        config = WeatherConfig(_env_file=None)

        assert config.weather_api_base == "https://wx.internal/v1"
        assert config.weather_http_timeout == 3.5
        assert config.default_forecast_days == 7
