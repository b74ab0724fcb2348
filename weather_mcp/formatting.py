"""ABOUTME: Display-text rendering of normalized weather and location results.

Pure string interpolation; every value arriving here is already normalized.
"""

from datetime import date

from .advisory import advice_text
from .models import CurrentConditions, ForecastResult, GeocodeResult


def format_current(weather: CurrentConditions) -> str:
    """Multi-line summary of current conditions."""
    return "\n".join([
        f"📍 Location: {weather.location_label}",
        f"🌡️ Temperature: {weather.temperature_c}°C (feels like {weather.feels_like_c}°C)",
        f"🌤️ Conditions: {weather.description}",
        f"💧 Humidity: {weather.humidity_pct}%",
        f"💨 Wind: {weather.wind_speed_kph} km/h ({weather.wind_direction.value})",
        f"🌡️ Pressure: {weather.pressure_hpa} hPa",
        f"🕐 Updated: {weather.observed_at}",
    ])


def _day_name(index: int, iso_date: str) -> str:
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    try:
        return date.fromisoformat(iso_date).strftime("%A")
    except ValueError:
        return iso_date


def format_forecast(forecast: ForecastResult) -> str:
    """Current conditions header followed by one block per forecast day."""
    current = forecast.current
    lines = [
        f"📍 {forecast.location_label} weather forecast",
        "",
        "🌟 Current conditions:",
        f"Temperature: {current.temperature_c}°C (feels like {current.feels_like_c}°C)",
        f"Conditions: {current.description}",
        f"Humidity: {current.humidity_pct}% | Wind: {current.wind_speed_kph} km/h",
        "",
        "📅 Upcoming days:",
    ]
    for index, day in enumerate(forecast.days):
        lines.append(f"{_day_name(index, day.date)} ({day.date}):")
        lines.append(f"  🌡️ {day.low_c}°C ~ {day.high_c}°C | {day.description}")
        lines.append(f"  💨 Wind: {day.wind_speed_kph} km/h | 🌧️ Chance of rain: {day.rain_chance_pct}%")
        lines.append("")
    return "\n".join(lines).strip()


def format_advice_block(conditions: CurrentConditions, heading: str = "💡 Advice:") -> str:
    return f"{heading}\n{advice_text(conditions)}"


def format_geocode(address: str, result: GeocodeResult) -> str:
    return "\n".join([
        "📍 Geocoding result:",
        "",
        f"Query: {address}",
        f"Address: {result.display_address}",
        f"Coordinates: {result.coordinate.latitude}, {result.coordinate.longitude}",
        f"City: {result.city}",
        f"Country: {result.country}",
        f"Confidence: {result.confidence}",
    ])


def status_text() -> str:
    """Plain-text service status served as the weather://status resource."""
    return "\n".join([
        "🌤️ Weather MCP server status",
        "",
        "✅ Server running",
        "✅ Weather API (Open-Meteo): free, no key required",
        "✅ Geocoding API (Open-Meteo Geocoding): free, no key required",
        "✅ IP location API (ip-api.com): free, no key required",
        "",
        "📋 Available tools:",
        "- get_weather_by_address: current weather for an address",
        "- get_forecast_by_address: multi-day forecast for an address",
        "- get_current_location_weather: current weather at the detected location",
        "- get_current_location_forecast: forecast at the detected location",
        "- get_weather_by_coordinates: current weather for latitude/longitude",
        "- geocode_address: convert an address to coordinates",
    ])
