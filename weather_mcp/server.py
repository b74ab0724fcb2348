"""ABOUTME: Weather MCP Server - Open-Meteo weather with Open-Meteo geocoding and IP location.

Exposes six tools, a status resource and an assistant prompt. No API keys are
required. Every failure is returned as an error-flagged CallToolResult so the
protocol layer never sees an exception.
"""

import time
from typing import Literal, Optional

from mcp.server.fastmcp import Context
from mcp.server.fastmcp.prompts.base import AssistantMessage, Message
from mcp.types import CallToolResult

from common.mcp_base import MCPServerBase
from common.validation import validate_text
from common.error_handling import (
    create_error_result,
    create_validation_error,
    create_unexpected_error,
)

from . import config
from .errors import (
    ERROR_ADDRESS_NOT_FOUND,
    ERROR_API,
    ERROR_GEOCODING,
    ERROR_INVALID_COORDINATES,
    ERROR_IP_LOCATION,
    ERROR_UNKNOWN,
    WeatherServiceError,
)
from .formatting import (
    format_advice_block,
    format_current,
    format_forecast,
    format_geocode,
    status_text,
)
from .service import WeatherService

# Initialize MCP server with base class
server = MCPServerBase(
    "weather",
    instructions="Weather and location lookups backed by free Open-Meteo and ip-api.com services.",
)
mcp = server.mcp
logger = server.logger

# Process-wide; holds only read-only configuration
service = WeatherService()

STATUS_RESOURCE_URI = "weather://status"

# Caller-facing hints per error code
ERROR_HINTS = {
    ERROR_ADDRESS_NOT_FOUND: "Check the spelling or try a larger nearby place.",
    ERROR_GEOCODING: "The geocoding service is unavailable right now.",
    ERROR_IP_LOCATION: "Try again with an explicit address instead.",
    ERROR_INVALID_COORDINATES: "Latitude must be within [-90, 90] and longitude within [-180, 180].",
    ERROR_API: "The weather service rejected the request.",
    ERROR_UNKNOWN: "The weather service could not be reached.",
}


# ============================================================================
# HELPERS
# ============================================================================


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def _validate_address(address: str) -> Optional[CallToolResult]:
    is_valid, error_msg = validate_text(address, "address", config.MAX_ADDRESS_LENGTH)
    if is_valid:
        return None
    logger.warning(f"Address validation failed: {error_msg}")
    return create_validation_error(field_name="address", error_message=error_msg, field_value=address)


def _failure_result(tool_name: str, action: str, error: Exception, **context) -> CallToolResult:
    """Render any exception raised by the service as an error result."""
    if isinstance(error, WeatherServiceError):
        server.log_tool_error(tool_name, error.code, error.message, **context)
        hint = ERROR_HINTS.get(error.code)
        message = f"{action} failed: {error.message}"
        if hint:
            message = f"{message}. {hint}"
        return create_error_result(message, error.code, f"{error.family}_error", **context)

    logger.error(f"Unexpected error in {tool_name}: {error}", exc_info=True)
    return create_unexpected_error(str(error), tool=tool_name, **context)


# ============================================================================
# MCP TOOL DEFINITIONS
# ============================================================================


@mcp.tool()
async def get_weather_by_address(address: str, ctx: Context = None) -> CallToolResult:
    """Get current weather for an address or place name.

    Args:
        address: Address or place name, e.g. "Beijing", "Shanghai Pudong", "New York"

    Returns:
        Current conditions with practical advice
    """
    tool_name = "get_weather_by_address"
    started = time.perf_counter()
    server.log_tool_start(tool_name, address=address)

    invalid = _validate_address(address)
    if invalid:
        return invalid

    if ctx:
        await ctx.info(f"Fetching current weather for {address}")

    try:
        location, weather = await service.weather_for_address(address)
    except Exception as e:
        return _failure_result(tool_name, "Weather lookup", e, address=address)

    text = f"{format_current(weather)}\n\n{format_advice_block(weather)}"
    server.log_tool_complete(tool_name, location=location.display_address, duration_ms=_elapsed_ms(started))
    return server.create_success_result(text, {
        "address": location.display_address,
        "latitude": location.coordinate.latitude,
        "longitude": location.coordinate.longitude,
    })


@mcp.tool()
async def get_forecast_by_address(
    address: str,
    days: int = config.DEFAULT_FORECAST_DAYS,
    ctx: Context = None
) -> CallToolResult:
    """Get a multi-day weather forecast for an address or place name.

    Args:
        address: Address or place name
        days: Number of forecast days (clamped to 1-16, default 5)

    Returns:
        Current conditions, one block per forecast day, and advice
    """
    tool_name = "get_forecast_by_address"
    started = time.perf_counter()
    server.log_tool_start(tool_name, address=address, days=days)

    invalid = _validate_address(address)
    if invalid:
        return invalid

    if ctx:
        await ctx.info(f"Fetching {days}-day forecast for {address}")

    try:
        location, forecast = await service.forecast_for_address(address, days)
    except Exception as e:
        return _failure_result(tool_name, "Forecast lookup", e, address=address, days=days)

    text = f"{format_forecast(forecast)}\n\n{format_advice_block(forecast.current, '💡 Advice for current conditions:')}"
    server.log_tool_complete(tool_name, location=location.display_address, days=len(forecast.days),
                             duration_ms=_elapsed_ms(started))
    return server.create_success_result(text, {
        "address": location.display_address,
        "latitude": location.coordinate.latitude,
        "longitude": location.coordinate.longitude,
        "days": len(forecast.days),
    })


@mcp.tool()
async def get_current_location_weather(ctx: Context = None) -> CallToolResult:
    """Get current weather at the location detected from this server's IP address."""
    tool_name = "get_current_location_weather"
    started = time.perf_counter()
    server.log_tool_start(tool_name)

    if ctx:
        await ctx.info("Detecting current location")

    try:
        location, weather = await service.current_location_weather()
    except Exception as e:
        return _failure_result(tool_name, "Current location weather lookup", e)

    text = (
        f"🌍 Detected location: {location.display_address}\n\n"
        f"{format_current(weather)}\n\n{format_advice_block(weather)}"
    )
    server.log_tool_complete(tool_name, location=location.display_address, duration_ms=_elapsed_ms(started))
    return server.create_success_result(text, {
        "address": location.display_address,
        "timezone": location.timezone,
    })


@mcp.tool()
async def get_current_location_forecast(
    days: int = config.DEFAULT_FORECAST_DAYS,
    ctx: Context = None
) -> CallToolResult:
    """Get a multi-day forecast at the location detected from this server's IP address.

    Args:
        days: Number of forecast days (clamped to 1-16, default 5)
    """
    tool_name = "get_current_location_forecast"
    started = time.perf_counter()
    server.log_tool_start(tool_name, days=days)

    if ctx:
        await ctx.info("Detecting current location")

    try:
        location, forecast = await service.current_location_forecast(days)
    except Exception as e:
        return _failure_result(tool_name, "Current location forecast lookup", e, days=days)

    text = (
        f"🌍 Detected location: {location.display_address}\n\n"
        f"{format_forecast(forecast)}\n\n"
        f"{format_advice_block(forecast.current, '💡 Advice for current conditions:')}"
    )
    server.log_tool_complete(tool_name, location=location.display_address, days=len(forecast.days),
                             duration_ms=_elapsed_ms(started))
    return server.create_success_result(text, {
        "address": location.display_address,
        "timezone": location.timezone,
        "days": len(forecast.days),
    })


@mcp.tool()
async def get_weather_by_coordinates(latitude: float, longitude: float, ctx: Context = None) -> CallToolResult:
    """Get current weather for latitude/longitude coordinates.

    Args:
        latitude: Latitude between -90 and 90
        longitude: Longitude between -180 and 180
    """
    tool_name = "get_weather_by_coordinates"
    started = time.perf_counter()
    server.log_tool_start(tool_name, latitude=latitude, longitude=longitude)

    try:
        weather = await service.weather_by_coordinates(latitude, longitude)
    except Exception as e:
        return _failure_result(tool_name, "Weather lookup", e, latitude=latitude, longitude=longitude)

    text = (
        f"📍 Coordinates: {latitude}, {longitude}\n\n"
        f"{format_current(weather)}\n\n{format_advice_block(weather)}"
    )
    server.log_tool_complete(tool_name, location=weather.location_label, duration_ms=_elapsed_ms(started))
    return server.create_success_result(text, {"latitude": latitude, "longitude": longitude})


@mcp.tool()
async def geocode_address(address: str, ctx: Context = None) -> CallToolResult:
    """Convert an address or place name to latitude/longitude coordinates.

    Args:
        address: Address to resolve
    """
    tool_name = "geocode_address"
    started = time.perf_counter()
    server.log_tool_start(tool_name, address=address)

    invalid = _validate_address(address)
    if invalid:
        return invalid

    try:
        result = await service.geocode_address(address)
    except Exception as e:
        return _failure_result(tool_name, "Geocoding", e, address=address)

    server.log_tool_complete(tool_name, location=result.display_address, duration_ms=_elapsed_ms(started))
    return server.create_success_result(format_geocode(address, result), {
        "address": result.display_address,
        "latitude": result.coordinate.latitude,
        "longitude": result.coordinate.longitude,
        "confidence": result.confidence,
    })


# ============================================================================
# RESOURCES AND PROMPTS
# ============================================================================


@mcp.resource(
    STATUS_RESOURCE_URI,
    name="weather-service-status",
    description="Configuration and availability of the weather service",
    mime_type="text/plain",
)
def weather_service_status() -> str:
    return status_text()


@mcp.prompt(name="weather-assistant", description="Assistant that helps users look up weather information")
def weather_assistant(
    location: Optional[str] = None,
    query_type: Literal["current", "forecast"] = "current",
) -> list[Message]:
    """Opening message for a weather conversation.

    Args:
        location: Optional place the user is asking about
        query_type: "current" for current weather, "forecast" for a forecast
    """
    what = "current weather" if query_type == "current" else "weather forecast"
    where = location or "your current location"
    follow_up = (
        f"Looking up the weather for {location}..."
        if location
        else "Tell me an address, or I can check the weather where you are right now."
    )
    text = "\n".join([
        f"Hi! I'm your weather assistant. I can look up the {what} for {where}.",
        "",
        "I can:",
        "🌤️ Get real-time weather",
        "📅 Get a forecast for the coming days",
        "📍 Look up weather by address or coordinates",
        "🌍 Detect your current location automatically",
        "💡 Offer practical weather advice",
        "",
        follow_up,
    ])
    return [AssistantMessage(text)]


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================


if __name__ == "__main__":
    server.run(transport="stdio")
