"""ABOUTME: Maps raw Open-Meteo payloads onto the normalized domain model.

Performs the unit rounding, WMO weather-code translation and wind-angle to
compass conversion. Everything here is pure: no I/O, no logging of payloads.
"""

import math
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .models import CompassPoint, CurrentConditions, DailyForecastEntry, ForecastResult
from .schemas import OpenMeteoCurrent, OpenMeteoDaily, OpenMeteoForecastResponse

# ============================================================================
# CONSTANTS
# ============================================================================

# Stand-ins for fields the upstream does not provide. Approximations, not data.
DEFAULT_VISIBILITY_KM = 10
DEFAULT_UV_INDEX = 0
DEFAULT_DAILY_HUMIDITY_PCT = 50

UNKNOWN_WEATHER = "Unknown weather"

OBSERVED_AT_FORMAT = "%Y-%m-%d %H:%M"

COMPASS_SECTOR_DEGREES = 22.5
COMPASS_POINTS: List[CompassPoint] = list(CompassPoint)

# ============================================================================
# WMO WEATHER CODES
# ============================================================================

# (day, night) label pairs. The night labels were never filled in separately
# and mirror the day labels.
WMO_CODES: Dict[int, Tuple[str, str]] = {
    0: ("Clear sky", "Clear sky"),
    1: ("Mainly clear", "Mainly clear"),
    2: ("Partly cloudy", "Partly cloudy"),
    3: ("Overcast", "Overcast"),
    45: ("Fog", "Fog"),
    48: ("Depositing rime fog", "Depositing rime fog"),
    51: ("Light drizzle", "Light drizzle"),
    53: ("Moderate drizzle", "Moderate drizzle"),
    55: ("Dense drizzle", "Dense drizzle"),
    56: ("Light freezing drizzle", "Light freezing drizzle"),
    57: ("Dense freezing drizzle", "Dense freezing drizzle"),
    61: ("Slight rain", "Slight rain"),
    63: ("Moderate rain", "Moderate rain"),
    65: ("Heavy rain", "Heavy rain"),
    66: ("Light freezing rain", "Light freezing rain"),
    67: ("Heavy freezing rain", "Heavy freezing rain"),
    71: ("Slight snow", "Slight snow"),
    73: ("Moderate snow", "Moderate snow"),
    75: ("Heavy snow", "Heavy snow"),
    77: ("Snow grains", "Snow grains"),
    80: ("Slight rain showers", "Slight rain showers"),
    81: ("Moderate rain showers", "Moderate rain showers"),
    82: ("Violent rain showers", "Violent rain showers"),
    85: ("Slight snow showers", "Slight snow showers"),
    86: ("Heavy snow showers", "Heavy snow showers"),
    95: ("Thunderstorm", "Thunderstorm"),
    96: ("Thunderstorm with slight hail", "Thunderstorm with slight hail"),
    99: ("Thunderstorm with heavy hail", "Thunderstorm with heavy hail"),
}


# ============================================================================
# SCALAR CONVERSIONS
# ============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Python's round() uses banker's rounding (round(2.5) == 2); the domain
    model rounds 2.5 to 3 and -2.5 to -2.
    """
    return int(math.floor(value + 0.5))


def clamp_percent(value: Optional[float]) -> int:
    """Round a percentage and clamp it into [0, 100]. Missing values become 0."""
    if value is None:
        return 0
    return max(0, min(100, round_half_up(value)))


def weather_code_to_description(code: Optional[int], is_daytime: bool = True) -> str:
    """Translate a WMO weather code into a human-readable label.

    Args:
        code: WMO weather code from the upstream
        is_daytime: Whether the observation is during daylight

    Returns:
        Label for the code, or UNKNOWN_WEATHER for codes outside the table
    """
    labels = WMO_CODES.get(code) if code is not None else None
    if labels is None:
        return UNKNOWN_WEATHER
    day, night = labels
    return day if is_daytime else night


def angle_to_compass(degrees: float) -> CompassPoint:
    """Map a wind direction in degrees to one of 16 compass points.

    Any real angle is accepted; values outside [0, 360) wrap around.

    Examples:
        >>> angle_to_compass(0)
        <CompassPoint.N: 'N'>
        >>> angle_to_compass(-90)
        <CompassPoint.W: 'W'>
    """
    index = round_half_up(degrees / COMPASS_SECTOR_DEGREES) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def format_observed_at(raw_time: str) -> str:
    """Render upstream local ISO time as "YYYY-MM-DD HH:MM".

    Open-Meteo already reports times in the location's timezone when called
    with timezone=auto. Unparseable values are passed through unchanged.
    """
    try:
        return datetime.fromisoformat(raw_time).strftime(OBSERVED_AT_FORMAT)
    except ValueError:
        return raw_time


def _safe_array_get(arr: List[Any], index: int, default: Any = None) -> Any:
    """Safely get item from array, returning default if index out of bounds or null."""
    value = arr[index] if index < len(arr) else None
    return default if value is None else value


# ============================================================================
# PAYLOAD NORMALIZATION
# ============================================================================


def normalize_current(current: OpenMeteoCurrent, location_label: str) -> CurrentConditions:
    """Build CurrentConditions from an Open-Meteo ``current`` block.

    Args:
        current: Validated ``current`` block
        location_label: Label to show for the location

    Returns:
        CurrentConditions with every numeric field in whole units
    """
    return CurrentConditions(
        location_label=location_label,
        temperature_c=round_half_up(current.temperature_2m),
        feels_like_c=round_half_up(current.apparent_temperature),
        description=weather_code_to_description(current.weather_code, bool(current.is_day)),
        humidity_pct=clamp_percent(current.relative_humidity_2m),
        wind_speed_kph=round_half_up(current.wind_speed_10m),
        wind_direction=angle_to_compass(current.wind_direction_10m),
        pressure_hpa=round_half_up(current.pressure_msl),
        visibility_km=DEFAULT_VISIBILITY_KM,
        uv_index=DEFAULT_UV_INDEX,
        observed_at=format_observed_at(current.time),
    )


def normalize_daily(daily: Optional[OpenMeteoDaily]) -> Tuple[DailyForecastEntry, ...]:
    """Build one DailyForecastEntry per upstream day, keeping upstream order.

    Args:
        daily: Validated ``daily`` block (None yields no entries)

    Returns:
        Tuple of entries, index 0 being the first forecast day
    """
    if daily is None:
        return ()

    entries = []
    for i, date in enumerate(daily.time):
        entries.append(
            DailyForecastEntry(
                date=date,
                high_c=round_half_up(_safe_array_get(daily.temperature_2m_max, i, 0.0)),
                low_c=round_half_up(_safe_array_get(daily.temperature_2m_min, i, 0.0)),
                description=weather_code_to_description(_safe_array_get(daily.weather_code, i), True),
                humidity_pct=DEFAULT_DAILY_HUMIDITY_PCT,
                wind_speed_kph=round_half_up(_safe_array_get(daily.wind_speed_10m_max, i, 0.0)),
                rain_chance_pct=clamp_percent(_safe_array_get(daily.precipitation_probability_max, i)),
            )
        )
    return tuple(entries)


def normalize_forecast(payload: OpenMeteoForecastResponse, location_label: str) -> ForecastResult:
    """Build a ForecastResult from a full forecast response."""
    current = normalize_current(payload.current, location_label)
    return ForecastResult(
        location_label=location_label,
        current=current,
        days=normalize_daily(payload.daily),
    )
