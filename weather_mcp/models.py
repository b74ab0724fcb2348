"""ABOUTME: Normalized domain model for weather and location results.

Every entity is a frozen dataclass built fresh for one request. None of them
keeps a reference to the upstream payload it was derived from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .coordinates import validate_coordinates
from .errors import InvalidCoordinatesError


class CompassPoint(str, Enum):
    """16-point compass rose, clockwise from north."""
    N = "N"
    NNE = "NNE"
    NE = "NE"
    ENE = "ENE"
    E = "E"
    ESE = "ESE"
    SE = "SE"
    SSE = "SSE"
    S = "S"
    SSW = "SSW"
    SW = "SW"
    WSW = "WSW"
    W = "W"
    WNW = "WNW"
    NW = "NW"
    NNW = "NNW"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    @classmethod
    def create(cls, latitude: float, longitude: float) -> "Coordinate":
        """Build a coordinate, rejecting out-of-range values.

        Raises:
            InvalidCoordinatesError: If either value is outside its range
        """
        if not validate_coordinates(latitude, longitude):
            raise InvalidCoordinatesError(latitude, longitude)
        return cls(float(latitude), float(longitude))


@dataclass(frozen=True)
class ResolvedLocation:
    """Location produced by geocoding or IP lookup."""
    display_address: str
    coordinate: Coordinate
    city: str
    country: str
    timezone: Optional[str] = None


@dataclass(frozen=True)
class GeocodeResult:
    """Best forward-geocoding match.

    ``confidence`` is a fixed placeholder, not a measured score; the
    geocoding upstream does not report one.
    """
    display_address: str
    coordinate: Coordinate
    city: str
    country: str
    confidence: float


@dataclass(frozen=True)
class CurrentConditions:
    location_label: str
    temperature_c: int
    feels_like_c: int
    description: str
    humidity_pct: int
    wind_speed_kph: int
    wind_direction: CompassPoint
    pressure_hpa: int
    visibility_km: int
    uv_index: int
    observed_at: str


@dataclass(frozen=True)
class DailyForecastEntry:
    date: str
    high_c: int
    low_c: int
    description: str
    humidity_pct: int
    wind_speed_kph: int
    rain_chance_pct: int


@dataclass(frozen=True)
class ForecastResult:
    """Current conditions plus chronological daily entries (index 0 = today)."""
    location_label: str
    current: CurrentConditions
    days: Tuple[DailyForecastEntry, ...]
