"""ABOUTME: Coordinate range validation and small geographic helpers."""

import math
from typing import Optional

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

EARTH_RADIUS_KM = 6371.0


def validate_coordinates(latitude, longitude) -> bool:
    """Return True iff latitude is in [-90, 90] and longitude in [-180, 180].

    Total function: non-numeric input and NaN are simply invalid.
    """
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError):
        return False
    return MIN_LATITUDE <= lat <= MAX_LATITUDE and MIN_LONGITUDE <= lon <= MAX_LONGITUDE


def distance_km(a, b) -> float:
    """Great-circle (haversine) distance between two coordinates in kilometres."""
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude)) * math.cos(math.radians(b.latitude)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def _plain_number(value: float) -> str:
    """Shortest rendering of a value; whole numbers drop the ".0"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_coordinate(coordinate, precision: Optional[int] = None) -> str:
    """Render a coordinate as "lat, lon", optionally with fixed decimals."""
    if precision is None:
        return f"{_plain_number(coordinate.latitude)}, {_plain_number(coordinate.longitude)}"
    return f"{coordinate.latitude:.{precision}f}, {coordinate.longitude:.{precision}f}"
