"""ABOUTME: Pydantic schemas for raw upstream API payloads.

Only the fields the normalizer reads are declared; anything else the upstream
adds is ignored, so new upstream fields never break parsing. A payload that
lacks a required field fails validation and is reported as a parsing failure
by the client that fetched it.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# OPEN-METEO FORECAST API
# ============================================================================

class OpenMeteoCurrent(BaseModel):
    """``current`` block of an Open-Meteo forecast response."""

    time: str
    temperature_2m: float
    relative_humidity_2m: float
    apparent_temperature: float
    is_day: int = 1
    precipitation: Optional[float] = None
    weather_code: int
    cloud_cover: Optional[float] = None
    pressure_msl: float
    wind_speed_10m: float
    wind_direction_10m: float


class OpenMeteoDaily(BaseModel):
    """``daily`` block: parallel arrays indexed by day."""

    time: List[str]
    weather_code: List[Optional[int]] = Field(default_factory=list)
    temperature_2m_max: List[Optional[float]] = Field(default_factory=list)
    temperature_2m_min: List[Optional[float]] = Field(default_factory=list)
    uv_index_max: List[Optional[float]] = Field(default_factory=list)
    precipitation_sum: List[Optional[float]] = Field(default_factory=list)
    precipitation_probability_max: List[Optional[float]] = Field(default_factory=list)
    wind_speed_10m_max: List[Optional[float]] = Field(default_factory=list)
    wind_direction_10m_dominant: List[Optional[float]] = Field(default_factory=list)


class OpenMeteoForecastResponse(BaseModel):
    latitude: float
    longitude: float
    timezone: Optional[str] = None
    current: OpenMeteoCurrent
    daily: Optional[OpenMeteoDaily] = None


# ============================================================================
# OPEN-METEO GEOCODING API
# ============================================================================

class GeocodingHit(BaseModel):
    name: str
    latitude: float
    longitude: float
    country: str = ""
    admin1: Optional[str] = None
    timezone: Optional[str] = None


class GeocodingResponse(BaseModel):
    """Search/reverse response; ``results`` is absent when nothing matched."""

    results: Optional[List[GeocodingHit]] = None


# ============================================================================
# IP-API
# ============================================================================

class IpApiResponse(BaseModel):
    status: str
    message: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    timezone: Optional[str] = None
    query: Optional[str] = None
