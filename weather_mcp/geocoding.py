"""ABOUTME: Open-Meteo geocoding client - forward and reverse address lookup.

Forward lookups fail loudly with typed location errors. Reverse lookups are
advisory only: they never raise and fall back to the raw coordinate string.
"""

import logging
from typing import Optional

import httpx

from common.http_utils import safe_http_get, extract_error_reason

from . import config
from .coordinates import format_coordinate
from .errors import AddressNotFoundError, GeocodingUnavailableError
from .models import Coordinate, GeocodeResult
from .schemas import GeocodingHit, GeocodingResponse

logger = logging.getLogger(__name__)

# Open-Meteo does not score matches; this is a fixed placeholder.
GEOCODE_CONFIDENCE = 0.9


def build_display_address(name: Optional[str], region: Optional[str], country: Optional[str]) -> str:
    """Join name, region and country with ", ", skipping empty segments.

    Examples:
        >>> build_display_address("Beijing", "Beijing", "China")
        'Beijing, Beijing, China'
        >>> build_display_address("Beijing", None, "China")
        'Beijing, China'
    """
    segments = [segment.strip() for segment in (name, region, country) if segment and segment.strip()]
    return ", ".join(segments)


class GeocodingClient:
    """Client for the Open-Meteo geocoding API.

    Holds only read-only configuration, so one instance is shared by every
    request for the lifetime of the server.
    """

    def __init__(
        self,
        base_url: str = config.GEOCODING_API_BASE,
        timeout: float = config.HTTP_TIMEOUT_SECONDS,
        language: str = config.GEOCODING_LANGUAGE,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.language = language

    async def _get(self, path: str, params: dict) -> GeocodingResponse:
        resp = await safe_http_get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        return GeocodingResponse.model_validate(resp.json())

    async def forward(self, address: str) -> GeocodeResult:
        """Resolve a free-text address to its best-matching coordinates.

        Args:
            address: Address or place name (e.g., "Beijing", "New York")

        Returns:
            GeocodeResult for the single best match

        Raises:
            AddressNotFoundError: If the upstream returns no match
            GeocodingUnavailableError: If the request or payload parsing fails
        """
        query = address.strip() if isinstance(address, str) else ""
        if not query:
            raise AddressNotFoundError(address)

        logger.debug(f"Geocoding address: '{query}'")
        params = {
            "name": query,
            "count": config.GEOCODING_MAX_RESULTS,
            "language": self.language,
            "format": "json",
        }

        try:
            data = await self._get("/search", params)
        except httpx.HTTPStatusError as e:
            reason = extract_error_reason(e) or str(e)
            logger.error(f"Geocoding failed for '{query}': {reason}")
            raise GeocodingUnavailableError(reason) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Geocoding failed for '{query}': {e}")
            raise GeocodingUnavailableError(str(e) or type(e).__name__) from e

        if not data.results:
            logger.warning(f"Address not found: '{query}'")
            raise AddressNotFoundError(query)

        hit: GeocodingHit = data.results[0]
        result = GeocodeResult(
            display_address=build_display_address(hit.name, hit.admin1, hit.country),
            coordinate=Coordinate(hit.latitude, hit.longitude),
            city=hit.name,
            country=hit.country,
            confidence=GEOCODE_CONFIDENCE,
        )
        logger.info(f"Geocoded '{query}' to {result.display_address} ({hit.latitude}, {hit.longitude})")
        return result

    async def reverse(self, coordinate: Coordinate) -> str:
        """Describe a coordinate as an address, falling back to "lat, lon".

        Never raises: any failure or empty match yields the coordinate string.
        """
        fallback = format_coordinate(coordinate)
        params = {
            "lat": coordinate.latitude,
            "lon": coordinate.longitude,
            "language": self.language,
            "format": "json",
        }

        try:
            data = await self._get("/reverse", params)
        except Exception as e:
            logger.warning(f"Reverse geocoding failed for ({fallback}): {e}")
            return fallback

        if not data.results:
            logger.debug(f"No reverse geocoding match for ({fallback})")
            return fallback

        hit = data.results[0]
        return build_display_address(hit.name, hit.admin1, hit.country) or fallback
