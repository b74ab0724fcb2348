"""ABOUTME: Approximate caller location from the network origin via ip-api.com."""

import logging

import httpx

from common.http_utils import safe_http_get

from . import config
from .errors import IpLocationUnavailableError
from .models import Coordinate, ResolvedLocation
from .schemas import IpApiResponse

logger = logging.getLogger(__name__)

IP_API_FIELDS = "status,message,country,city,lat,lon,timezone,query"
IP_API_FAIL_STATUS = "fail"


class IpLocator:
    """Resolves the server's public IP to a city-level location.

    No IP is sent; the upstream infers it from the connection.
    """

    def __init__(self, base_url: str = config.IP_API_BASE, timeout: float = config.HTTP_TIMEOUT_SECONDS):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def current_location(self) -> ResolvedLocation:
        """Look up the current location.

        Returns:
            ResolvedLocation with display address "{city}, {country}"

        Raises:
            IpLocationUnavailableError: If the upstream reports failure or the
                request cannot be completed
        """
        try:
            resp = await safe_http_get(
                f"{self.base_url}/json/",
                params={"fields": IP_API_FIELDS},
                timeout=self.timeout,
            )
            data = IpApiResponse.model_validate(resp.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"IP location lookup failed: {e}")
            raise IpLocationUnavailableError(str(e) or type(e).__name__) from e

        if data.status == IP_API_FAIL_STATUS:
            message = data.message or "unknown reason"
            logger.warning(f"IP location lookup rejected: {message}")
            raise IpLocationUnavailableError(message)

        if data.lat is None or data.lon is None:
            raise IpLocationUnavailableError("response did not include coordinates")

        city = data.city or ""
        country = data.country or ""
        location = ResolvedLocation(
            display_address=f"{city}, {country}",
            coordinate=Coordinate(data.lat, data.lon),
            city=city,
            country=country,
            timezone=data.timezone,
        )
        logger.info(f"Resolved IP {data.query} to {location.display_address} ({data.lat}, {data.lon})")
        return location
